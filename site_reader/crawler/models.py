# site_reader/crawler/models.py
"""
Data models for the SiteReader crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True, slots=True)
class PageRecord:
    """Title and cleaned text of one successfully fetched page."""

    url: str
    title: str
    content: str


@dataclass(frozen=True, slots=True)
class FrontierEntry:
    """A discovered URL waiting to be processed, with its discovery depth."""

    url: str
    depth: int


@dataclass(frozen=True, slots=True)
class Success:
    entry: FrontierEntry
    record: PageRecord
    status: str = field(default="success", init=False)


@dataclass(frozen=True, slots=True)
class Skipped:
    entry: FrontierEntry
    reason: str
    status: str = field(default="skipped", init=False)


@dataclass(frozen=True, slots=True)
class Failed:
    entry: FrontierEntry
    reason: str
    status: str = field(default="failed", init=False)


CrawlOutcome = Union[Success, Skipped, Failed]


@dataclass(slots=True)
class CrawlReport:
    """Everything one crawl produced: pages in completion order and one outcome per dequeued entry."""

    start_url: str
    pages: List[PageRecord] = field(default_factory=list)
    outcomes: List[CrawlOutcome] = field(default_factory=list)

    @property
    def failed(self) -> List[Failed]:
        return [o for o in self.outcomes if isinstance(o, Failed)]

    @property
    def skipped(self) -> List[Skipped]:
        return [o for o in self.outcomes if isinstance(o, Skipped)]

    def summary(self) -> dict[str, int]:
        return {
            "pages": len(self.pages),
            "failed": len(self.failed),
            "skipped": len(self.skipped),
        }
