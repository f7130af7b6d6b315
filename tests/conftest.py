# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import pytest

from site_reader.config import CrawlConfig
from site_reader.crawler.fetcher import FetchError
from site_reader.crawler.models import PageRecord
from site_reader.logger import init_logging


class FakeFetcher:
    """In-memory fetcher: serves markup from a dict, raises for configured URLs."""

    def __init__(
        self,
        pages: Mapping[str, str],
        failures: Optional[Mapping[str, BaseException]] = None,
        open_error: Optional[BaseException] = None,
    ) -> None:
        self.pages = dict(pages)
        self.failures = dict(failures or {})
        self.open_error = open_error
        self.fetched: List[str] = []
        self.opened = 0
        self.closed = 0

    async def open(self) -> None:
        self.opened += 1
        if self.open_error is not None:
            raise self.open_error

    async def fetch(self, url: str) -> str:
        self.fetched.append(url)
        if url in self.failures:
            raise self.failures[url]
        try:
            return self.pages[url]
        except KeyError:
            raise FetchError(f"HTTP 404 for {url}") from None

    async def close(self) -> None:
        self.closed += 1


def html(body: str, title: str = "") -> str:
    head = f"<title>{title}</title>" if title else ""
    return f"<html><head>{head}</head><body>{body}</body></html>"


def links(*hrefs: str) -> str:
    return "".join(f'<a href="{h}">{h}</a>' for h in hrefs)


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests bind the log handler to CliRunner's stream; rebind afterwards."""
    yield
    init_logging(level="INFO")


@pytest.fixture()
def fast_config() -> CrawlConfig:
    """Default policy without the politeness delay."""
    return CrawlConfig(delay=0)


@pytest.fixture()
def sample_pages() -> List[PageRecord]:
    return [
        PageRecord("https://example.com/", "Home", "Welcome to the example site."),
        PageRecord("https://example.com/docs", "Docs", "Install with pip."),
    ]


@pytest.fixture()
def site() -> Dict[str, str]:
    """Small site: home links to docs, blog and an external host; docs links back home."""
    return {
        "https://example.com/": html(
            "<main>Home page" + links("/docs", "/blog", "https://other.com/x") + "</main>",
            title="Home",
        ),
        "https://example.com/docs": html("<main>Docs" + links("/", "/docs/install") + "</main>", title="Docs"),
        "https://example.com/blog": html("<article>Blog</article>", title="Blog"),
        "https://example.com/docs/install": html("<main>Install</main>", title="Install"),
        "https://other.com/x": html("<main>Other</main>", title="Other"),
    }
