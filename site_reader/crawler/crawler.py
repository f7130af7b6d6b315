# === FILE: site_reader/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Set

from site_reader.config import DEFAULT_CONFIG, CrawlConfig
from site_reader.crawler.extractor import extract
from site_reader.crawler.fetcher import PageFetcher, make_fetcher
from site_reader.crawler.frontier import Frontier
from site_reader.crawler.models import (
    CrawlReport,
    Failed,
    FrontierEntry,
    PageRecord,
    Skipped,
    Success,
)
from site_reader.crawler.urls import domain_of, is_eligible, normalize_url

__all__ = ("WebCrawler", "crawl")


class WebCrawler:
    """Breadth-first crawler: one page in flight, one fetcher per crawl, bounded by depth and page budget."""

    def __init__(self, config: CrawlConfig = DEFAULT_CONFIG, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self._fetcher = fetcher
        self.logger = logging.getLogger("SiteReader")
        self.base_url = ""
        self.base_domain = ""
        self.visited: Set[str] = set()
        self.frontier = Frontier()
        self._running = False

    async def crawl(self, start_url: str) -> List[PageRecord]:
        report = await self.run(start_url)
        return report.pages

    async def run(self, start_url: str) -> CrawlReport:
        """Crawl from *start_url* and return pages plus one outcome per dequeued entry.

        A browser launch failure propagates after the fetcher is closed;
        failures of individual pages are recorded and the crawl goes on.
        """
        if self._running:
            raise RuntimeError("A crawl is already running on this WebCrawler")
        root = normalize_url(start_url, start_url)
        if not root:
            raise ValueError(f"Start URL must be an absolute http(s) URL: {start_url!r}")

        self._running = True
        self.logger.info("Starting crawl: %s (%s)", root, self.config.model_dump_json())
        started = time.monotonic()
        fetcher = self._fetcher if self._fetcher is not None else make_fetcher(self.config)
        report = CrawlReport(start_url=root)
        try:
            await fetcher.open()
            self.base_url = root
            self.base_domain = domain_of(root)
            self.visited = set()
            self.frontier = Frontier()
            self.frontier.push(root, 0)
            await self._drain(fetcher, report)
        finally:
            self._running = False
            await fetcher.close()

        duration = time.monotonic() - started
        self.logger.info(
            "Finished: %d pages in %.2f s (%d failed, %d skipped)",
            len(report.pages), duration, len(report.failed), len(report.skipped),
        )
        return report

    async def _drain(self, fetcher: PageFetcher, report: CrawlReport) -> None:
        while self.frontier and len(self.visited) < self.config.max_pages:
            entry = self.frontier.pop()
            if entry.url in self.visited:
                self.logger.debug("Already visited: %s", entry.url)
                report.outcomes.append(Skipped(entry, "already visited"))
                continue
            self.visited.add(entry.url)

            try:
                record, links = await self._scrape(fetcher, entry)
            except Exception as exc:
                self.logger.warning("Error scraping %s: %s", entry.url, exc)
                report.outcomes.append(Failed(entry, f"{type(exc).__name__}: {exc}"))
            else:
                report.pages.append(record)
                report.outcomes.append(Success(entry, record))
                self.logger.info("Scraped %s (%d/%d)", entry.url, len(self.visited), self.config.max_pages)
                if entry.depth < self.config.max_depth:
                    self._expand(links, entry.depth + 1)

            if self.config.delay:
                await asyncio.sleep(self.config.delay)

    async def _scrape(self, fetcher: PageFetcher, entry: FrontierEntry) -> tuple[PageRecord, list[str]]:
        self.logger.debug("Scraping page: %s (depth: %d)", entry.url, entry.depth)
        markup = await fetcher.fetch(entry.url)
        page = extract(markup, self.base_url)
        return PageRecord(entry.url, page.title, page.content), page.links

    def _expand(self, links: List[str], depth: int) -> None:
        # visited is only updated at dequeue, so a URL may sit in the frontier several times
        for link in links:
            if is_eligible(link, self.visited, self.config, self.base_domain):
                self.frontier.push(link, depth)


async def crawl(
    start_url: str,
    config: Optional[CrawlConfig] = None,
    *,
    fetcher: Optional[PageFetcher] = None,
) -> List[PageRecord]:
    """Crawl *start_url* with a fresh :class:`WebCrawler` and return its pages."""
    crawler = WebCrawler(config or DEFAULT_CONFIG, fetcher)
    return await crawler.crawl(start_url)
