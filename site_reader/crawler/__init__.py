"""Crawler subpackage: frontier, fetchers, extraction and the crawl loop."""
from site_reader.crawler.crawler import WebCrawler, crawl
from site_reader.crawler.fetcher import BrowserFetcher, FetchError, HttpFetcher, PageFetcher, make_fetcher
from site_reader.crawler.models import (
    CrawlOutcome,
    CrawlReport,
    Failed,
    FrontierEntry,
    PageRecord,
    Skipped,
    Success,
)

__all__ = [
    "WebCrawler",
    "crawl",
    "BrowserFetcher",
    "HttpFetcher",
    "FetchError",
    "PageFetcher",
    "make_fetcher",
    "CrawlOutcome",
    "CrawlReport",
    "Failed",
    "FrontierEntry",
    "PageRecord",
    "Skipped",
    "Success",
]
