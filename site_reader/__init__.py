# site_reader/__init__.py
"""
SiteReader package initializer.
Defines package version and exposes the crawler API.
The click entry point lives in ``site_reader.cli``.
"""
__version__ = "0.1.0"

from site_reader.config import CrawlConfig, load_config
from site_reader.crawler import PageRecord, WebCrawler, crawl

__all__ = ["__version__", "CrawlConfig", "load_config", "PageRecord", "WebCrawler", "crawl"]
