# === FILE: site_reader/runner.py ===
"""
Wrapper that runs one crawl for the CLI.
"""
from site_reader.config import CrawlConfig
from site_reader.crawler.crawler import WebCrawler
from site_reader.crawler.models import CrawlReport


async def start_crawl(url: str, cfg: CrawlConfig) -> CrawlReport:
    """
    Crawl *url* with a fresh WebCrawler and return its report.

    Parameters
    ----------
    url : str
        Start URL of the crawl.
    cfg : CrawlConfig
        Crawl configuration.

    Returns
    -------
    CrawlReport
        Pages in completion order plus one outcome per dequeued frontier entry.
    """
    return await WebCrawler(cfg).run(url)

__all__ = ["start_crawl"]
