# site_reader/crawler/fetcher.py
"""
Fetcher module: loads one URL at a time and returns its markup.

Two implementations share the same small protocol (``open`` / ``fetch`` /
``close``):

* :class:`BrowserFetcher` drives one headless Chromium through Playwright and
  returns the DOM after network activity settles.
* :class:`HttpFetcher` performs a plain GET with aiohttp, for sites that do
  not need rendering.

A fetcher belongs to exactly one crawl: the crawler opens it at start and
closes it at the end, on every exit path.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from aiohttp import ClientSession, ClientTimeout
from playwright.async_api import Browser, Playwright, async_playwright

from site_reader.config import CrawlConfig

__all__ = ("FetchError", "PageFetcher", "BrowserFetcher", "HttpFetcher", "make_fetcher")

logger = logging.getLogger("SiteReader")


class FetchError(RuntimeError):
    """A page could not be loaded; the crawl skips it and moves on."""


class PageFetcher(Protocol):
    async def open(self) -> None: ...

    async def fetch(self, url: str) -> str: ...

    async def close(self) -> None: ...


class BrowserFetcher:
    """Headless Chromium session; one tab per :meth:`fetch` call."""

    def __init__(self, timeout: float = 30.0, headless: bool = True) -> None:
        self.timeout_ms = timeout * 1000  # Playwright uses milliseconds
        self.headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> BrowserFetcher:
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        if self._browser is not None:
            raise RuntimeError("Browser already running")
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=self.headless)
        except BaseException:
            await self.close()
            raise
        logger.info("Browser initialized")

    async def fetch(self, url: str) -> str:
        if self._browser is None:
            raise RuntimeError("Browser not started")
        page = await self._browser.new_page()
        try:
            await page.goto(url, timeout=self.timeout_ms, wait_until="networkidle")
            return await page.content()
        finally:
            await page.close()

    async def close(self) -> None:
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        try:
            if browser is not None:
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()


class HttpFetcher:
    """aiohttp session returning the raw HTML of server-rendered pages."""

    def __init__(self, timeout: float = 30.0, user_agent: str = "SiteReaderBot/1.0") -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> HttpFetcher:
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def open(self) -> None:
        if self.session is not None:
            raise RuntimeError("Session already open")
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers={"User-Agent": self.user_agent},
            raise_for_status=False,
        )

    async def fetch(self, url: str) -> str:
        if self.session is None:
            raise RuntimeError("Session not initialized")
        async with self.session.get(url) as resp:
            if resp.status >= 400:
                raise FetchError(f"HTTP {resp.status} for {url}")
            mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
            if mime not in ("text/html", "application/xhtml+xml"):
                raise FetchError(f"Unsupported content type {mime or 'unknown'!r} for {url}")
            return await resp.text()

    async def close(self) -> None:
        session, self.session = self.session, None
        if session is not None and not session.closed:
            await session.close()


def make_fetcher(config: CrawlConfig) -> PageFetcher:
    """Build the fetcher selected by ``config.renderer``."""
    if config.renderer == "http":
        return HttpFetcher(timeout=config.page_timeout, user_agent=config.user_agent)
    return BrowserFetcher(timeout=config.page_timeout, headless=config.headless)
