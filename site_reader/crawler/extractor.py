# === FILE: site_reader/crawler/extractor.py ===
"""Content extraction for SiteReader.

Turns the rendered markup of one page into the three things the crawler
needs:

* title  : ``<title>`` text, else the first ``<h1>``, else ``"Untitled Page"``.
* content: text of the likely main-content regions, whitespace-normalized.
* links  : absolute, fragment-free http(s) URLs from ``<a href="…">``.

Navigation chrome (scripts, styles, nav bars, headers, footers, iframes,
noscript fallbacks) is removed before body text and links are read.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_reader.crawler.urls import normalize_url

__all__: Sequence[str] = ("ExtractedPage", "extract", "REMOVE_SELECTOR", "CONTENT_SELECTORS", "UNTITLED")

UNTITLED = "Untitled Page"

REMOVE_SELECTOR = 'script, style, nav, footer, header, [role="navigation"], iframe, noscript'

#: tried in this order; every selector that matches contributes its text
CONTENT_SELECTORS: tuple[str, ...] = (
    "main",
    "article",
    '[role="main"]',
    ".content",
    ".main-content",
    "#content",
    ".documentation",
    ".post-content",
)

_SPACES_RE = re.compile(r"\s+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n")


@dataclass(slots=True)
class ExtractedPage:
    """Title, cleaned text and outbound links of one page."""

    title: str
    content: str
    links: list[str]


def _text(elements: list[Tag]) -> str:
    return "".join(el.get_text() for el in elements)


def _title(soup: BeautifulSoup) -> str:
    title = _text(soup.find_all("title")).strip()
    if title:
        return title
    h1 = soup.find("h1")
    if h1 is not None:
        heading = h1.get_text().strip()
        if heading:
            return heading
    return UNTITLED


def _clean(text: str) -> str:
    text = _SPACES_RE.sub(" ", text)
    text = _BLANK_LINES_RE.sub("\n", text)
    return text.strip()


def _content(soup: BeautifulSoup) -> str:
    for element in soup.select(REMOVE_SELECTOR):
        element.extract()

    # overlapping regions contribute their text once per matching selector
    content = ""
    for selector in CONTENT_SELECTORS:
        matched = soup.select(selector)
        if matched:
            content += _text(matched) + "\n"

    if not content.strip():
        body = soup.body
        content = body.get_text() if body is not None else soup.get_text()
    return _clean(content)


def _links(soup: BeautifulSoup, base_url: str) -> list[str]:
    found: list[str] = []
    for tag in soup.select("a[href]"):
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        url = normalize_url(href, base_url)
        if url:
            found.append(url)
    return list(dict.fromkeys(found))


def extract(markup: str, base_url: str) -> ExtractedPage:
    """Parse rendered *markup*; relative links are resolved against *base_url*.

    Links are read after chrome removal, so anchors inside nav, header and
    footer never reach the frontier.
    """
    soup = BeautifulSoup(markup, "html.parser")
    title = _title(soup)
    content = _content(soup)
    links = _links(soup, base_url)
    return ExtractedPage(title=title, content=content, links=links)
