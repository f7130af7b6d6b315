# site_reader/crawler/urls.py
"""
URL normalization and crawl-eligibility checks for SiteReader.
"""
from __future__ import annotations

from typing import AbstractSet
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

from site_reader.config import CrawlConfig

_SCHEMES = ("http", "https")


def normalize_url(raw_href: str, base_url: str) -> str:
    """
    Resolve *raw_href* against *base_url* and drop the fragment.

    Returns ``""`` instead of raising when the href cannot be parsed or does
    not point to an http(s) resource (mailto:, javascript:, tel: ...).
    """
    href = raw_href.strip()
    try:
        absolute, _ = urldefrag(urljoin(base_url, href))
        parts = urlsplit(absolute)
        host = parts.hostname
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return ""
    if parts.scheme.lower() not in _SCHEMES or not host:
        return ""
    path = parts.path or "/"
    return urlunsplit((parts.scheme.lower(), parts.netloc.lower(), path, parts.query, ""))


def domain_of(url: str) -> str:
    """Lower-cased host of *url*, ``""`` when it has none."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


def is_eligible(url: str, visited: AbstractSet[str], config: CrawlConfig, base_domain: str) -> bool:
    """
    Decide whether a discovered link may enter the frontier.

    Exclusion patterns are plain substrings, so ``/login`` also rules out
    ``/loginpage``.
    """
    if url in visited:
        return False
    if config.same_domain and domain_of(url) != base_domain:
        return False
    return not any(pattern in url for pattern in config.exclude_patterns)


__all__ = ["normalize_url", "domain_of", "is_eligible"]
