# site_reader/crawler/frontier.py
"""
FIFO work queue of discovered URLs.

Breadth-first order decides which pages survive a ``max_pages`` cut, so the
queue discipline is kept explicit here instead of relying on list tricks.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Iterator

from site_reader.crawler.models import FrontierEntry


class Frontier:
    """First-in, first-out queue of :class:`FrontierEntry` with O(1) push and pop."""

    def __init__(self) -> None:
        self._entries: Deque[FrontierEntry] = deque()

    def push(self, url: str, depth: int) -> FrontierEntry:
        entry = FrontierEntry(url, depth)
        self._entries.append(entry)
        return entry

    def pop(self) -> FrontierEntry:
        """Remove and return the oldest entry; IndexError when empty."""
        return self._entries.popleft()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[FrontierEntry]:
        return iter(self._entries)
