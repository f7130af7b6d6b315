# File: site_reader/corpus.py
"""site_reader.corpus: hands crawl results to the storage layer.

The storage layer persists one text blob per start URL (:func:`build_corpus`)
and embeds it in overlapping chunks (:func:`split_text`).
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from langchain_text_splitters import RecursiveCharacterTextSplitter

from site_reader.crawler.models import PageRecord
from site_reader.logger import logger

__all__: Sequence[str] = ("PAGE_SEPARATOR", "DEFAULT_SEPARATORS", "build_corpus", "split_text")

PAGE_SEPARATOR = "\n=== New Page ===\n"
DEFAULT_SEPARATORS: Sequence[str] = ("\n\n", "\n", " ", "")


def build_corpus(pages: Iterable[PageRecord]) -> str:
    """Title and content of every page, pages joined by :data:`PAGE_SEPARATOR`."""
    text = PAGE_SEPARATOR.join(f"{page.title}\n{page.content}" for page in pages)
    logger.debug("Corpus built: %d characters", len(text))
    return text


def split_text(
    text: str,
    chunk_size: int = 500,
    chunk_overlap: int = 50,
    separators: Sequence[str] = DEFAULT_SEPARATORS,
) -> List[str]:
    """Split *text* into chunks of at most *chunk_size* characters.

    The coarsest separator present in the text is tried first; pieces that
    are still too long are split again with the next one. Neighbouring chunks
    share up to *chunk_overlap* characters.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    if not 0 <= chunk_overlap < chunk_size:
        raise ValueError("chunk_overlap must be >= 0 and smaller than chunk_size")
    splitter = RecursiveCharacterTextSplitter(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        separators=list(separators) or [""],
    )
    chunks = splitter.split_text(text)
    logger.debug("Split %d characters into %d chunks", len(text), len(chunks))
    return chunks
