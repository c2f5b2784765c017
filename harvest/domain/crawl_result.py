"""Crawl result data model."""
from typing import NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    `words` is the final report body; the counters let callers log what
    happened without re-walking the crawl.
    """
    words: list[tuple[str, int]]
    """(token, count) pairs, descending by count, filtered by min_count when set"""

    pages_crawled: int
    """Number of pages successfully fetched and tokenized"""

    pages_failed: int = 0
    """Number of branches that contributed nothing because of a fetch or URL error"""
