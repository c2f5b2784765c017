from typing import FrozenSet, Optional

from harvest.domain.config import CrawlConfig
from harvest.domain.visited_tracker import VisitedTracker


class CrawlContext:
    def __init__(self, config: CrawlConfig, common_words: FrozenSet[str] = frozenset(), visited_tracker: Optional[VisitedTracker] = None):
        # config and common_words are read-only for the lifetime of the crawl
        self.config = config
        self.common_words = common_words
        self.seed_url: Optional[str] = None
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        self.pages_crawled: int = 0
        self.pages_failed: int = 0

    @property
    def max_depth(self) -> int:
        return self.config.max_depth

    def set_seed(self, seed_url: str):
        self.seed_url = seed_url

    def mark_if_new(self, url: str) -> bool:
        return self.visited_tracker.mark_if_new(url)

    def is_visited(self, url: str) -> bool:
        return self.visited_tracker.is_visited(url)
