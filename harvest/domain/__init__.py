"""Domain objects for HARVEST - explicit re-exports to satisfy linters."""
from .config import CrawlConfig as CrawlConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .http_response import HttpResponse as HttpResponse
from .page import ExtractedPage as ExtractedPage
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_frequency import WordFrequency as WordFrequency

__all__ = [
    "CrawlConfig",
    "CrawlContext",
    "CrawlResult",
    "HttpResponse",
    "ExtractedPage",
    "VisitedTracker",
    "WordFrequency",
]
