"""Domain objects for btdigcrawl - explicit re-exports to satisfy linters."""
from .record import Record as Record
from .record import PageExtraction as PageExtraction
from .crawl_request import CrawlOptions as CrawlOptions
from .crawl_request import CrawlRequest as CrawlRequest
from .crawl_result import CrawlResult as CrawlResult
from .crawl_result import StopReason as StopReason
from .crawl_progress import CrawlProgress as CrawlProgress
from .crawl_state import CrawlState as CrawlState

__all__ = [
    "Record",
    "PageExtraction",
    "CrawlOptions",
    "CrawlRequest",
    "CrawlResult",
    "StopReason",
    "CrawlProgress",
    "CrawlState",
]
