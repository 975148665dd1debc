import threading
from typing import List, Optional

from btdigcrawl.domain.crawl_request import CrawlRequest
from btdigcrawl.domain.record import PageExtraction, Record

EMPTY_PAGE_LIMIT = 2


class CrawlState:
    """
    Mutable loop state for a single search crawl.

    Created at crawl start, updated once per page, and discarded when the
    crawl stops (its records become the crawl result).
    """

    def __init__(self, request: CrawlRequest, stop_event: Optional[threading.Event] = None):
        self.request = request
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self.current_page: int = request.start_page
        self.consecutive_empty_pages: int = 0
        self.pages_fetched: int = 0
        self.records: List[Record] = []

    def is_stopped(self) -> bool:
        """Check if cancellation was requested."""
        return self.stop_event.is_set()

    def is_past_bounds(self) -> bool:
        return self.request.is_past_bounds(self.current_page)

    def record_empty_page(self) -> bool:
        """Count an empty page; returns True once the empty-page limit is reached."""
        self.consecutive_empty_pages += 1
        return self.consecutive_empty_pages >= EMPTY_PAGE_LIMIT

    def accept(self, extraction: PageExtraction) -> None:
        if extraction.has_results:
            self.consecutive_empty_pages = 0
        self.records.extend(extraction.records)

    def advance(self) -> None:
        self.current_page += 1

    @property
    def pages_processed(self) -> int:
        return self.current_page - self.request.start_page
