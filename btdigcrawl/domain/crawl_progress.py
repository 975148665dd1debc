from typing import NamedTuple, Optional


class CrawlProgress(NamedTuple):
    """Progress event emitted after each processed page."""
    page_number: int
    pages_processed: int
    total_pages: Optional[int]
    records_so_far: int

    @property
    def percent_complete(self) -> Optional[float]:
        if not self.total_pages:
            return None
        return round(min(100.0, self.pages_processed / self.total_pages * 100), 1)
