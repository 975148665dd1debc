from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class CrawlOptions:
    """Paging and pacing options for a search crawl.

    `end_page` and `max_pages` use 0 for "no limit". `max_pages` counts pages
    starting at `start_page`. When both are set the lower resulting page wins.
    """
    start_page: int = 1
    end_page: int = 0
    max_pages: int = 0
    delay_ms: int = 1000

    def __post_init__(self):
        if self.start_page < 1:
            raise ValueError(f"start_page must be >= 1, got {self.start_page}")
        _require_non_negative("end_page", self.end_page)
        _require_non_negative("max_pages", self.max_pages)
        _require_non_negative("delay_ms", self.delay_ms)

    def for_query(self, query: str) -> CrawlRequest:
        return CrawlRequest(
            query=query,
            start_page=self.start_page,
            end_page=self.end_page,
            max_pages=self.max_pages,
            delay_ms=self.delay_ms,
        )


@dataclass(frozen=True)
class CrawlRequest(CrawlOptions):
    query: str = ""

    def __post_init__(self):
        super().__post_init__()
        if not self.query or not self.query.strip():
            raise ValueError("query is required")

    @property
    def max_pages_last_page(self) -> Optional[int]:
        if not self.max_pages:
            return None
        return self.start_page + self.max_pages - 1

    @property
    def last_page(self) -> Optional[int]:
        """Last page the bounds allow, or None for an unbounded crawl."""
        bounds = [b for b in (self.end_page or None, self.max_pages_last_page) if b is not None]
        return min(bounds) if bounds else None

    @property
    def total_pages(self) -> Optional[int]:
        last = self.last_page
        if last is None:
            return None
        return max(0, last - self.start_page + 1)

    def is_past_bounds(self, page: int) -> bool:
        if self.end_page and page > self.end_page:
            return True
        last = self.max_pages_last_page
        return last is not None and page > last

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000.0
