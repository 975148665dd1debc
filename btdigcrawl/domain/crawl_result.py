"""Crawl result data model."""
from enum import Enum
from typing import List, NamedTuple, Optional

from btdigcrawl.domain.record import Record


class StopReason(str, Enum):
    BOUND_REACHED = "bound_reached"
    REPEATED_EMPTY_PAGES = "repeated_empty_pages"
    CHALLENGE_DETECTED = "challenge_detected"
    FETCH_ERROR = "fetch_error"
    CANCELLED = "cancelled"


_NOMINAL = frozenset({StopReason.BOUND_REACHED, StopReason.REPEATED_EMPTY_PAGES})


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    The crawl never raises for a stop condition; callers inspect
    `stop_reason` to tell "ran out of pages" apart from "was blocked".
    """
    records: List[Record]
    """Every record extracted before the crawl stopped, in page order"""

    stop_reason: StopReason
    """Why the crawl loop ended"""

    pages_fetched: int = 0
    """Number of pages successfully fetched"""

    error: Optional[str] = None
    """Diagnostic message for fetch errors and challenge pages"""

    @property
    def completed(self) -> bool:
        """True when the crawl ended by a bound or by running out of results."""
        return self.stop_reason in _NOMINAL
