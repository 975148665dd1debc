"""Custom exceptions for btdigcrawl services."""
from typing import Optional


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class FetchFailure(Exception):
    """Raised when a search page cannot be retrieved (bad status or transport error)."""

    def __init__(self, page_number: int, cause):
        self.page_number = page_number
        self.cause = cause
        super().__init__(f"Error fetching page {page_number}: {cause}")


class ChallengeDetected(Exception):
    """Raised when the site served an anti-automation challenge instead of results."""

    def __init__(self, marker: str, page_number: Optional[int] = None):
        self.marker = marker
        self.page_number = page_number
        where = f" on page {page_number}" if page_number is not None else ""
        super().__init__(f"CAPTCHA detected{where} (matched {marker!r}); solve it and try again")
