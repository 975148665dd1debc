from __future__ import annotations

import logging
from urllib.parse import quote

from btdigcrawl.exceptions import FetchFailure, HttpFetchError
from btdigcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)

# Characters encodeURIComponent-style escaping leaves alone besides [A-Za-z0-9_.-~].
_QUERY_SAFE = "!*'()"
# Newest results first.
RESULT_ORDER = 2


class PageFetcher:
    """Fetch btdig search result pages by query and page number."""

    def __init__(self, http_service: HttpService, search_url: str = "https://en.btdig.com/search"):
        self.http_service = http_service
        self.search_url = search_url

    def build_url(self, query: str, page_number: int) -> str:
        return f"{self.search_url}?q={quote(query, safe=_QUERY_SAFE)}&p={page_number}&order={RESULT_ORDER}"

    def fetch(self, query: str, page_number: int) -> str:
        """Return the markup of one results page.

        Raises FetchFailure on a non-2xx status or any transport error.
        """
        url = self.build_url(query, page_number)
        logger.info("Fetching page %s: %s", page_number, url)
        try:
            response = self.http_service.fetch(url)
        except HttpFetchError as e:
            raise FetchFailure(page_number, e.original) from e

        if not response.ok:
            raise FetchFailure(page_number, f"HTTP {response.status_code}")
        return response.text
