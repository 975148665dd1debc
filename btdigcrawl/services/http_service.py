import requests
from typing import Callable, Optional

from btdigcrawl.domain.http_response import HttpResponse
from btdigcrawl.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection, so tests can
    supply a fake without patching and the HTTP library can be swapped.
    """

    def __init__(self, http_client: Callable, user_agent: Optional[str] = None, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def _headers(self) -> dict:
        if not self.user_agent:
            return {}
        return {"User-Agent": self.user_agent}

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text and requested URL."""
        try:
            resp = self.http_client(url, headers=self._headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        return HttpResponse(resp.status_code, resp.text, url)
