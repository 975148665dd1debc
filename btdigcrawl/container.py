"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from btdigcrawl.services.http_service import HttpService
from btdigcrawl.services.page_fetcher import PageFetcher
from btdigcrawl.services.extraction_engine import ExtractionEngine
from btdigcrawl.services.crawler import SearchCrawler
from btdigcrawl import config as env


# Environment variables used by the container (read via `btdigcrawl.config` helpers).
#
# BTDIG_SEARCH_URL (str, default: "https://en.btdig.com/search")
#   Search endpoint; query, page and order parameters are appended to it.
#
# USER_AGENT (str | optional)
#   User-Agent header for outbound requests. Unset means library defaults.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each page request.
#
# CRAWL_DELAY_MS (int milliseconds, default: 1000)
#   Default pause between page fetches when the caller does not pass one.
ENV = {
    "BTDIG_SEARCH_URL": env.SEARCH_URL,
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "CRAWL_DELAY_MS": env.CRAWL_DELAY_MS,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for btdigcrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        http_client=providers.Object(requests.get),
        user_agent=config.USER_AGENT,
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    page_fetcher = providers.Singleton(
        PageFetcher,
        http_service=http_service,
        search_url=config.BTDIG_SEARCH_URL.as_(str),
    )

    extraction_engine = providers.Singleton(
        ExtractionEngine
    )

    crawler = providers.Factory(
        SearchCrawler,
        page_fetcher=page_fetcher,
        extraction_engine=extraction_engine,
    )
