from unittest.mock import Mock

from dependency_injector import providers

import btdigcrawl
from btdigcrawl.container import Container
from btdigcrawl.domain import CrawlOptions, StopReason
from btdigcrawl.services.crawler import SearchCrawler
from btdigcrawl.services.http_service import HttpService


def test_container_creates_services():
    container = Container()
    container.config.USER_AGENT.from_value("TestBot/1.0")
    container.config.HTTP_TIMEOUT.from_value(7)

    http_service = container.http_service()
    assert http_service.user_agent == "TestBot/1.0"
    assert http_service.timeout == 7
    assert container.page_fetcher().http_service is http_service
    assert isinstance(container.crawler(), SearchCrawler)


def test_container_search_url_is_configurable():
    container = Container()
    container.config.BTDIG_SEARCH_URL.from_value("http://mirror.test/search")
    assert container.page_fetcher().build_url("q", 1).startswith("http://mirror.test/search?")


def _container_with_pages(*pages):
    http_client = Mock(side_effect=[Mock(status_code=200, text=p) for p in pages])
    container = Container()
    container.http_service.override(providers.Object(HttpService(http_client=http_client)))
    return container, http_client


def test_crawl_entry_point_returns_records(result_page):
    container, http_client = _container_with_pages(result_page(("one", "magnet:?1")))

    result = btdigcrawl.crawl("foo", CrawlOptions(max_pages=1, delay_ms=0), container=container)

    assert [r.name for r in result.records] == ["one"]
    assert result.stop_reason is StopReason.BOUND_REACHED
    assert http_client.call_count == 1


def test_crawl_entry_point_uses_configured_delay(result_page, empty_page):
    container, _ = _container_with_pages(result_page(("a", None)), empty_page, empty_page)
    container.config.CRAWL_DELAY_MS.from_value(250)
    sleeps = []
    container.crawler.add_kwargs(sleep_fn=sleeps.append)

    result = btdigcrawl.crawl("foo", container=container)

    assert result.stop_reason is StopReason.REPEATED_EMPTY_PAGES
    assert [r.name for r in result.records] == ["a"]
    assert sleeps == [0.25, 0.25]
