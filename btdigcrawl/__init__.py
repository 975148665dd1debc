"""Paginated btdig.com search scraper with Markdown export."""
import threading
from typing import Optional

from btdigcrawl.container import Container
from btdigcrawl.domain import CrawlOptions, CrawlProgress, CrawlRequest, CrawlResult, Record, StopReason
from btdigcrawl.services.crawler import ProgressCallback
from btdigcrawl.services.markdown_exporter import export_markdown, render_markdown


def crawl(
    query: str,
    options: Optional[CrawlOptions] = None,
    *,
    stop_event: Optional[threading.Event] = None,
    on_progress: Optional[ProgressCallback] = None,
    container: Optional[Container] = None,
) -> CrawlResult:
    """Crawl btdig search results for `query`; records are in `result.records`."""
    container = container or Container()
    if options is None:
        options = CrawlOptions(delay_ms=container.config.CRAWL_DELAY_MS())
    return container.crawler().crawl(options.for_query(query), stop_event=stop_event, on_progress=on_progress)


__all__ = [
    "crawl",
    "export_markdown",
    "render_markdown",
    "Container",
    "CrawlOptions",
    "CrawlProgress",
    "CrawlRequest",
    "CrawlResult",
    "Record",
    "StopReason",
]
