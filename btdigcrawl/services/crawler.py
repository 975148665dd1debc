from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from btdigcrawl.domain.crawl_progress import CrawlProgress
from btdigcrawl.domain.crawl_request import CrawlRequest
from btdigcrawl.domain.crawl_result import CrawlResult, StopReason
from btdigcrawl.domain.crawl_state import CrawlState
from btdigcrawl.exceptions import ChallengeDetected, FetchFailure
from btdigcrawl.services.extraction_engine import ExtractionEngine
from btdigcrawl.services.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[CrawlProgress], None]


class SearchCrawler:
    """Sequential paginated crawl of btdig search results.

    One page is fetched and parsed at a time. The loop stops on the first of:
    a cancelled stop_event, a page bound, a fetch failure, a challenge page,
    or two empty pages in a row. Stopping never raises; the reason is carried
    on the returned CrawlResult.
    """

    def __init__(
        self,
        page_fetcher: PageFetcher,
        extraction_engine: ExtractionEngine,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self.page_fetcher = page_fetcher
        self.extraction_engine = extraction_engine
        self.sleep_fn = sleep_fn

    def crawl(
        self,
        request: CrawlRequest,
        stop_event: Optional[threading.Event] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> CrawlResult:
        state = CrawlState(request, stop_event=stop_event)
        reason, error = self._run(state, on_progress)

        if error:
            logger.warning("Crawl stopped (%s): %s", reason.value, error)
        else:
            logger.info("Crawl stopped (%s)", reason.value)
        logger.info("Crawl complete: %s torrents found.", len(state.records))
        return CrawlResult(
            records=state.records,
            stop_reason=reason,
            pages_fetched=state.pages_fetched,
            error=error,
        )

    def _run(self, state: CrawlState, on_progress: Optional[ProgressCallback]) -> tuple[StopReason, Optional[str]]:
        request = state.request
        while True:
            if state.is_stopped():
                logger.info("Crawl cancelled before page %s", state.current_page)
                return StopReason.CANCELLED, None
            if state.is_past_bounds():
                return StopReason.BOUND_REACHED, None

            page = state.current_page
            try:
                html = self.page_fetcher.fetch(request.query, page)
            except FetchFailure as e:
                return StopReason.FETCH_ERROR, str(e)
            state.pages_fetched += 1

            try:
                extraction = self.extraction_engine.extract(html)
            except ChallengeDetected as e:
                return StopReason.CHALLENGE_DETECTED, str(ChallengeDetected(e.marker, page_number=page))

            if not extraction.has_results and state.record_empty_page():
                logger.info("No results on page %s, stopping.", page)
                return StopReason.REPEATED_EMPTY_PAGES, None

            state.accept(extraction)
            for record in extraction.records:
                logger.debug("  - %s", record.name)
                if record.magnet:
                    logger.debug("    Magnet: %s", record.magnet)

            state.advance()
            self._report_progress(state, on_progress)

            if not state.is_past_bounds():
                self.sleep_fn(request.delay_seconds)

    def _report_progress(self, state: CrawlState, on_progress: Optional[ProgressCallback]) -> None:
        progress = CrawlProgress(
            page_number=state.current_page - 1,
            pages_processed=state.pages_processed,
            total_pages=state.request.total_pages,
            records_so_far=len(state.records),
        )
        if progress.percent_complete is not None:
            logger.info(
                "Progress: %.1f%% (%s/%s pages, %s torrents)",
                progress.percent_complete,
                progress.pages_processed,
                progress.total_pages,
                progress.records_so_far,
            )
        else:
            logger.info("Processed page %s (%s torrents so far)", progress.page_number, progress.records_so_far)
        if on_progress is not None:
            on_progress(progress)
