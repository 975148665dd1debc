import threading

from btdigcrawl.domain import CrawlProgress, CrawlRequest, CrawlState, PageExtraction, Record


def test_state_starts_at_start_page():
    state = CrawlState(CrawlRequest(query="foo", start_page=4))
    assert state.current_page == 4
    assert state.pages_processed == 0
    assert state.records == []
    assert not state.is_stopped()


def test_empty_page_limit_is_two_consecutive():
    state = CrawlState(CrawlRequest(query="foo"))
    assert not state.record_empty_page()
    assert state.record_empty_page()


def test_results_reset_empty_counter_and_accumulate():
    state = CrawlState(CrawlRequest(query="foo"))
    state.record_empty_page()
    state.accept(PageExtraction(records=(Record("a"), Record("b")), has_results=True))
    assert state.consecutive_empty_pages == 0
    assert [r.name for r in state.records] == ["a", "b"]
    assert not state.record_empty_page()


def test_uses_given_stop_event():
    event = threading.Event()
    state = CrawlState(CrawlRequest(query="foo"), stop_event=event)
    event.set()
    assert state.is_stopped()


def test_advance_tracks_bounds():
    state = CrawlState(CrawlRequest(query="foo", max_pages=1))
    assert not state.is_past_bounds()
    state.advance()
    assert state.pages_processed == 1
    assert state.is_past_bounds()


def test_progress_percent_caps_at_hundred():
    assert CrawlProgress(page_number=5, pages_processed=5, total_pages=3, records_so_far=0).percent_complete == 100.0
    assert CrawlProgress(page_number=1, pages_processed=1, total_pages=3, records_so_far=0).percent_complete == 33.3
