from types import SimpleNamespace

import pytest


def _result_block(name, magnet=None):
    magnet_html = ""
    if magnet:
        magnet_html = f'<div class="torrent_magnet"><a href="{magnet}"><img src="/magnet.png"></a></div>'
    return (
        '<div class="one_result">'
        f'<div class="torrent_name"><a href="/item/{name}">{name}</a></div>'
        f"{magnet_html}"
        "</div>"
    )


def _page(*items):
    """Build a results page from (name, magnet) pairs."""
    blocks = "".join(_result_block(name, magnet) for name, magnet in items)
    return f"<html><body><div class=\"results\">{blocks}</div></body></html>"


EMPTY_PAGE = "<html><body><div class=\"results\">No results</div></body></html>"
CHALLENGE_PAGE = '<html><body><div class="g-recaptcha" data-sitekey="x"></div></body></html>'


@pytest.fixture
def result_page():
    return _page


@pytest.fixture
def empty_page():
    return EMPTY_PAGE


@pytest.fixture
def challenge_page():
    return CHALLENGE_PAGE


@pytest.fixture
def http_response():
    def make(text, status_code=200):
        return SimpleNamespace(status_code=status_code, text=text)
    return make
