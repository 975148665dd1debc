import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from btdigcrawl.domain.record import PageExtraction, Record
from btdigcrawl.exceptions import ChallengeDetected

logger = logging.getLogger(__name__)

CHALLENGE_MARKERS = ("Please complete the security check", "g-recaptcha")
NAME_SELECTOR = "div.torrent_name"
MAGNET_CONTAINER_SELECTOR = "div.torrent_magnet"
MAGNET_ANCHOR_SELECTOR = 'a[href^="magnet:"]'


class ExtractionEngine:
    """Turn a btdig results page into records.

    Each name block gets its magnet link from, in order: the magnet container
    next to it, an anchor inside the name block, or the first magnet anchor
    anywhere on the page. The last fallback can pair a name with another
    result's link; it is kept because the site does not always place the
    magnet container beside the name.
    """

    def __init__(self, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def detect_challenge(self, html: str) -> Optional[str]:
        """Return the matched challenge marker, or None for a normal page."""
        for marker in CHALLENGE_MARKERS:
            if marker in html:
                return marker
        return None

    def extract(self, html: str) -> PageExtraction:
        marker = self.detect_challenge(html)
        if marker is not None:
            raise ChallengeDetected(marker)

        soup = self._soup_factory(html)
        name_elems = soup.select(NAME_SELECTOR)
        if not name_elems:
            return PageExtraction(records=(), has_results=False)

        page_magnet = self._first_magnet(soup)
        records = []
        for name_elem in name_elems:
            name = name_elem.get_text().strip()
            if not name:
                continue
            magnet = self._sibling_magnet(name_elem) or self._inner_magnet(name_elem)
            if magnet is None and page_magnet is not None:
                logger.debug("Using page-wide magnet fallback for %r", name)
                magnet = page_magnet
            records.append(Record(name=name, magnet=magnet))
        return PageExtraction(records=tuple(records), has_results=True)

    def _sibling_magnet(self, name_elem: Tag) -> Optional[str]:
        parent = name_elem.parent
        if parent is None:
            return None
        container = parent.select_one(MAGNET_CONTAINER_SELECTOR)
        if container is None:
            return None
        return _href(container.select_one(MAGNET_ANCHOR_SELECTOR))

    def _inner_magnet(self, name_elem: Tag) -> Optional[str]:
        return _href(name_elem.select_one(MAGNET_ANCHOR_SELECTOR))

    def _first_magnet(self, soup: BeautifulSoup) -> Optional[str]:
        return _href(soup.select_one(MAGNET_ANCHOR_SELECTOR))


def _href(anchor: Optional[Tag]) -> Optional[str]:
    if anchor is None:
        return None
    return anchor.get("href") or None
