from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class Record:
    """One search hit: the displayed item name and its magnet link, if one was found."""
    name: str
    magnet: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("record name must be non-empty")


class PageExtraction(NamedTuple):
    """Records extracted from a single results page."""
    records: Tuple[Record, ...]
    has_results: bool
