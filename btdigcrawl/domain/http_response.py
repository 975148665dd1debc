from typing import NamedTuple


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation."""
    status_code: int
    text: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
