import logging
from pathlib import Path
from typing import Iterable, Union

from btdigcrawl.domain.record import Record

logger = logging.getLogger(__name__)

HEADER = "# Crawled Results\n\n"
MISSING_MAGNET = "(not found)"


def render_markdown(records: Iterable[Record]) -> str:
    """Render records as the "Crawled Results" Markdown document.

    Lines end with two spaces (a Markdown hard break) and each record block
    is followed by a blank line.
    """
    parts = [HEADER]
    for record in records:
        parts.append(f"- **Name**: {record.name}  \n")
        parts.append(f"  - Magnet: {record.magnet or MISSING_MAGNET}  \n\n")
    return "".join(parts)


def export_markdown(records: Iterable[Record], filename: Union[str, Path] = "results.md") -> Path:
    """Write the Markdown export to `filename` and return its path."""
    path = Path(filename)
    records = list(records)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(render_markdown(records))
    logger.info("Saved %s records to %s", len(records), path)
    return path
