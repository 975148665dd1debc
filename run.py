import argparse
import logging
import sys
from typing import Optional, Sequence

from btdigcrawl import crawl, export_markdown
from btdigcrawl.container import Container
from btdigcrawl.domain import CrawlOptions

logger = logging.getLogger("btdigcrawl")


def build_parser(default_delay_ms: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl btdig.com search results and export them as Markdown.")
    parser.add_argument("query", help="search term")
    parser.add_argument("--start-page", type=int, default=1, help="start from this page (default: 1)")
    parser.add_argument("--end-page", type=int, default=0, help="stop after this page (default: 0 = no limit)")
    parser.add_argument("--max-pages", type=int, default=0, help="max pages from start page (default: 0 = no limit)")
    parser.add_argument(
        "--delay",
        type=int,
        default=default_delay_ms,
        help=f"milliseconds between requests (default: {default_delay_ms})",
    )
    parser.add_argument("-o", "--output", help="write results as Markdown to this file")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    return parser


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    container = container or Container()
    parser = build_parser(container.config.CRAWL_DELAY_MS())
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="[Crawler] %(message)s",
    )

    try:
        options = CrawlOptions(
            start_page=args.start_page,
            end_page=args.end_page,
            max_pages=args.max_pages,
            delay_ms=args.delay,
        )
        options.for_query(args.query)
    except ValueError as e:
        parser.error(str(e))

    result = crawl(args.query, options, container=container)

    if args.output:
        path = export_markdown(result.records, args.output)
        print(f"Downloaded {path}")

    if not result.completed:
        logger.error("Crawl did not finish normally: %s", result.error or result.stop_reason.value)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
