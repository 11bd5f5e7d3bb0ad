"""Command line entry point."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from . import __version__
from .config import Settings, get_settings
from .errors import FoodfetchError
from .models.display import InfoLevel
from .services.corpus import build_corpus, load_corpus, write_corpus
from .services.mealdb import MealDBService
from .services.reports import render_reports
from .services.search import SearchResolver

logger = logging.getLogger(__name__)

INFO_CHOICES = [member.name.lower() for member in InfoLevel]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foodfetch",
        description="Fetch a recipe and display it beside an ASCII-art thumbnail.",
    )
    parser.add_argument("keyword", nargs="?", help="Keyword to use in the search")
    parser.add_argument(
        "-i",
        "--infos",
        action="append",
        choices=INFO_CHOICES,
        help="The infos you want to display (repeatable, default: all)",
    )
    parser.add_argument(
        "--write-corpus",
        type=Path,
        metavar="PATH",
        help="Rebuild the offline meal list from the catalog and write it to PATH",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def fetch(keyword: str | None, info: InfoLevel, settings: Settings) -> int:
    """Resolve ``keyword`` and print one report per recipe found."""
    service = MealDBService(base_url=settings.api_base_url, timeout=settings.timeout)
    resolver = SearchResolver(catalog=service, corpus=load_corpus(settings.corpus_path))
    try:
        outcome = await resolver.resolve(keyword)
        if outcome.advisory:
            print(outcome.advisory, file=sys.stderr)
        reports = await render_reports(
            outcome.records,
            info,
            service,
            max_image_width=settings.max_image_width,
        )
    finally:
        await service.close()

    print("\n\n".join(reports))
    return 0


async def refresh_corpus(path: Path, settings: Settings) -> int:
    service = MealDBService(base_url=settings.api_base_url, timeout=settings.timeout)
    try:
        corpus = await build_corpus(service)
    finally:
        await service.close()
    write_corpus(corpus, path)
    print(f"Wrote {len(corpus)} meals to {path}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.write_corpus:
            return asyncio.run(refresh_corpus(args.write_corpus, settings))
        info = InfoLevel.from_names(args.infos or ["all"])
        return asyncio.run(fetch(args.keyword, info, settings))
    except FoodfetchError as exc:
        logger.debug("Request failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
