from __future__ import annotations

import argparse
import asyncio
import json
import logging
import time
from typing import Optional, Sequence

from ..config import get_settings
from ..logging import configure_logging
from ..utils import format_date, random_string, safe_json_parse, sleep


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="applib",
        description="Run the applib helpers from the command line.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    sleep_parser = subparsers.add_parser("sleep", help="Wait for a number of milliseconds")
    sleep_parser.add_argument("ms", type=int, help="Milliseconds to wait")

    date_parser = subparsers.add_parser("format-date", help="Format an ISO 8601 date")
    date_parser.add_argument("value", help="Date such as 2024-06-20")

    json_parser = subparsers.add_parser("parse-json", help="Parse JSON text, printing a fallback on failure")
    json_parser.add_argument("text", help="JSON text to parse")
    json_parser.add_argument(
        "--fallback",
        default="null",
        help="JSON value printed when TEXT cannot be parsed (default: null).",
    )

    random_parser = subparsers.add_parser("random-string", help="Generate a random alphanumeric string")
    random_parser.add_argument("length", type=int, help="Number of characters")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(args=argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(args=argv)

    try:
        settings = get_settings()
    except ValueError as exc:
        parser.error(str(exc))
    configure_logging(base_dir=settings.log_dir, level=settings.log_level_value)
    logger = logging.getLogger("applib")
    logger.debug("Running command %s", args.command)

    try:
        output = _dispatch(args)
    except ValueError as exc:
        parser.error(str(exc))

    print(output)
    return 0


def _dispatch(args: argparse.Namespace) -> str:
    if args.command == "sleep":
        started = time.perf_counter()
        asyncio.run(sleep(args.ms))
        elapsed_ms = (time.perf_counter() - started) * 1000
        return f"{elapsed_ms:.1f}"

    if args.command == "format-date":
        return format_date(args.value)

    if args.command == "parse-json":
        fallback = json.loads(args.fallback)
        return json.dumps(safe_json_parse(args.text, fallback), ensure_ascii=False)

    if args.command == "random-string":
        return random_string(args.length)

    raise ValueError(f"Unknown command: {args.command}")


__all__ = ["build_parser", "main", "parse_args"]
