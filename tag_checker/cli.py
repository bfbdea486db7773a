"""
Command line entry point: check one URL and print the JSON result.

Exit status is 0 for a completed check, 1 when the page could not be
fetched (the error result is still printed) and 2 for invalid input.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import dotenv
import pydantic

from tag_checker.config import DetectorSettings
from tag_checker.detection.detector import TagDetector
from tag_checker.utils.errors import InvalidUrlError
from tag_checker.utils.logger import create_logger

log = create_logger("CLI")

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tag-checker",
        description="Check a web page for GTM, GA4, Google Ads and Meta Pixel tags.",
    )
    parser.add_argument("url", help="Page to check; https:// is assumed when no scheme is given")
    parser.add_argument("--timeout", type=float, help="Fetch timeout in seconds (max 15)")
    parser.add_argument(
        "--no-known-sites",
        action="store_true",
        help="Always fetch the page, even for domains in the known-site table",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    dotenv.load_dotenv()
    args = _build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.timeout is not None:
        overrides["fetch_timeout"] = args.timeout
    if args.no_known_sites:
        overrides["use_known_sites"] = False

    try:
        settings = DetectorSettings(**overrides)
    except pydantic.ValidationError as exc:
        log.error("Invalid settings", {"errors": len(exc.errors())})
        print(exc, file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        results = asyncio.run(TagDetector(settings).check(args.url.strip()))
    except InvalidUrlError as exc:
        log.error("Invalid URL", {"url": args.url, "reason": exc.reason})
        return EXIT_INVALID_INPUT

    print(json.dumps(results.to_json_dict(), indent=2))
    return EXIT_FETCH_FAILED if results.error else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
