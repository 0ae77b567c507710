"""Command-line entry point for the useless test detector.

Exit codes:
  0 - No suspicious tests found
  1 - Suspicious tests found (check output)
"""

import argparse
import json
import logging
import os
import sys

from .models import Confidence, DEFAULT_DIRECTORIES, ScanConfiguration
from .report import format_report
from .scanner import detect_useless_tests

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "USELESS_TESTS_LOG_LEVEL"

EPILOG = """\
Examples:
  useless-tests
  useless-tests --dirs src,tests --min-confidence high
  useless-tests --json > report.json

Exit codes:
  0 - No suspicious tests found
  1 - Suspicious tests found (check output)
"""


def _split_dirs(value: str) -> list[str]:
    return [d.strip() for d in value.split(",") if d.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="useless-tests",
        description="Finds test files that don't actually test real implementations.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--dirs",
        type=_split_dirs,
        default=list(DEFAULT_DIRECTORIES),
        metavar="DIRS",
        help="Comma-separated directories to scan (default: %s)" % ",".join(DEFAULT_DIRECTORIES),
    )
    parser.add_argument(
        "--min-confidence",
        choices=[c.value for c in Confidence],
        default=Confidence.low.value,
        metavar="LEVEL",
        help="Minimum confidence level: high, medium, low (default: low)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped directories and files to stderr",
    )
    return parser


def _resolve_log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    # getLevelName returns a "Level X" string for names it doesn't know
    return level if isinstance(level, int) else logging.WARNING


def _configure_logging(verbose: bool) -> None:
    level = _resolve_log_level(verbose)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = ScanConfiguration(directories=args.dirs, min_confidence=args.min_confidence)
    logger.debug(f"Scanning {config.directories} (min confidence: {config.min_confidence.value})")
    results = detect_useless_tests(config)

    if args.json:
        payload = [r.model_dump(mode="json", by_alias=True) for r in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(format_report(results))

    return 1 if results else 0


if __name__ == "__main__":
    sys.exit(main())
