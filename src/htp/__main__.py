"""CLI entry point for htp.

Resolves a human time phrase against the current time (or a given reference)
and prints the result as ISO 8601.

Usage:
    python -m htp last friday at 19:43
    python -m htp --reference 2020-12-24T23:45:00 last friday at 19:43
    python -m htp --timezone Europe/Paris tomorrow at 7pm
    python -m htp --clue 4 min ago
"""

import argparse
import logging
import sys
from datetime import datetime, tzinfo
from typing import List, Optional

from htp.errors import TimeParseError
from htp.interpreter import evaluate
from htp.time_parser import parse
from htp.utils.config import get_config, resolve_timezone
from htp.utils.logging import setup_logging

logger = logging.getLogger("htp.cli")


def parse_reference(value: str, default_tz: tzinfo) -> datetime:
    """
    Parse an ISO 8601 reference instant.

    A reference without an offset is placed in default_tz; an explicit
    offset is kept as given.

    Raises:
        ValueError: If the value is not ISO 8601
    """
    reference = datetime.fromisoformat(value)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=default_tz)
    return reference


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="htp",
        description="Resolve a human time phrase to an absolute datetime.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    htp now
    htp 4 min ago
    htp in 2 weeks
    htp last friday at 19:43
    htp --reference 2020-12-24T23:45:00+01:00 yesterday at 7pm
        """,
    )
    parser.add_argument("words", nargs="+", help="The time phrase (words are joined with spaces)")
    parser.add_argument(
        "--reference",
        default=None,
        help="ISO 8601 reference instant (default: now in the configured timezone)",
    )
    parser.add_argument(
        "--timezone",
        default=None,
        help="IANA timezone for the reference instant (default: HTP_TIMEZONE or local)",
    )
    parser.add_argument(
        "--assume-next-day",
        action="store_true",
        default=None,
        help="Treat a bare time that is already past as tomorrow (default: HTP_ASSUME_NEXT_DAY)",
    )
    parser.add_argument(
        "--clue",
        action="store_true",
        help="Print the parsed time clue as JSON instead of resolving it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: HTP_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, resolve the phrase and print the result."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
        setup_logging(log_level=args.log_level or config.log_level, log_file=config.log_file)
    except ValueError as e:
        parser.error(f"invalid configuration: {e}")

    logger.debug(f"Loaded {config!r}")

    text = " ".join(args.words)
    assume_next_day = config.assume_next_day if args.assume_next_day is None else args.assume_next_day

    try:
        default_tz = resolve_timezone(args.timezone) if args.timezone else config.timezone
        if args.reference:
            reference = parse_reference(args.reference, default_tz)
        else:
            reference = datetime.now(default_tz)
    except ValueError as e:
        parser.error(str(e))

    logger.debug(f"Resolving '{text}' against {reference.isoformat()}")

    try:
        clue = parse(text)
        if args.clue:
            print(clue.model_dump_json())
            return 0
        resolved = evaluate(clue, reference, assume_next_day=assume_next_day)
    except TimeParseError as e:
        logger.debug(f"Could not resolve '{text}': {type(e).__name__}")
        print(e, file=sys.stderr)
        return 1

    logger.debug(f"Parsed clue {clue!r} resolved to {resolved.isoformat()}")
    print(resolved.isoformat())
    return 0


if __name__ == "__main__":
    sys.exit(main())
