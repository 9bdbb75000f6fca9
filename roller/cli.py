"""Command line front end: parse arguments, roll, print the report."""

import argparse
import random
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from pydantic import ValidationError

from roller import config
from roller.errors import RollerError
from roller.logger import setup_logging
from roller.mechanics import expected_total, max_possible, roll
from roller.models import DiceMode, RollOutcome, RollRequest
from roller.version import __version__


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text} is not a non-negative integer")
    return value


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"{text} is not a positive integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dice-roller",
        description=(
            "Rolls dice, provided a count and faces. "
            f"If none are provided, rolls {config.DEFAULT_COUNT}d{config.DEFAULT_FACES} by default"
        ),
    )
    parser.add_argument("-c", "--count", type=non_negative_int, default=config.DEFAULT_COUNT,
                        help="How many times to roll")
    parser.add_argument("-d", "--die", type=positive_int, default=config.DEFAULT_FACES,
                        help="How many die faces")
    parser.add_argument("-a", "--adjust_total", type=int, default=0,
                        help="Modifies the Total")
    parser.add_argument("-m", "--roll_mode", type=DiceMode, default=DiceMode.NONE,
                        choices=list(DiceMode), metavar="{" + ",".join(m.value for m in DiceMode) + "}",
                        help="What Dice Roll Mode to use")
    parser.add_argument("-e", "--extended", action="store_true",
                        help="Show extended result set")
    parser.add_argument("-t", "--timestamp", action="store_true",
                        help="Include Timestamp")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="Seed the random source for a reproducible roll")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC wall-clock time with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    millis = moment.microsecond // 1000
    return f"{moment.strftime(config.TIMESTAMP_FORMAT)}.{millis:03d} UTC"


def render_report(request: RollRequest, outcome: RollOutcome,
                  timestamp: Optional[str] = None) -> list[str]:
    """Build the report lines for a finished roll."""
    lines = []
    if request.count_coerced:
        lines.append("Count was 0, setting to 1...")
    if timestamp is not None:
        lines.append(f"Timestamp: {timestamp}")
    lines.append(f"Count: {request.count}")
    lines.append(f"Faces: {request.faces}")
    lines.append(f"Mode: {request.requested_mode.label}")
    lines.append(f"{outcome.label}: {outcome.total}")
    lines.append(f"Rolls: {outcome.rolls}")
    if outcome.adjustment != 0:
        lines.append(f"Adjusted by: {outcome.adjustment}")

    if request.extended and not outcome.mode_used.is_keep:
        lines.append("--- Extended Info ---")
        lines.append(f"Maximum Possible: {max_possible(request.count, request.faces)}")
        lines.append(f"Average {request.notation} Result: {expected_total(request.count, request.faces)}")
        stats = outcome.stats
        if stats is not None:
            lines.append(f"Die Average: {stats.average_die}")
            lines.append(f"Q1: {stats.q1}")
            lines.append(f"Median: {stats.median}")
            lines.append(f"Q3: {stats.q3}")
            lines.append(f"Mode: {stats.mode_value}")
            lines.append(f"QCD: {stats.qcd}")
            lines.append(f"IQR: {stats.iqr}")
    return lines


def main(argv: Optional[list[str]] = None, out: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging("DEBUG" if args.verbose else None)

    try:
        request = RollRequest(
            count=args.count,
            faces=args.die,
            mode=args.roll_mode,
            adjustment=args.adjust_total,
            extended=args.extended,
            timestamp=args.timestamp,
        )
        rng = random.Random(args.seed)
        outcome = roll(request, rng)
    except (RollerError, ValidationError) as e:
        logger.debug("Roll failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    timestamp = format_timestamp() if request.timestamp else None
    for line in render_report(request, outcome, timestamp):
        print(line, file=out or sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
