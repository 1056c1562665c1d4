#!/usr/bin/env python3
"""
Command line interface for tracking crypto holdings.

Examples:
    gainz -a alice
    gainz -u alice BTC 0.5
    gainz -p alice -c EUR -d week
    gainz -l -d month
"""

import argparse
import logging
import sys
from typing import List, Optional

from config import load_settings
from models.exceptions import GainzError
from portfolio_tracker import PortfolioTracker
from reports.formatter import format_leaderboard, format_portfolio
from services.validation import VALID_DURATIONS, parse_duration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gainz", description="Track crypto holdings and their gains"
    )
    actions = parser.add_mutually_exclusive_group()
    actions.add_argument("-a", "--add", metavar="USER", help="Add a user")
    actions.add_argument(
        "-u",
        "--update",
        nargs=3,
        metavar=("USER", "CRYPTO", "AMOUNT"),
        help="Update a user's crypto balance",
    )
    actions.add_argument(
        "-p", "--portfolio", metavar="USER", help="Display a user's portfolio"
    )
    actions.add_argument(
        "-l", "--leaderboard", action="store_true", help="Display the current leaderboard"
    )
    parser.add_argument(
        "-c", "--currency", default=None, help="Exchange currency (default: USD)"
    )
    parser.add_argument(
        "-d",
        "--duration",
        default="day",
        help=f"Comparison window, one of: {', '.join(VALID_DURATIONS)} (default: day)",
    )
    return parser


def run(args: argparse.Namespace, tracker: PortfolioTracker) -> None:
    """Execute the single action selected by the parsed arguments."""
    if args.add:
        tracker.add_user(args.add)
        print("Added user successfully.")
    elif args.update:
        name, symbol, amount = args.update
        tracker.update_balance(name, symbol, amount)
        print("Updated balance successfully.")
    elif args.portfolio:
        duration = parse_duration(args.duration)
        report = tracker.portfolio(args.portfolio, args.currency, duration)
        print(format_portfolio(report))
    elif args.leaderboard:
        duration = parse_duration(args.duration)
        print(format_leaderboard(tracker.leaderboard(args.currency, duration)))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    if not (args.add or args.update or args.portfolio or args.leaderboard):
        parser.print_help()
        return 0

    try:
        settings = load_settings()
    except GainzError as e:
        print(str(e), file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        with PortfolioTracker(settings) as tracker:
            run(args, tracker)
    except GainzError as e:
        logger.debug("Command failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
