# ── trainfinder/__main__.py ──────────────────────────────────
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from rich.console import Console

from .config import FinderConfig, LogLevel
from .errors import DatasetError
from .logging_config import configure
from .query import find_trains
from .report import NO_TRAINS_MESSAGE, format_train, print_results

LOG = logging.getLogger("trainfinder.cli")

PROMPTS = {
    "departure": "Enter departure station ID: ",
    "arrival": "Enter arrival station ID: ",
    "criteria": "Enter sorting criteria: ",
}


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trainfinder",
        description="Find the top trains between two stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # interactive: prompts for stations and criteria
  python -m trainfinder

  # cheapest trains from 1902 to 1929
  python -m trainfinder --departure 1902 --arrival 1929 --criteria price
        """,
    )
    parser.add_argument("--departure", help="Departure station ID")
    parser.add_argument("--arrival", help="Arrival station ID")
    parser.add_argument(
        "--criteria",
        help="Sort criteria: price, arrival-time or departure-time",
    )
    parser.add_argument("--data", help="Path to the train dataset (JSON or CSV)")
    parser.add_argument("--config", help="JSON/YAML configuration file")
    parser.add_argument("--limit", type=int, help="How many trains to show")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Logging level",
    )
    parser.add_argument(
        "--plain", action="store_true", help="One line per train instead of a table"
    )
    return parser


def load_config(args: argparse.Namespace) -> FinderConfig:
    config = FinderConfig.load_from_file(args.config) if args.config else FinderConfig.from_env()
    if args.data:
        config.data_path = Path(args.data)
    if args.limit is not None:
        config.result_limit = args.limit
    if args.log_level:
        config.log_level = LogLevel(args.log_level)
    return config


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = create_argument_parser().parse_args(argv)
    console = console or Console()

    try:
        config = load_config(args)
    except (ValueError, TypeError, OSError, yaml.YAMLError) as exc:
        console.print(f"Error: {exc}", markup=False)
        return 1
    issues = config.validate()
    if issues:
        for issue in issues:
            console.print(f"Error: {issue}", markup=False)
        return 1
    configure(config.log_level.value)

    departure = args.departure if args.departure is not None else _prompt(PROMPTS["departure"])
    arrival = args.arrival if args.arrival is not None else _prompt(PROMPTS["arrival"])
    criteria = args.criteria if args.criteria is not None else _prompt(PROMPTS["criteria"])

    try:
        trains = find_trains(
            departure,
            arrival,
            criteria,
            data_path=config.data_path,
            limit=config.result_limit,
        )
    except (ValueError, DatasetError) as exc:  # TrainQueryError is a ValueError
        LOG.debug("Query rejected: %r", exc)
        console.print(f"Error: {exc}", markup=False)
        return 1

    if args.plain:
        if not trains:
            console.print(NO_TRAINS_MESSAGE)
        for train in trains:
            console.print(format_train(train), markup=False)
    else:
        print_results(trains, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
