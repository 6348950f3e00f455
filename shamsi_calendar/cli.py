"""Command line entry point for ``scal``, a Jalali take on ``cal``."""
from __future__ import annotations

import argparse
import logging
from datetime import date
from enum import Enum
from typing import Optional, Sequence

from rich.console import Console

from . import __version__
from .api.converter import JalaliDate, gregorian_to_jalali
from .api.preferences import VALID_COLORS, console_options, resolve_color
from .display import month_table, render, three_months_table, year_table

logger = logging.getLogger(__name__)

MIN_YEAR, MAX_YEAR = 1, 9999
MIN_MONTH, MAX_MONTH = 1, 12

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class DisplayMode(Enum):
    SINGLE_MONTH = "month"
    THREE_MONTHS = "three"
    FULL_YEAR = "year"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; only the entry point should call this."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def current_jalali_date(today: Optional[date] = None) -> JalaliDate:
    today = today or date.today()
    return gregorian_to_jalali(today.year, today.month, today.day)


def validate_input(year: int, month: int) -> None:
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ValueError(f"month must be between {MIN_MONTH} and {MAX_MONTH}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"year must be between {MIN_YEAR} and {MAX_YEAR}")


def determine_display_mode(args: argparse.Namespace) -> DisplayMode:
    if args.full_year:
        return DisplayMode.FULL_YEAR
    if args.three:
        return DisplayMode.THREE_MONTHS
    if args.year is not None and args.month is None:
        return DisplayMode.FULL_YEAR
    return DisplayMode.SINGLE_MONTH


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scal",
        description="Display a Jalali (Shamsi) calendar, similar to the Unix 'cal' command.",
    )
    parser.add_argument("-y", "--year", type=int, help="year to display (default: current year)")
    parser.add_argument("-m", "--month", type=int, help="month to display (1-12, default: current month)")
    parser.add_argument("-3", "--three", action="store_true", help="display three months spanning the date")
    parser.add_argument("-Y", "--full-year", action="store_true", help="display entire year")
    parser.add_argument("--color", choices=sorted(VALID_COLORS), help="colorize the output (default: auto)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debugging information to stderr")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None, today: Optional[date] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    current = current_jalali_date(today)
    year = current.year if args.year is None else args.year
    month = current.month if args.month is None else args.month

    try:
        validate_input(year, month)
    except ValueError as exc:
        parser.error(f"validation error: {exc}")

    mode = determine_display_mode(args)
    selection = resolve_color(args.color)
    logger.debug(
        "Rendering %s view for %04d-%02d (today %s, color %s from %s)",
        mode.value, year, month, current.isoformat(), selection.value, selection.source,
    )

    console = Console(highlight=False, **console_options(selection))
    if mode is DisplayMode.FULL_YEAR:
        render(year_table(year, current), console)
    elif mode is DisplayMode.THREE_MONTHS:
        render(three_months_table(year, month, current), console)
    else:
        render(month_table(year, month, current), console)
    return 0
