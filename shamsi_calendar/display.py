"""Terminal rendering of Jalali month grids built on :mod:`rich` tables."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

from rich.console import Console, RenderableType
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from .api.converter import NO_DAY, JalaliDate, get_month_calendar

__all__ = [
    "DAY_NAMES",
    "MONTH_NAMES",
    "adjacent_months",
    "month_table",
    "render",
    "three_months_table",
    "year_table",
]

MONTH_NAMES = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)
DAY_NAMES = ("Shanbe", "Yek", "Do", "Se", "Chahar", "Panj", "Jome")

TODAY_STYLE = "bold yellow"
TITLE_STYLE = "bold cyan"
DAY_NAME_STYLE = "bold bright_white"

MONTHS_IN_YEAR = 12
MONTHS_PER_ROW = 3
_MAX_RENDER_WIDTH = 1000

YearMonth = Tuple[int, int]


def adjacent_months(year: int, month: int) -> Tuple[YearMonth, YearMonth]:
    """Return the ``(year, month)`` pairs before and after the given month."""

    previous = (year - 1, MONTHS_IN_YEAR) if month == 1 else (year, month - 1)
    following = (year + 1, 1) if month == MONTHS_IN_YEAR else (year, month + 1)
    return previous, following


def _format_day(day: int, is_today: bool) -> Union[str, Text]:
    if day == NO_DAY:
        return ""
    if is_today:
        return Text(str(day), style=TODAY_STYLE)
    return str(day)


def month_table(
    year: int,
    month: int,
    today: Optional[JalaliDate] = None,
    *,
    show_year: bool = True,
) -> Table:
    """Build the table for one month, highlighting ``today`` when it falls inside it."""

    title = MONTH_NAMES[month - 1]
    if show_year:
        title = f"{title} {year}"

    table = Table(
        title=title,
        title_style=TITLE_STYLE,
        header_style=DAY_NAME_STYLE,
        box=None,
        pad_edge=False,
        padding=(0, 1),
    )
    for name in DAY_NAMES:
        table.add_column(name, justify="center")

    highlight = today.day if today and (today.year, today.month) == (year, month) else None
    for week in get_month_calendar(year, month):
        table.add_row(*(_format_day(day, day == highlight) for day in week))
    return table


def _side_by_side(rows: Iterable[Iterable[Table]], title: Optional[str] = None) -> Table:
    grid = Table(
        title=title,
        title_style=TITLE_STYLE,
        box=None,
        show_header=False,
        pad_edge=False,
        padding=(0, 2, 1, 0),
    )
    for _ in range(MONTHS_PER_ROW):
        grid.add_column(vertical="top")
    for row in rows:
        grid.add_row(*row)
    return grid


def three_months_table(year: int, month: int, today: Optional[JalaliDate] = None) -> Table:
    """Previous, requested and next month next to each other."""

    (prev_year, prev_month), (next_year, next_month) = adjacent_months(year, month)
    return _side_by_side([
        [
            month_table(prev_year, prev_month, today, show_year=False),
            month_table(year, month, today, show_year=False),
            month_table(next_year, next_month, today, show_year=False),
        ]
    ])


def year_table(year: int, today: Optional[JalaliDate] = None) -> Table:
    """The whole year as four rows of three months under a year title."""

    rows = []
    for first in range(1, MONTHS_IN_YEAR + 1, MONTHS_PER_ROW):
        rows.append([
            month_table(year, month, today, show_year=False)
            for month in range(first, first + MONTHS_PER_ROW)
        ])
    return _side_by_side(rows, title=str(year))


def render(renderable: RenderableType, console: Optional[Console] = None) -> None:
    """Print ``renderable``, widening the console so that tables never wrap."""

    console = console or Console(highlight=False)
    options = console.options.update_width(_MAX_RENDER_WIDTH)
    needed = Measurement.get(console, options, renderable).maximum
    if console.width < needed:
        console.width = needed
    console.print(renderable)
