import io

import pytest
from rich.console import Console
from rich.text import Text

from shamsi_calendar.api.converter import JalaliDate
from shamsi_calendar.display import (
    DAY_NAMES,
    MONTH_NAMES,
    TODAY_STYLE,
    _format_day,
    adjacent_months,
    month_table,
    render,
    three_months_table,
    year_table,
)


def render_to_text(renderable, width=80):
    console = Console(file=io.StringIO(), color_system=None, width=width, highlight=False)
    render(renderable, console)
    return console.file.getvalue()


@pytest.mark.parametrize(
    "year,month,expected",
    [
        (1404, 1, ((1403, 12), (1404, 2))),
        (1404, 12, ((1404, 11), (1405, 1))),
        (1404, 6, ((1404, 5), (1404, 7))),
    ],
)
def test_adjacent_months_wrap_around_the_year(year, month, expected):
    assert adjacent_months(year, month) == expected


def test_format_day():
    assert _format_day(0, False) == ""
    assert _format_day(12, False) == "12"
    today = _format_day(12, True)
    assert isinstance(today, Text)
    assert today.plain == "12"
    assert today.style == TODAY_STYLE


def test_month_table_structure():
    table = month_table(1404, 1)
    assert table.title == "Farvardin 1404"
    assert [column.header for column in table.columns] == list(DAY_NAMES)
    assert table.row_count == 6
    assert month_table(1404, 1, show_year=False).title == "Farvardin"


def test_month_table_highlights_today_only_in_its_month():
    today = JalaliDate(1404, 1, 8)
    table = month_table(1404, 1, today)
    highlighted = [cell for column in table.columns for cell in column.cells if isinstance(cell, Text)]
    assert [cell.plain for cell in highlighted] == ["8"]

    other = month_table(1404, 2, today)
    assert not [cell for column in other.columns for cell in column.cells if isinstance(cell, Text)]


def test_render_single_month():
    output = render_to_text(month_table(1403, 12))
    lines = output.splitlines()
    assert lines[0].strip() == "Esfand 1403"
    assert lines[1].split() == list(DAY_NAMES)
    assert "30" in output
    assert "\x1b[" not in output


def test_render_three_months_is_not_wrapped():
    output = render_to_text(three_months_table(1404, 1), width=40)
    lines = output.splitlines()
    assert lines[0].split() == ["Esfand", "Farvardin", "Ordibehesht"]
    assert lines[1].split() == list(DAY_NAMES) * 3


def test_render_year_lists_every_month():
    output = render_to_text(year_table(1404))
    assert output.splitlines()[0].strip() == "1404"
    positions = [output.index(name) for name in MONTH_NAMES]
    assert positions == sorted(positions)


def test_render_colors_today_when_terminal_forced():
    console = Console(file=io.StringIO(), force_terminal=True, color_system="standard", width=200)
    render(month_table(1404, 1, JalaliDate(1404, 1, 8)), console)
    assert "\x1b[" in console.file.getvalue()
