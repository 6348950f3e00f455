"""Gregorian ↔ Jalali conversion and month layout helpers used by ``scal``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

__all__ = [
    "BREAKS",
    "NO_DAY",
    "JalaliDate",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_jalali_leap",
    "get_days_in_month",
    "get_day_of_week",
    "get_month_calendar",
]

GregorianDate = Tuple[int, int, int]

GREGORIAN_OFFSET = 621
ESFAND = 12
LEAP_INDICATOR = 0
FIRST_HALF_DAYS = 186  # 6 * 31
NO_DAY = 0

# Jalali years where the length of the leap cycle changes.
BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

_JALALI_MONTH_LENGTHS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
_JALALI_MONTH_OFFSETS = (0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336)
_GREGORIAN_MONTH_OFFSETS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_GREGORIAN_MONTH_OFFSETS_LEAP = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


@dataclass(frozen=True)
class JalaliDate:
    """Immutable representation of a Jalali (Persian) calendar date.

    Components are taken as given; callers are expected to pass a real date.
    """

    year: int
    month: int
    day: int

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> GregorianDate:
        return jalali_to_gregorian(self.year, self.month, self.day)

    def day_of_week(self) -> int:
        """Weekday with Saturday (Shanbe) as 0 and Friday (Jome) as 6."""
        return get_day_of_week(self.year, self.month, self.day)


class _YearCycle(NamedTuple):
    leap: int
    gregorian_year: int
    march: int


def _is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _cycle_for_year(year: int) -> _YearCycle:
    """Locate ``year`` in the break table.

    ``leap`` counts the years since the last leap year (0 means ``year`` is
    itself leap) and ``march`` is the day of March, in Gregorian year
    ``year + 621``, on which 1 Farvardin falls.
    """
    gregorian_year = year + GREGORIAN_OFFSET
    leap_j = -14
    previous_break = BREAKS[0]
    jump = 0

    for current_break in BREAKS[1:]:
        jump = current_break - previous_break
        if year < current_break:
            break
        leap_j += jump // 33 * 8 + jump % 33 // 4
        previous_break = current_break

    # Past the last break the cycle repeats with no segment end.
    bounded = year < BREAKS[-1]

    n = year - previous_break
    leap_j += n // 33 * 8 + (n % 33 + 3) // 4
    if bounded and jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    leap_g = gregorian_year // 4 - (gregorian_year // 100 + 1) * 3 // 4 - 150
    march = 20 + leap_j - leap_g

    # The last few years of a segment belong to the next cycle.
    if bounded and jump - n < 6:
        n = n - jump + (jump + 4) // 33 * 33

    position = (n + 1) % 33 - 1
    leap = 4 if position == -1 else position % 4
    return _YearCycle(leap, gregorian_year, march)


def _gregorian_day_number(year: int, month: int, day: int) -> int:
    """Days elapsed since 1600-01-01 in the proleptic Gregorian calendar."""
    years = year - 1600
    days = 365 * years + (years + 3) // 4 - (years + 99) // 100 + (years + 399) // 400
    days += _GREGORIAN_MONTH_OFFSETS[month - 1] + day - 1
    if month > 2 and _is_gregorian_leap(year):
        days += 1
    return days


def _gregorian_from_day_number(days: int) -> GregorianDate:
    year = 1600 + 400 * (days // _DAYS_IN_400_YEARS)
    days %= _DAYS_IN_400_YEARS

    leap = True
    if days >= _DAYS_IN_100_YEARS + 1:
        days -= 1
        year += 100 * (days // _DAYS_IN_100_YEARS)
        days %= _DAYS_IN_100_YEARS
        if days >= 365:
            days += 1
        else:
            leap = False

    year += 4 * (days // _DAYS_IN_4_YEARS)
    days %= _DAYS_IN_4_YEARS

    if days >= 366:
        leap = False
        days -= 1
        year += days // 365
        days %= 365

    offsets = _GREGORIAN_MONTH_OFFSETS_LEAP if leap else _GREGORIAN_MONTH_OFFSETS
    for index in range(11, -1, -1):
        if days >= offsets[index]:
            return year, index + 1, days - offsets[index] + 1
    raise AssertionError("unreachable: month offsets start at zero")  # pragma: no cover


def _nowruz_day_number(year: int) -> int:
    """Day number of 1 Farvardin of the given Jalali year."""
    cycle = _cycle_for_year(year)
    return _gregorian_day_number(cycle.gregorian_year, 3, cycle.march)


def _gregorian_weekday(year: int, month: int, day: int) -> int:
    # 1600-01-01 was a Saturday; Sunday is 0.
    return (_gregorian_day_number(year, month, day) + 6) % 7


def gregorian_to_jalali(year: int, month: int, day: int) -> JalaliDate:
    days = _gregorian_day_number(year, month, day)

    jy = year - GREGORIAN_OFFSET
    start_of_year = _nowruz_day_number(jy)
    if days < start_of_year:
        jy -= 1
        start_of_year = _nowruz_day_number(jy)

    day_of_year = days - start_of_year
    if day_of_year < FIRST_HALF_DAYS:
        return JalaliDate(jy, 1 + day_of_year // 31, 1 + day_of_year % 31)

    day_of_year -= FIRST_HALF_DAYS
    return JalaliDate(jy, 7 + day_of_year // 30, 1 + day_of_year % 30)


def jalali_to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    days = _nowruz_day_number(year) + _JALALI_MONTH_OFFSETS[month - 1] + day - 1
    return _gregorian_from_day_number(days)


def is_jalali_leap(year: int) -> bool:
    return _cycle_for_year(year).leap == LEAP_INDICATOR


def get_days_in_month(year: int, month: int) -> int:
    if month == ESFAND and is_jalali_leap(year):
        return 30
    return _JALALI_MONTH_LENGTHS[month - 1]


def get_day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday of a Jalali date, Saturday (Shanbe) being 0."""
    gregorian_weekday = _gregorian_weekday(*jalali_to_gregorian(year, month, day))
    return (gregorian_weekday + 1) % 7


def get_month_calendar(year: int, month: int) -> List[List[int]]:
    """Lay out a month as weeks of seven slots starting on Saturday.

    Slots before the first day and after the last one hold ``NO_DAY``.
    """
    days_in_month = get_days_in_month(year, month)
    first_day_of_week = get_day_of_week(year, month, 1)
    weeks = (days_in_month + first_day_of_week + 6) // 7

    calendar: List[List[int]] = []
    day = 1 - first_day_of_week
    for _ in range(weeks):
        calendar.append([d if 1 <= d <= days_in_month else NO_DAY for d in range(day, day + 7)])
        day += 7
    return calendar
