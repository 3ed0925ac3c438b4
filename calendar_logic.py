"""Pure calendar calculations with no UI dependencies."""

import calendar
from collections.abc import Iterator, Sequence
from datetime import date


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month (leap-year aware)."""
    return calendar.monthrange(year, month)[1]


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


def month_range(start: tuple[int, int], end: tuple[int, int]) -> Iterator[tuple[int, int]]:
    """Yield every (year, month) from start to end, both inclusive."""
    current = start
    while current <= end:
        yield current
        current = next_month(*current)


def week_of_month(d: date, first_day_of_week: int) -> int:
    """Return the 1-based week of month for d.

    Weeks start on first_day_of_week (calendar.MONDAY .. calendar.SUNDAY) and
    week 1 is the week containing the 1st, however few days of it fall in
    the month.
    """
    offset = (date(d.year, d.month, 1).weekday() - first_day_of_week) % 7
    return (offset + d.day - 1) // 7 + 1


def iso_week_numbers(rows: Sequence[Sequence[date]]) -> list[int]:
    """Return the ISO week number of each row, taken from its first date."""
    return [row[0].isocalendar()[1] for row in rows]
