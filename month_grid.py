"""Month grid generation: weeks, in/out-date padding and row splitting.

Every function here is pure. The bounded pipeline for one month is
build_weeks -> pad_weeks -> split_rows; generate_unbounded_months streams the
whole range instead and ignores month boundaries.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from itertools import groupby

from calendar_logic import month_range, week_of_month
from models import (
    CalendarDay,
    CalendarMonth,
    DayOwner,
    InDateStyle,
    OutDateStyle,
    Week,
    YearMonth,
)

logger = logging.getLogger(__name__)

GRID_ROWS = 6


def _chunk(items: Sequence, size: int) -> list[tuple]:
    return [tuple(items[i:i + size]) for i in range(0, len(items), size)]


def _run(year_month: YearMonth, first: int, count: int, owner: DayOwner) -> Week:
    """Return count consecutive days of year_month starting at day first."""
    return tuple(
        CalendarDay(date(year_month.year, year_month.month, day), owner)
        for day in range(first, first + count)
    )


def month_days(year_month: YearMonth) -> Week:
    """All days of the month, tagged THIS_MONTH."""
    return _run(year_month, 1, year_month.length, DayOwner.THIS_MONTH)


def build_weeks(
    year_month: YearMonth,
    first_day_of_week: int,
    in_date_style: InDateStyle,
) -> list[Week]:
    """Group the days of a month into week rows.

    NONE chunks the month by 7 from the 1st, leaving a short last row.
    ALIGNED groups by week of month and fills the first row with the trailing
    days of the previous month.
    """
    days = month_days(year_month)
    match in_date_style:
        case InDateStyle.NONE:
            return _chunk(days, 7)
        case InDateStyle.ALIGNED:
            weeks = [
                tuple(group)
                for _, group in groupby(
                    days, key=lambda d: week_of_month(d.date, first_day_of_week)
                )
            ]
            missing = 7 - len(weeks[0])
            if missing:
                previous = year_month.previous
                in_dates = _run(
                    previous, previous.length - missing + 1, missing, DayOwner.PREVIOUS_MONTH
                )
                weeks[0] = in_dates + weeks[0]
            return weeks
        case _:
            raise ValueError(f"unknown in-date style: {in_date_style!r}")


def pad_weeks(
    weeks: Sequence[Week],
    year_month: YearMonth,
    out_date_style: OutDateStyle,
) -> list[Week]:
    """Append next-month out-dates according to out_date_style."""
    match out_date_style:
        case OutDateStyle.NONE:
            return list(weeks)
        case OutDateStyle.END_OF_ROW | OutDateStyle.END_OF_GRID:
            pass
        case _:
            raise ValueError(f"unknown out-date style: {out_date_style!r}")

    padded = list(weeks)
    following = year_month.next
    next_day = 1

    missing = 7 - len(padded[-1])
    if missing:
        padded[-1] = padded[-1] + _run(following, next_day, missing, DayOwner.NEXT_MONTH)
        next_day += missing

    if out_date_style is OutDateStyle.END_OF_GRID:
        while len(padded) < GRID_ROWS:
            padded.append(_run(following, next_day, 7, DayOwner.NEXT_MONTH))
            next_day += 7
    return padded


def split_rows(
    weeks: Sequence[Week],
    year_month: YearMonth,
    max_row_count: int,
) -> list[CalendarMonth]:
    """Split a month's rows into pages of at most max_row_count rows."""
    pages = _chunk(weeks, max_row_count)
    return [
        CalendarMonth(year_month, page, index, len(pages))
        for index, page in enumerate(pages)
    ]


def generate_bounded_month(
    year_month: YearMonth,
    first_day_of_week: int,
    max_row_count: int,
    in_date_style: InDateStyle,
    out_date_style: OutDateStyle,
) -> list[CalendarMonth]:
    weeks = build_weeks(year_month, first_day_of_week, in_date_style)
    weeks = pad_weeks(weeks, year_month, out_date_style)
    return split_rows(weeks, year_month, max_row_count)


def generate_bounded_months(
    start_month: YearMonth,
    end_month: YearMonth,
    first_day_of_week: int,
    max_row_count: int,
    in_date_style: InDateStyle,
    out_date_style: OutDateStyle,
) -> list[CalendarMonth]:
    months: list[CalendarMonth] = []
    for ym in month_range(start_month, end_month):
        months.extend(
            generate_bounded_month(
                YearMonth(*ym), first_day_of_week, max_row_count,
                in_date_style, out_date_style,
            )
        )
    logger.debug(
        "Generated %d bounded months for %s..%s", len(months), start_month, end_month
    )
    return months


def generate_unbounded_months(
    start_month: YearMonth,
    end_month: YearMonth,
    max_row_count: int,
) -> list[CalendarMonth]:
    """Chunk the continuous day range into pages, ignoring month boundaries.

    Each page is labelled with the month of its first day. No padding is
    added, so only the very last row may be short.
    """
    days: list[CalendarDay] = []
    for ym in month_range(start_month, end_month):
        days.extend(month_days(YearMonth(*ym)))

    rows = _chunk(days, 7)
    months = [
        CalendarMonth(YearMonth.of(page[0][0].date), page, None, None)
        for page in _chunk(rows, max_row_count)
    ]
    logger.debug(
        "Generated %d unbounded months for %s..%s", len(months), start_month, end_month
    )
    return months
