"""Validated month configuration with lazily generated months."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from functools import cached_property

from errors import InvalidFirstDayOfWeek, InvalidRange, InvalidRowCount, InvalidStyle
from models import CalendarMonth, DayOwner, InDateStyle, OutDateStyle, YearMonth
from month_grid import GRID_ROWS, generate_bounded_months, generate_unbounded_months


def _to_year_month(value: object, name: str) -> YearMonth:
    if isinstance(value, date):
        return YearMonth.of(value)
    if isinstance(value, tuple) and len(value) == 2:
        year, month = value
        if isinstance(year, int) and isinstance(month, int) and 1 <= month <= 12:
            if not MINYEAR <= year <= MAXYEAR:
                raise InvalidRange(
                    f"{name} year must be between {MINYEAR} and {MAXYEAR}, got {year}"
                )
            return YearMonth(year, month)
    raise InvalidRange(f"{name} must be a (year, month) pair, got {value!r}")


def _to_style(enum_cls: type, value: object, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidStyle(f"unknown {name}: {value!r}") from None


def _needs_in_dates(
    year_month: YearMonth,
    first_day_of_week: int,
    in_date_style: InDateStyle,
) -> bool:
    return (
        in_date_style is InDateStyle.ALIGNED
        and year_month.first_day.weekday() != first_day_of_week
    )


def _needs_out_dates(
    year_month: YearMonth,
    first_day_of_week: int,
    in_date_style: InDateStyle,
    out_date_style: OutDateStyle,
) -> bool:
    if out_date_style is OutDateStyle.NONE:
        return False
    lead = 0
    if in_date_style is InDateStyle.ALIGNED:
        lead = (year_month.first_day.weekday() - first_day_of_week) % 7
    cells = lead + year_month.length
    if cells % 7:
        return True
    return out_date_style is OutDateStyle.END_OF_GRID and cells // 7 < GRID_ROWS


@dataclass(frozen=True)
class MonthConfig:
    """Layout rules for a range of months.

    Values are checked on construction. ``months`` is computed on first
    access and cached for the lifetime of the instance; concurrent first
    reads may compute it more than once but always agree on the result.
    """

    out_date_style: OutDateStyle
    in_date_style: InDateStyle
    max_row_count: int
    start_month: YearMonth
    end_month: YearMonth
    first_day_of_week: int = calendar.MONDAY
    has_boundaries: bool = True

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(
            self, "out_date_style", _to_style(OutDateStyle, self.out_date_style, "out_date_style")
        )
        object.__setattr__(
            self, "in_date_style", _to_style(InDateStyle, self.in_date_style, "in_date_style")
        )
        start = _to_year_month(self.start_month, "start_month")
        end = _to_year_month(self.end_month, "end_month")
        object.__setattr__(self, "start_month", start)
        object.__setattr__(self, "end_month", end)

        rows = self.max_row_count
        if isinstance(rows, bool) or not isinstance(rows, int) or not 1 <= rows <= GRID_ROWS:
            raise InvalidRowCount(rows)
        if start > end:
            raise InvalidRange(f"start_month {start} is after end_month {end}")
        fdow = self.first_day_of_week
        if isinstance(fdow, bool) or not isinstance(fdow, int) or not 0 <= fdow <= 6:
            raise InvalidFirstDayOfWeek(fdow)
        object.__setattr__(self, "first_day_of_week", int(fdow))

        # Adjacent-month days must stay within the years datetime supports
        if not self.has_boundaries:
            return
        if start == (MINYEAR, 1) and _needs_in_dates(
            start, self.first_day_of_week, self.in_date_style
        ):
            raise InvalidRange(f"start_month {start} would need in-dates before year {MINYEAR}")
        if end == (MAXYEAR, 12) and _needs_out_dates(
            end, self.first_day_of_week, self.in_date_style, self.out_date_style
        ):
            raise InvalidRange(f"end_month {end} would need out-dates after year {MAXYEAR}")

    @cached_property
    def months(self) -> tuple[CalendarMonth, ...]:
        if self.has_boundaries:
            months = generate_bounded_months(
                self.start_month, self.end_month, self.first_day_of_week,
                self.max_row_count, self.in_date_style, self.out_date_style,
            )
        else:
            months = generate_unbounded_months(
                self.start_month, self.end_month, self.max_row_count
            )
        return tuple(months)

    def index_of(self, year_month: YearMonth | tuple[int, int]) -> int | None:
        """Return the index of the first page showing the 1st of year_month."""
        target = YearMonth(*year_month).first_day
        for index, month in enumerate(self.months):
            if any(
                day.owner is DayOwner.THIS_MONTH and day.date == target
                for day in month.days
            ):
                return index
        return None
