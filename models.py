"""Value types produced by month grid generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NamedTuple

from calendar_logic import days_in_month, iso_week_numbers, next_month, prev_month


class YearMonth(NamedTuple):
    """A calendar month; orders chronologically."""

    year: int
    month: int

    @classmethod
    def of(cls, d: date) -> YearMonth:
        return cls(d.year, d.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse a "YYYY-MM" string."""
        year, sep, month = text.partition("-")
        if not sep:
            raise ValueError(f"expected YYYY-MM, got {text!r}")
        result = cls(int(year), int(month))
        if not 1 <= result.month <= 12:
            raise ValueError(f"month out of range in {text!r}")
        return result

    @property
    def length(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.length)

    @property
    def next(self) -> YearMonth:
        return YearMonth(*next_month(self.year, self.month))

    @property
    def previous(self) -> YearMonth:
        return YearMonth(*prev_month(self.year, self.month))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


class DayOwner(Enum):
    """Which month a grid cell's date belongs to."""

    PREVIOUS_MONTH = "previous_month"
    THIS_MONTH = "this_month"
    NEXT_MONTH = "next_month"


class InDateStyle(Enum):
    NONE = "none"
    ALIGNED = "aligned"


class OutDateStyle(Enum):
    NONE = "none"
    END_OF_ROW = "end_of_row"
    END_OF_GRID = "end_of_grid"


@dataclass(frozen=True)
class CalendarDay:
    date: date
    owner: DayOwner

    @property
    def day(self) -> int:
        return self.date.day


Week = tuple[CalendarDay, ...]


@dataclass(frozen=True)
class CalendarMonth:
    """One scrollable page of the calendar.

    split_index/split_count locate this page among the pages produced for the
    same month. Both are None when months are generated without boundaries.
    """

    year_month: YearMonth
    weeks: tuple[Week, ...]
    split_index: int | None
    split_count: int | None

    @property
    def year(self) -> int:
        return self.year_month.year

    @property
    def month(self) -> int:
        return self.year_month.month

    @property
    def days(self) -> list[CalendarDay]:
        return [day for week in self.weeks for day in week]

    @property
    def first_day(self) -> CalendarDay:
        return self.weeks[0][0]

    @property
    def last_day(self) -> CalendarDay:
        return self.weeks[-1][-1]

    @property
    def week_numbers(self) -> list[int]:
        """ISO week number of each row."""
        return iso_week_numbers([[day.date for day in week] for week in self.weeks])
