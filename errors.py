"""Exceptions raised when a month configuration is rejected."""


class MonthConfigError(ValueError):
    """Base class for invalid month configuration values."""


class InvalidRowCount(MonthConfigError):
    def __init__(self, max_row_count: object) -> None:
        super().__init__(f"max_row_count must be between 1 and 6, got {max_row_count!r}")
        self.max_row_count = max_row_count


class InvalidRange(MonthConfigError):
    """Raised for unusable month bounds, including start after end."""


class InvalidFirstDayOfWeek(MonthConfigError):
    def __init__(self, first_day_of_week: object) -> None:
        super().__init__(
            f"first_day_of_week must be a weekday number 0-6, got {first_day_of_week!r}"
        )
        self.first_day_of_week = first_day_of_week


class InvalidStyle(MonthConfigError):
    """Raised for an in-date or out-date style that is not a known member."""
