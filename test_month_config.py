import calendar
import unittest
from datetime import MAXYEAR, MINYEAR, date
from unittest.mock import patch

import month_config
from errors import (
    InvalidFirstDayOfWeek,
    InvalidRange,
    InvalidRowCount,
    InvalidStyle,
    MonthConfigError,
)
from models import InDateStyle, OutDateStyle, YearMonth
from month_config import MonthConfig


def _config(**overrides):
    values = dict(
        out_date_style=OutDateStyle.END_OF_GRID,
        in_date_style=InDateStyle.ALIGNED,
        max_row_count=6,
        start_month=YearMonth(2020, 1),
        end_month=YearMonth(2020, 12),
        first_day_of_week=calendar.MONDAY,
        has_boundaries=True,
    )
    values.update(overrides)
    return MonthConfig(**values)


class MonthConfigValidationTests(unittest.TestCase):
    def test_row_count_bounds(self):
        for rows in (0, 7, -1, True, 2.5, "6"):
            with self.subTest(rows=rows):
                with self.assertRaises(InvalidRowCount):
                    _config(max_row_count=rows)
        for rows in range(1, 7):
            self.assertEqual(_config(max_row_count=rows).max_row_count, rows)

    def test_start_after_end_is_rejected(self):
        with self.assertRaises(InvalidRange):
            _config(start_month=YearMonth(2021, 1), end_month=YearMonth(2020, 12))
        self.assertEqual(len(_config(end_month=YearMonth(2020, 1)).months), 1)

    def test_malformed_months_are_rejected(self):
        for value in ((2020, 13), (2020,), "2020-01", None):
            with self.subTest(value=value):
                with self.assertRaises(InvalidRange):
                    _config(start_month=value)

    def test_years_outside_datetime_range_are_rejected(self):
        for value in ((0, 5), (MAXYEAR + 1, 1), (-3, 12)):
            with self.subTest(value=value):
                with self.assertRaises(InvalidRange):
                    _config(start_month=value, end_month=value)

    def test_first_month_rejected_when_in_dates_are_needed(self):
        # Jan 1, year 1 falls on a Monday
        first = (MINYEAR, 1)
        with self.assertRaises(InvalidRange):
            _config(start_month=first, end_month=first, first_day_of_week=calendar.SUNDAY)
        monday = _config(start_month=first, end_month=first, first_day_of_week=calendar.MONDAY)
        self.assertEqual(monday.months[0].first_day.date, date(MINYEAR, 1, 1))
        unaligned = _config(
            start_month=first, end_month=first,
            first_day_of_week=calendar.SUNDAY, in_date_style=InDateStyle.NONE,
        )
        self.assertEqual(unaligned.months[0].first_day.date, date(MINYEAR, 1, 1))

    def test_last_month_rejected_when_out_dates_are_needed(self):
        last = (MAXYEAR, 12)
        for out_style in (OutDateStyle.END_OF_ROW, OutDateStyle.END_OF_GRID):
            with self.subTest(out_style=out_style):
                with self.assertRaises(InvalidRange):
                    _config(
                        start_month=last, end_month=last,
                        first_day_of_week=calendar.SUNDAY, out_date_style=out_style,
                    )
        unpadded = _config(
            start_month=last, end_month=last,
            first_day_of_week=calendar.SUNDAY, out_date_style=OutDateStyle.NONE,
        )
        self.assertEqual(unpadded.months[-1].last_day.date, date(MAXYEAR, 12, 31))

    def test_last_month_accepted_when_its_last_row_is_full(self):
        last = (MAXYEAR, 12)
        # week ends on Dec 31 so no out-dates are needed
        week_start = (date(MAXYEAR, 12, 31).weekday() + 1) % 7
        config = _config(
            start_month=last, end_month=last,
            first_day_of_week=week_start, out_date_style=OutDateStyle.END_OF_ROW,
        )
        self.assertEqual(config.months[-1].last_day.date, date(MAXYEAR, 12, 31))

    def test_unbounded_mode_allows_calendar_edges(self):
        for value in ((MINYEAR, 1), (MAXYEAR, 12)):
            with self.subTest(value=value):
                config = _config(
                    start_month=value, end_month=value,
                    first_day_of_week=calendar.SUNDAY, has_boundaries=False,
                )
                self.assertEqual(len(config.months[0].days), YearMonth(*value).length)

    def test_unknown_style_is_a_config_error(self):
        with self.assertRaises(InvalidStyle):
            _config(out_date_style="sideways")
        with self.assertRaises(InvalidStyle):
            _config(in_date_style="centered")
        self.assertTrue(issubclass(InvalidStyle, MonthConfigError))

    def test_first_day_of_week_bounds(self):
        with self.assertRaises(InvalidFirstDayOfWeek):
            _config(first_day_of_week=7)
        with self.assertRaises(InvalidFirstDayOfWeek):
            _config(first_day_of_week=-1)
        self.assertEqual(_config(first_day_of_week=calendar.SUNDAY).first_day_of_week, 6)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(MonthConfigError, ValueError))
        with self.assertRaises(ValueError):
            _config(max_row_count=9)

    def test_validation_happens_before_generation(self):
        with patch.object(month_config, "generate_bounded_months") as gen:
            with self.assertRaises(InvalidRowCount):
                _config(max_row_count=0)
        gen.assert_not_called()

    def test_inputs_are_normalised(self):
        config = _config(
            start_month=(2020, 3),
            end_month=date(2020, 5, 17),
            out_date_style="end_of_row",
            in_date_style="none",
        )
        self.assertEqual(config.start_month, YearMonth(2020, 3))
        self.assertIsInstance(config.start_month, YearMonth)
        self.assertEqual(config.end_month, YearMonth(2020, 5))
        self.assertIs(config.out_date_style, OutDateStyle.END_OF_ROW)
        self.assertIs(config.in_date_style, InDateStyle.NONE)


class MonthConfigMonthsTests(unittest.TestCase):
    def test_months_are_computed_once(self):
        config = _config()
        with patch.object(
            month_config, "generate_bounded_months", wraps=month_config.generate_bounded_months
        ) as gen:
            first = config.months
            second = config.months
        self.assertIs(first, second)
        gen.assert_called_once()

    def test_equal_configs_give_equal_months(self):
        a = _config(max_row_count=3)
        b = _config(max_row_count=3)
        self.assertEqual(a, b)
        self.assertEqual(a.months, b.months)
        self.assertIsNot(a.months, b.months)

    def test_bounded_covers_every_month(self):
        months = _config().months
        self.assertIsInstance(months, tuple)
        self.assertEqual(len(months), 12)
        self.assertEqual(
            [m.year_month for m in months], [YearMonth(2020, m) for m in range(1, 13)]
        )
        self.assertTrue(all(len(m.weeks) == 6 for m in months))

    def test_unbounded_mode_uses_continuous_days(self):
        config = _config(
            has_boundaries=False,
            start_month=YearMonth(2021, 1),
            end_month=YearMonth(2021, 2),
        )
        months = config.months
        self.assertEqual(len(months), 2)
        self.assertEqual([len(m.days) for m in months], [42, 17])
        self.assertTrue(all(m.split_index is None and m.split_count is None for m in months))

    def test_index_of_bounded(self):
        config = _config(max_row_count=2)
        # every 2020 month fills a six-row grid, so three pages each
        self.assertEqual(config.index_of(YearMonth(2020, 1)), 0)
        self.assertEqual(config.index_of((2020, 4)), 9)
        self.assertEqual(config.months[9].split_index, 0)
        self.assertIsNone(config.index_of(YearMonth(2021, 1)))

    def test_index_of_unbounded(self):
        config = _config(
            has_boundaries=False,
            start_month=YearMonth(2021, 1),
            end_month=YearMonth(2021, 2),
        )
        self.assertEqual(config.index_of(YearMonth(2021, 1)), 0)
        # Feb 1 2021 is day 32, on row 5 of the first page
        self.assertEqual(config.index_of(YearMonth(2021, 2)), 0)
        self.assertIsNone(config.index_of(YearMonth(2020, 12)))


if __name__ == "__main__":
    unittest.main()
