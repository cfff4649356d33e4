"""Comprehensive tests for the period model and factory.

These tests verify period construction across:
- Built-in units: year, quarter, month, week, day, hour, minute, second,
  stableMonth, decade, century, millennium
- Edge cases: leap years, week starts, year boundaries, custom bounds
- Invariants: containment and idempotence for every built-in unit
- Value types: Period and Duration validation

Run with: pytest tests/test_period.py -v
Coverage: pytest tests/test_period.py --cov=timeperiods.period
"""

import pytest
from datetime import datetime, timedelta, timezone

from timeperiods.errors import UnknownUnitError
from timeperiods.period import (
    Duration,
    Period,
    as_duration,
    create_custom_period,
    create_period,
    to_period,
)


def end_of_day(year, month, day):
    return datetime(year, month, day, 23, 59, 59, 999999)


BUILTIN_UNITS = [
    "year", "quarter", "month", "week", "day", "hour", "minute", "second",
    "stableMonth", "decade", "century",
]

SAMPLE_DATES = [
    datetime(2024, 1, 1),
    datetime(2024, 2, 29, 12, 0),
    datetime(2023, 2, 28, 23, 59, 59, 999999),
    datetime(2024, 3, 14, 10, 30, 15, 250),
    datetime(2024, 12, 31, 23, 59, 59),
    datetime(2021, 1, 3),  # Sunday, ISO week 53 of 2020
]


# ============================================================================
# Calendar Units
# ============================================================================

class TestQuarter:
    """Test quarter boundaries"""

    def test_quarter_q1(self, temporal):
        """Test Feb 15 falls in Jan 1 - Mar 31"""
        p = create_period(temporal, "quarter", datetime(2024, 2, 15))
        assert p.type == "quarter"
        assert p.start == datetime(2024, 1, 1)
        assert p.end == end_of_day(2024, 3, 31)
        assert p.number == 1

    def test_quarter_q3(self, temporal):
        """Test Aug 15 falls in Jul 1 - Sep 30"""
        p = create_period(temporal, "quarter", datetime(2024, 8, 15))
        assert p.start == datetime(2024, 7, 1)
        assert p.end == end_of_day(2024, 9, 30)
        assert p.number == 3

    def test_quarter_q4_last_instant(self, temporal):
        """Test the last microsecond of the year is still Q4"""
        p = create_period(temporal, "quarter", end_of_day(2024, 12, 31))
        assert p.start == datetime(2024, 10, 1)
        assert p.number == 4


class TestMonth:
    """Test month boundaries"""

    def test_month_leap_february(self, temporal):
        """Test February 2024 ends on the 29th"""
        p = create_period(temporal, "month", datetime(2024, 2, 15))
        assert p.start == datetime(2024, 2, 1)
        assert p.end == end_of_day(2024, 2, 29)
        assert p.number == 2

    def test_month_non_leap_february(self, temporal):
        """Test February 2023 ends on the 28th"""
        p = create_period(temporal, "month", datetime(2023, 2, 15))
        assert p.end == end_of_day(2023, 2, 28)

    def test_month_thirty_days(self, temporal):
        """Test April ends on the 30th"""
        p = create_period(temporal, "month", datetime(2024, 4, 30, 18))
        assert p.start == datetime(2024, 4, 1)
        assert p.end == end_of_day(2024, 4, 30)


class TestYear:
    """Test year boundaries"""

    def test_year(self, temporal):
        """Test year spans Jan 1 - Dec 31"""
        p = create_period(temporal, "year", datetime(2024, 6, 15))
        assert p.start == datetime(2024, 1, 1)
        assert p.end == end_of_day(2024, 12, 31)
        assert p.number == 2024

    def test_year_duration_leap(self, temporal):
        """Test leap year lasts 366 days"""
        p = create_period(temporal, "year", datetime(2024, 6, 15))
        assert p.duration == timedelta(days=366)


class TestWeek:
    """Test week boundaries and numbering"""

    def test_week_monday_start(self, temporal):
        """Test Thursday 2024-03-14 is in Mon 11 - Sun 17"""
        p = create_period(temporal, "week", datetime(2024, 3, 14))
        assert p.start == datetime(2024, 3, 11)
        assert p.end == end_of_day(2024, 3, 17)
        assert p.number == 11  # ISO week

    def test_week_sunday_start(self, sunday_temporal):
        """Test Thursday 2024-03-14 is in Sun 10 - Sat 16"""
        p = create_period(sunday_temporal, "week", datetime(2024, 3, 14))
        assert p.start == datetime(2024, 3, 10)
        assert p.end == end_of_day(2024, 3, 16)
        assert p.number == 10

    def test_week_start_day_is_own_week(self, temporal):
        """Test a Monday starts its own week"""
        p = create_period(temporal, "week", datetime(2024, 3, 11, 0, 0))
        assert p.start == datetime(2024, 3, 11)

    def test_week_crosses_year(self, temporal):
        """Test ISO week number for a week spanning New Year"""
        p = create_period(temporal, "week", datetime(2021, 1, 3))
        assert p.start == datetime(2020, 12, 28)
        assert p.end == end_of_day(2021, 1, 3)
        assert p.number == 53

    def test_sunday_week_numbered_by_start_year(self, sunday_temporal):
        """Test a week starting in December keeps that year's number"""
        p = create_period(sunday_temporal, "week", datetime(2025, 1, 2))
        assert p.start == datetime(2024, 12, 29)
        assert p.number == 52


class TestClockUnits:
    """Test day, hour, minute, second boundaries"""

    def test_day(self, temporal):
        p = create_period(temporal, "day", datetime(2024, 3, 14, 10, 30))
        assert p.start == datetime(2024, 3, 14)
        assert p.end == end_of_day(2024, 3, 14)
        assert p.number == 14
        assert p.duration == timedelta(days=1)

    def test_hour(self, temporal):
        p = create_period(temporal, "hour", datetime(2024, 3, 14, 10, 30, 5))
        assert p.start == datetime(2024, 3, 14, 10)
        assert p.end == datetime(2024, 3, 14, 10, 59, 59, 999999)
        assert p.number == 10

    def test_minute(self, temporal):
        p = create_period(temporal, "minute", datetime(2024, 3, 14, 10, 30, 5))
        assert p.start == datetime(2024, 3, 14, 10, 30)
        assert p.end == datetime(2024, 3, 14, 10, 30, 59, 999999)

    def test_second(self, temporal):
        p = create_period(temporal, "second", datetime(2024, 3, 14, 10, 30, 5, 123))
        assert p.start == datetime(2024, 3, 14, 10, 30, 5)
        assert p.end == datetime(2024, 3, 14, 10, 30, 5, 999999)
        assert p.number == 5


class TestStableMonth:
    """Test the fixed 6-week month grid"""

    def test_stable_month_monday_grid(self, temporal):
        """Test Feb 2024 grid runs Mon Jan 29 - Sun Mar 10"""
        p = create_period(temporal, "stableMonth", datetime(2024, 2, 15))
        assert p.start == datetime(2024, 1, 29)
        assert p.end == end_of_day(2024, 3, 10)
        assert p.duration == timedelta(days=42)
        assert p.number == 2

    def test_stable_month_sunday_grid(self, sunday_temporal):
        """Test Feb 2024 grid runs Sun Jan 28 - Sat Mar 9"""
        p = create_period(sunday_temporal, "stableMonth", datetime(2024, 2, 15))
        assert p.start == datetime(2024, 1, 28)
        assert p.end == end_of_day(2024, 3, 9)

    @pytest.mark.parametrize("month", range(1, 13))
    def test_stable_month_always_42_days(self, temporal, month):
        """Test every month of the year yields a 42 day grid"""
        p = create_period(temporal, "stableMonth", datetime(2023, month, 1))
        assert p.duration == timedelta(days=42)
        assert p.start <= datetime(2023, month, 1)


class TestYearSpans:
    """Test decade, century and millennium boundaries"""

    def test_decade(self, temporal):
        p = create_period(temporal, "decade", datetime(2024, 5, 5))
        assert p.start == datetime(2020, 1, 1)
        assert p.end == end_of_day(2029, 12, 31)
        assert p.number == 2020

    def test_decade_first_year(self, temporal):
        """Test 2020 belongs to the 2020s"""
        p = create_period(temporal, "decade", datetime(2020, 1, 1))
        assert p.start == datetime(2020, 1, 1)

    def test_century(self, temporal):
        p = create_period(temporal, "century", datetime(2024, 5, 5))
        assert p.start == datetime(2000, 1, 1)
        assert p.end == end_of_day(2099, 12, 31)

    def test_millennium(self, native_temporal):
        """Test millennium (native only: beyond the pandas Timestamp range)"""
        p = create_period(native_temporal, "millennium", datetime(2024, 5, 5))
        assert p.start == datetime(2000, 1, 1)
        assert p.end == end_of_day(2999, 12, 31)

    def test_decade_clamped_at_minyear(self, native_temporal):
        """Test the first decade starts at year 1"""
        p = create_period(native_temporal, "decade", datetime(5, 6, 1))
        assert p.start == datetime(1, 1, 1)
        assert p.end == end_of_day(9, 12, 31)

    @pytest.mark.parametrize("unit,years", [("decade", 10), ("century", 100), ("millennium", 1000)])
    def test_first_span_does_not_overlap_second(self, native_temporal, unit, years):
        """Test the shortened first span and the next one share no year"""
        first = create_period(native_temporal, unit, datetime(5, 6, 1))
        last = create_period(native_temporal, unit, datetime(years - 1, 6, 1))
        assert (first.start, first.end) == (last.start, last.end)
        second = create_period(native_temporal, unit, datetime(years, 6, 1))
        assert second.start == datetime(years, 1, 1)
        assert first.end < second.start
        assert datetime(years, 6, 1) not in first


# ============================================================================
# Invariants
# ============================================================================

class TestFactoryInvariants:
    """Test containment and idempotence for every built-in unit"""

    @pytest.mark.parametrize("unit", BUILTIN_UNITS)
    @pytest.mark.parametrize("date", SAMPLE_DATES)
    def test_period_contains_reference_date(self, temporal, unit, date):
        p = create_period(temporal, unit, date)
        assert p.start <= date <= p.end
        assert p.date == date

    @pytest.mark.parametrize("unit", BUILTIN_UNITS)
    @pytest.mark.parametrize("date", SAMPLE_DATES)
    def test_period_idempotent(self, temporal, unit, date):
        p = create_period(temporal, unit, date)
        assert create_period(temporal, unit, p.date) == p

    @pytest.mark.parametrize("unit", [u for u in BUILTIN_UNITS if u != "stableMonth"])
    def test_rederive_from_bounds(self, temporal, unit):
        """Test start and end re-derive the same bounds (grids overlap months, so not stableMonth)"""
        p = create_period(temporal, unit, datetime(2024, 3, 14, 10, 30))
        for instant in (p.start, p.end):
            again = create_period(temporal, unit, instant)
            assert (again.start, again.end) == (p.start, p.end)

    def test_period_value_accepted(self, temporal):
        """Test a Period can stand in for its reference date"""
        day = create_period(temporal, "day", datetime(2024, 3, 14, 10, 30))
        month = create_period(temporal, "month", day)
        assert month.date == day.date
        assert month.start == datetime(2024, 3, 1)

    def test_backends_agree(self):
        """Test native and pandas backends build identical periods"""
        from timeperiods import NativeAdapter, PandasAdapter, create_temporal

        date = datetime(2024, 3, 14, 10, 30)
        native = create_temporal(date=date, now=date, adapter=NativeAdapter())
        pandas = create_temporal(date=date, now=date, adapter=PandasAdapter())
        for unit in BUILTIN_UNITS:
            assert create_period(native, unit, date) == create_period(pandas, unit, date)

    def test_timezone_preserved(self, native_temporal):
        """Test tzinfo is carried through, never converted"""
        date = datetime(2024, 3, 14, 10, 30, tzinfo=timezone.utc)
        p = create_period(native_temporal, "day", date)
        assert p.start == datetime(2024, 3, 14, tzinfo=timezone.utc)
        assert p.end.tzinfo is timezone.utc


# ============================================================================
# Custom Periods & Errors
# ============================================================================

class TestCustomPeriods:
    """Test periods built from explicit bounds"""

    def test_custom_via_factory(self, temporal):
        start, end = datetime(2024, 3, 1), end_of_day(2024, 3, 10)
        p = create_period(temporal, "custom", datetime(2024, 3, 5), start=start, end=end)
        assert p.type == "custom"
        assert (p.start, p.end) == (start, end)
        assert p.date == datetime(2024, 3, 5)

    def test_custom_requires_bounds(self, temporal):
        with pytest.raises(ValueError, match="start and end"):
            create_period(temporal, "custom", datetime(2024, 3, 5))

    def test_custom_midpoint_default(self):
        p = create_custom_period(datetime(2024, 3, 1), datetime(2024, 3, 3))
        assert p.date == datetime(2024, 3, 2)
        assert p.number == 0

    def test_custom_reversed_bounds(self):
        with pytest.raises(ValueError, match="after end"):
            create_custom_period(datetime(2024, 3, 3), datetime(2024, 3, 1))

    def test_custom_date_outside(self):
        with pytest.raises(ValueError, match="outside"):
            create_custom_period(datetime(2024, 3, 1), datetime(2024, 3, 3), date=datetime(2024, 4, 1))


class TestFactoryErrors:
    """Test unknown units and bad inputs"""

    def test_unknown_unit(self, temporal):
        with pytest.raises(UnknownUnitError) as exc_info:
            create_period(temporal, "fortnight", datetime(2024, 3, 14))
        assert exc_info.value.unit == "fortnight"

    def test_unknown_unit_suggestion(self, temporal):
        """Test misspelled units get a 'did you mean' hint"""
        with pytest.raises(UnknownUnitError) as exc_info:
            create_period(temporal, "mnth", datetime(2024, 3, 14))
        assert "month" in exc_info.value.suggestions
        assert "Did you mean" in str(exc_info.value)

    def test_unknown_unit_is_value_error(self, temporal):
        with pytest.raises(ValueError):
            create_period(temporal, "fortnight", datetime(2024, 3, 14))

    def test_bad_reference_value(self, temporal):
        with pytest.raises(TypeError):
            create_period(temporal, "day", "2024-03-14")

    def test_to_period_defaults_to_day(self, temporal):
        p = to_period(temporal, datetime(2024, 3, 14, 10, 30))
        assert p.type == "day"
        assert p.start == datetime(2024, 3, 14)


# ============================================================================
# Value Types
# ============================================================================

class TestPeriodValue:
    """Test Period validation and helpers"""

    def test_period_frozen(self, temporal):
        p = create_period(temporal, "day", datetime(2024, 3, 14))
        with pytest.raises(Exception):
            p.start = datetime(2024, 1, 1)

    def test_period_start_after_end(self):
        with pytest.raises(ValueError):
            Period(type="custom", date=datetime(2024, 1, 1), start=datetime(2024, 1, 2), end=datetime(2024, 1, 1))

    def test_period_in_operator(self, temporal):
        p = create_period(temporal, "day", datetime(2024, 3, 14))
        assert datetime(2024, 3, 14, 23, 59) in p
        assert datetime(2024, 3, 15) not in p


class TestDuration:
    """Test Duration construction and arithmetic helpers"""

    def test_of_quarter(self):
        assert Duration.of(2, "quarter") == Duration(months=6)

    def test_of_decade(self):
        assert Duration.of(1, "decade") == Duration(years=10)

    def test_of_unknown_unit(self):
        with pytest.raises(ValueError):
            Duration.of(1, "fortnight")

    def test_from_mapping(self):
        assert Duration.from_mapping({"days": 2, "hours": 12}) == Duration(days=2, hours=12)

    def test_from_mapping_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown duration field"):
            Duration.from_mapping({"fortnights": 1})

    def test_rejects_non_integers(self):
        with pytest.raises(ValueError):
            Duration(days=1.5)
        with pytest.raises(ValueError):
            Duration(days=True)

    def test_scaled_and_negated(self):
        d = Duration(months=1, days=2)
        assert d.scaled(3) == Duration(months=3, days=6)
        assert -d == Duration(months=-1, days=-2)

    def test_is_zero(self):
        assert Duration().is_zero()
        assert not Duration(seconds=1).is_zero()

    def test_to_timedelta(self):
        assert Duration(weeks=1, hours=2).to_timedelta() == timedelta(days=7, hours=2)
        with pytest.raises(ValueError):
            Duration(months=1).to_timedelta()

    def test_as_duration(self):
        assert as_duration({"weeks": 2}) == Duration(weeks=2)
        with pytest.raises(ValueError):
            as_duration(14)
