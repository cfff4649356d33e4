"""Comparison and membership checks.

  is_same(temporal, a, b, unit)      same `unit` period?
  contains(period, target)           inclusive membership test
  is_valid_period(temporal, period)  period matches its unit's rules
  is_today / is_weekday / is_weekend convenience predicates
"""

from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Union

from timeperiods.period.periodfactory import create_period, reference_date
from timeperiods.period.periodtypes import Period

if TYPE_CHECKING:
    from timeperiods.temporal.temporalcore import Temporal


DateOrPeriod = Union[datetime, Period]

# datetime.weekday(): Saturday = 5, Sunday = 6
WEEKEND_DAYS = (5, 6)


def _quarter_key(date: datetime):
    return date.year, (date.month - 1) // 3


def is_same(
    temporal: "Temporal",
    a: Optional[DateOrPeriod],
    b: Optional[DateOrPeriod],
    unit: str,
) -> bool:
    """
    True when `a` and `b` fall in the same `unit` period.

    Periods are compared through their reference `date`. "quarter" is
    compared as (year, month // 3) so every backend agrees; adapter units
    are delegated to the adapter; any other unit compares the periods the
    factory derives (stableMonth: same grid start). For "custom", two
    periods are the same when their bounds are equal.

    Args:
        temporal: Temporal context
        a: datetime, Period, or None
        b: datetime, Period, or None
        unit: Unit name

    Returns:
        False if either side is None, otherwise the comparison result

    Raises:
        UnknownUnitError: Unit is not registered
    """
    if a is None or b is None:
        return False

    if unit == "custom":
        if isinstance(a, Period) and isinstance(b, Period):
            return a.start == b.start and a.end == b.end
        return reference_date(a) == reference_date(b)

    date_a, date_b = reference_date(a), reference_date(b)

    if unit == "quarter":
        return _quarter_key(date_a) == _quarter_key(date_b)

    definition = temporal.registry.require(unit)
    if definition.adapter_unit is not None:
        return temporal.adapter.is_same(
            date_a, date_b, definition.adapter_unit, week_starts_on=temporal.week_starts_on
        )

    return create_period(temporal, unit, date_a).start == create_period(temporal, unit, date_b).start


def contains(period: Period, target: DateOrPeriod) -> bool:
    """
    True when `target` lies within the period (both bounds inclusive).

    A Period target is tested through its reference `date`. A stableMonth
    only contains dates of its own calendar month: the leading and trailing
    days from neighbouring months shown in the 42-day grid are excluded.

    Examples:
        >>> contains(day, day.start) and contains(day, day.end)
        True
    """
    instant = reference_date(target)
    if period.type == "stableMonth":
        return (instant.year, instant.month) == (period.date.year, period.date.month)
    return period.start <= instant <= period.end


def is_valid_period(temporal: "Temporal", period: Period) -> bool:
    """
    True when the period matches its unit's rules.

    Uses the unit's `validate` hook when registered; otherwise checks that
    re-deriving the period from its reference date gives the same bounds.
    "custom" periods are always valid. Unknown units are not valid.
    """
    if period.type == "custom":
        return True
    definition = temporal.registry.get_unit_definition(period.type)
    if definition is None:
        return False
    if definition.validate is not None:
        return bool(definition.validate(period))
    rebuilt = create_period(temporal, period.type, period.date)
    return rebuilt.start == period.start and rebuilt.end == period.end


def is_today(temporal: "Temporal", period: DateOrPeriod) -> bool:
    """Same day as the context's `now` period."""
    return is_same(temporal, period, temporal.now, "day")


def is_weekend(period: DateOrPeriod) -> bool:
    """Reference date falls on Saturday or Sunday."""
    return reference_date(period).weekday() in WEEKEND_DAYS


def is_weekday(period: DateOrPeriod) -> bool:
    return not is_weekend(period)


__all__ = [
    "is_same",
    "contains",
    "is_valid_period",
    "is_today",
    "is_weekend",
    "is_weekday",
]
