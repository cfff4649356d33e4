"""Period Factory
--------------

Builds Period values for a unit from a reference date. Unit dispatch goes
through the context's unit registry (one lookup for built-ins and
registered units alike); "custom" periods are built from explicit bounds.

Boundary math that must not depend on backend quirks lives here:

  - quarter: Q1 = Jan-Mar .. Q4 = Oct-Dec, from month // 3
  - stableMonth: fixed 6-week (42 day) grid starting on the configured
    week start at or before the 1st of the month
  - decade / century / millennium: floor(year / N) * N, starting no
    earlier than year 1

Examples:
  >>> p = create_period(temporal, "quarter", datetime(2024, 2, 15))
  >>> p.start, p.end
  (datetime.datetime(2024, 1, 1, 0, 0), datetime.datetime(2024, 3, 31, 23, 59, 59, 999999))

  >>> grid = create_period(temporal, "stableMonth", datetime(2024, 2, 15))
  >>> (grid.end - grid.start).days + 1
  42
"""

from __future__ import annotations
from datetime import MINYEAR, datetime
from typing import TYPE_CHECKING, Optional, Tuple, Union

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from timeperiods.period.periodtypes import RESOLUTION, Period

if TYPE_CHECKING:
    from timeperiods.adapters.adapterbase import DateAdapter
    from timeperiods.temporal.temporalcore import Temporal


# Days in a stable month grid: 6 rows of 7 days
STABLE_MONTH_DAYS = 42
STABLE_MONTH_WEEKS = 6

# Years per derived multi-year unit
YEAR_SPANS = {
    "decade": 10,
    "century": 100,
    "millennium": 1000,
}

DateOrPeriod = Union[datetime, Period]


def reference_date(value: DateOrPeriod) -> datetime:
    """The instant to derive from: a datetime as-is, a Period's `date`."""
    if isinstance(value, Period):
        return value.date
    if isinstance(value, datetime):
        return value
    raise TypeError(f"Expected datetime or Period, got {type(value).__name__}")


# ---- Boundary math ----

def quarter_bounds(date: datetime, adapter: "DateAdapter") -> Tuple[datetime, datetime]:
    """Calendar quarter containing `date`, independent of adapter quarter rules."""
    first_month = (date.month - 1) // 3 * 3 + 1
    month_start = adapter.start_of(date, "month")
    start = month_start.replace(month=first_month)
    end = adapter.end_of(start.replace(month=first_month + 2), "month")
    return start, end


def stable_month_bounds(
    date: datetime,
    adapter: "DateAdapter",
    *,
    week_starts_on: int,
) -> Tuple[datetime, datetime]:
    """42-day grid for the month containing `date`.

    The grid starts at the configured week start on or before the 1st and
    always ends 41 days later, whatever the month's length.
    """
    first_of_month = adapter.start_of(date, "month")
    grid_start = adapter.start_of(first_of_month, "week", week_starts_on=week_starts_on)
    last_day = adapter.add(grid_start, STABLE_MONTH_DAYS - 1, "day")
    return grid_start, adapter.end_of(last_day, "day")


def year_span_bounds(date: datetime, adapter: "DateAdapter", years: int) -> Tuple[datetime, datetime]:
    """Block of `years` years containing `date` (decade, century, millennium).

    Blocks are aligned on multiples of `years`; the block that would hold
    year 0 starts at year 1 but keeps its aligned end.
    """
    aligned = date.year // years * years
    year_start = adapter.start_of(date, "year")
    start = year_start.replace(year=max(aligned, MINYEAR))
    end = adapter.end_of(year_start.replace(year=aligned + years - 1), "year")
    return start, end


# ---- Numbering ----

def _week_number(start: datetime, week_starts_on: int) -> int:
    if week_starts_on == 1:
        # Monday weeks follow ISO 8601 numbering
        return Week.withdate(start.date()).week
    # Counted within the year the week starts in
    year_start = start.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return (start - year_start).days // 7 + 1


def period_number(unit: str, date: datetime, start: datetime, week_starts_on: int = 1) -> int:
    """Ordinal of a period within its parent unit; 0 when not meaningful.

    Examples:
        >>> period_number("quarter", datetime(2024, 8, 15), datetime(2024, 7, 1))
        3
    """
    if unit == "year":
        return date.year
    if unit == "quarter":
        return (date.month - 1) // 3 + 1
    if unit in ("month", "stableMonth"):
        return date.month
    if unit == "week":
        return _week_number(start, week_starts_on)
    if unit == "day":
        return date.day
    if unit == "hour":
        return date.hour
    if unit == "minute":
        return date.minute
    if unit == "second":
        return date.second
    if unit in YEAR_SPANS:
        return start.year
    return 0


# ---- Construction ----

def create_custom_period(
    start: datetime,
    end: datetime,
    date: Optional[datetime] = None,
    number: int = 0,
) -> Period:
    """
    Create a "custom" period from explicit bounds.

    Args:
        start: Inclusive start
        end: Inclusive end
        date: Reference instant (default: midpoint of [start, end])
        number: Optional ordinal (e.g. segment index from split)

    Returns:
        Period with type "custom"

    Raises:
        ValueError: If start > end or date lies outside the bounds
    """
    if date is None:
        if start > end:
            raise ValueError(f"Custom period start {start.isoformat()} is after end {end.isoformat()}")
        date = start + (end - start) // 2
    return Period(type="custom", date=date, start=start, end=end, number=number)


def create_period(
    temporal: "Temporal",
    unit: str,
    value: DateOrPeriod,
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> Period:
    """
    Build the `unit` period containing `value`.

    Args:
        temporal: Context providing adapter, week start and unit registry
        unit: Unit name (built-in, registered, or "custom")
        value: Reference datetime, or a Period whose `date` is used
        start: Explicit start, only for unit="custom"
        end: Explicit end, only for unit="custom"

    Returns:
        Normalized Period (re-deriving from any instant inside it yields
        the same bounds)

    Raises:
        UnknownUnitError: Unit is neither "custom" nor registered
        ValueError: "custom" without start/end, or a definition that
            produced bounds not containing the reference date
    """
    date = reference_date(value)

    if unit == "custom":
        if start is None or end is None:
            raise ValueError("A 'custom' period needs explicit start and end")
        return create_custom_period(start, end, date)

    definition = temporal.registry.require(unit)
    span_start, span_end = definition.build(date, temporal.adapter, temporal.week_starts_on)
    return Period(
        type=unit,
        date=date,
        start=span_start,
        end=span_end,
        number=period_number(unit, date, span_start, temporal.week_starts_on),
    )


def to_period(temporal: "Temporal", date: DateOrPeriod, unit: str = "day") -> Period:
    """Convenience wrapper: the `unit` period (default "day") containing `date`."""
    return create_period(temporal, unit, date)


def following_instant(period: Period) -> datetime:
    """First instant after the period's inclusive end."""
    return period.end + RESOLUTION


def preceding_instant(period: Period) -> datetime:
    """Last instant before the period's start."""
    return period.start - RESOLUTION


__all__ = [
    "STABLE_MONTH_DAYS",
    "STABLE_MONTH_WEEKS",
    "YEAR_SPANS",
    "reference_date",
    "quarter_bounds",
    "stable_month_bounds",
    "year_span_bounds",
    "period_number",
    "create_custom_period",
    "create_period",
    "to_period",
    "following_instant",
    "preceding_instant",
]
