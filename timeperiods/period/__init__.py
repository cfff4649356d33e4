"""Period data model and factory.

Public API:
    Period, Duration                   immutable value types
    create_period(temporal, unit, value)
        Build the normalized period of `unit` containing `value`
    create_custom_period(start, end, date=None)
        Build a "custom" period from explicit bounds
    to_period(temporal, date, unit="day")
        Convenience wrapper around create_period

Examples:
    >>> from timeperiods.period import create_period
    >>> create_period(temporal, "month", datetime(2024, 2, 15)).end
    datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)
"""

from timeperiods.period.periodtypes import (
    RESOLUTION,
    Duration,
    Period,
    as_duration,
)
from timeperiods.period.periodfactory import (
    STABLE_MONTH_DAYS,
    STABLE_MONTH_WEEKS,
    create_custom_period,
    create_period,
    period_number,
    quarter_bounds,
    stable_month_bounds,
    to_period,
    year_span_bounds,
)

__all__ = [
    "RESOLUTION",
    "Duration",
    "Period",
    "as_duration",
    "STABLE_MONTH_DAYS",
    "STABLE_MONTH_WEEKS",
    "create_custom_period",
    "create_period",
    "period_number",
    "quarter_bounds",
    "stable_month_bounds",
    "to_period",
    "year_span_bounds",
]
