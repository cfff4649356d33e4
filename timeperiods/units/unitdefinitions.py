"""Built-in unit definitions.

Adapter-backed units delegate bounds to the adapter's start_of/end_of.
quarter, stableMonth and the multi-year units compute bounds locally (see
periodfactory) so every backend agrees on them.

Hierarchy (divisions → / merges_to ←):

  millennium → century → decade → year → quarter → month → week → day
    → hour → minute → second
  stableMonth → week, day (never a merge target)
"""

from datetime import datetime
from functools import partial
from typing import Dict

from timeperiods.period.periodfactory import (
    YEAR_SPANS,
    quarter_bounds,
    stable_month_bounds,
    year_span_bounds,
)
from timeperiods.period.periodtypes import Duration
from timeperiods.units.unitregistry import Span, UnitDefinition


def _adapter_bounds(unit: str, date: datetime, adapter, **opts) -> Span:
    return adapter.start_of(date, unit, **opts), adapter.end_of(date, unit, **opts)


def _week_bounds(date: datetime, adapter, *, week_starts_on: int) -> Span:
    return _adapter_bounds("week", date, adapter, week_starts_on=week_starts_on)


def _clock_unit(unit: str, divisions, merges_to: str) -> UnitDefinition:
    return UnitDefinition(
        create_period=partial(_adapter_bounds, unit),
        divisions=divisions,
        merges_to=merges_to,
        adapter_unit=unit,
        step=Duration.of(1, unit),
    )


def builtin_unit_definitions() -> Dict[str, UnitDefinition]:
    """Fresh name → definition mapping for every built-in unit."""
    definitions = {
        "year": _clock_unit("year", ("quarter", "month", "week", "day"), "decade"),
        "quarter": UnitDefinition(
            create_period=quarter_bounds,
            divisions=("month", "week", "day"),
            merges_to="year",
            step=Duration.of(1, "quarter"),
        ),
        "month": _clock_unit("month", ("week", "day"), "quarter"),
        "week": UnitDefinition(
            create_period=_week_bounds,
            divisions=("day",),
            merges_to="month",
            week_sensitive=True,
            adapter_unit="week",
            step=Duration.of(1, "week"),
        ),
        "day": _clock_unit("day", ("hour",), "week"),
        "hour": _clock_unit("hour", ("minute",), "day"),
        "minute": _clock_unit("minute", ("second",), "hour"),
        "second": _clock_unit("second", (), "minute"),
        "stableMonth": UnitDefinition(
            create_period=stable_month_bounds,
            divisions=("week", "day"),
            week_sensitive=True,
            step=Duration.of(1, "stableMonth"),
        ),
    }

    parents = {"decade": "century", "century": "millennium", "millennium": None}
    for unit, years in YEAR_SPANS.items():
        # Each span divides into the smaller spans and years
        smaller = tuple(u for u, y in YEAR_SPANS.items() if y < years)
        definitions[unit] = UnitDefinition(
            create_period=partial(_year_span, years),
            divisions=tuple(reversed(smaller)) + ("year",),
            merges_to=parents[unit],
            step=Duration.of(1, unit),
        )

    return definitions


def _year_span(years: int, date: datetime, adapter) -> Span:
    return year_span_bounds(date, adapter, years)


__all__ = [
    "builtin_unit_definitions",
]
