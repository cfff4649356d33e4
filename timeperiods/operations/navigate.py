"""Navigation between periods.

  go(temporal, period, steps)            move by N periods (negative = back)
  next_period / previous_period          go(+1) / go(-1)
  zoom_in / zoom_out / zoom_to           change granularity around period.date

Periods of a named unit are re-derived through the factory after moving, so
the result is always normalized, never just shifted. "custom" periods move
by their own length.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from timeperiods.period.periodfactory import (
    create_period,
    following_instant,
    preceding_instant,
)
from timeperiods.period.periodtypes import Period
from timeperiods.operations.divide import divide

if TYPE_CHECKING:
    from timeperiods.temporal.temporalcore import Temporal


def _shift_custom(period: Period, steps: int) -> Period:
    offset = period.duration * steps
    return Period(
        type=period.type,
        date=period.date + offset,
        start=period.start + offset,
        end=period.end + offset,
        number=period.number,
    )


def _walk_boundaries(temporal: "Temporal", period: Period, steps: int) -> Period:
    """Step across period boundaries for units without a fixed step."""
    current = period
    for _ in range(abs(steps)):
        if steps > 0:
            current = create_period(temporal, period.type, following_instant(current))
        else:
            current = create_period(temporal, period.type, preceding_instant(current))
    return current


def go(temporal: "Temporal", period: Period, steps: int) -> Period:
    """
    Move `steps` periods forward (positive) or backward (negative).

    Args:
        temporal: Temporal context
        period: Starting period
        steps: Number of periods to move; 0 returns `period` unchanged

    Returns:
        The period `steps` units away, normalized for its unit

    Raises:
        UnknownUnitError: period.type is not registered (and not "custom")

    Examples:
        >>> jan = create_period(temporal, "month", datetime(2024, 1, 31))
        >>> go(temporal, jan, 1).end
        datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if steps == 0:
        return period

    if period.type == "custom":
        return _shift_custom(period, steps)

    definition = temporal.registry.require(period.type)
    if definition.step is None:
        return _walk_boundaries(temporal, period, steps)

    target = temporal.adapter.add(period.date, definition.step.scaled(steps))
    return create_period(temporal, period.type, target)


def next_period(temporal: "Temporal", period: Period) -> Period:
    """The period immediately after `period`."""
    return go(temporal, period, 1)


def previous_period(temporal: "Temporal", period: Period) -> Period:
    """The period immediately before `period`."""
    return go(temporal, period, -1)


def zoom_in(temporal: "Temporal", period: Period, unit: Optional[str] = None) -> List[Period]:
    """Divide into `unit`, defaulting to the unit's first registered division.

    Raises:
        ValueError: No unit given and the period's unit has no divisions
    """
    if unit is None:
        definition = temporal.registry.require(period.type)
        if not definition.divisions:
            raise ValueError(f"Unit {period.type!r} has no divisions to zoom into")
        unit = definition.divisions[0]
    return divide(temporal, period, unit)


def zoom_out(temporal: "Temporal", period: Period, unit: Optional[str] = None) -> Period:
    """Enclosing `unit` period, defaulting to the unit's merges_to target.

    Raises:
        ValueError: No unit given and the period's unit has no merges_to
    """
    if unit is None:
        definition = temporal.registry.require(period.type)
        if not definition.merges_to:
            raise ValueError(f"Unit {period.type!r} has no larger unit to zoom out to")
        unit = definition.merges_to
    return create_period(temporal, unit, period)


def zoom_to(temporal: "Temporal", period: Period, unit: str) -> Period:
    """The `unit` period around period.date, at any granularity."""
    return create_period(temporal, unit, period)


__all__ = [
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
