"""Merge a run of periods into one encompassing period.

Natural units are detected when the run exactly fills one:

  - 7 contiguous day-length periods forming a configured week → "week"
  - 12 contiguous consecutive months filling a calendar year  → "year"
  - a contiguous run of one unit filling its `merges_to` unit
    (3 months → quarter, 4 quarters → year, 24 hours → day, ...)

Anything else becomes a "custom" period spanning [first.start, last.end].
"""

from __future__ import annotations
from datetime import timedelta
from typing import TYPE_CHECKING, List, Optional, Sequence

from timeperiods.period.periodfactory import create_custom_period, create_period
from timeperiods.period.periodtypes import Period

if TYPE_CHECKING:
    from timeperiods.temporal.temporalcore import Temporal


DAY = timedelta(days=1)


def _is_contiguous(periods: Sequence[Period], tolerance: timedelta) -> bool:
    """Each start follows the previous end within `tolerance`.

    Ends are inclusive, so the expected gap is one microsecond; anything up
    to the (sub-second) tolerance still counts as touching.
    """
    for previous, current in zip(periods, periods[1:]):
        gap = current.start - previous.end
        if gap <= timedelta(0) or gap > tolerance:
            return False
    return True


def _is_day_like(period: Period, tolerance: timedelta) -> bool:
    return abs(period.duration - DAY) <= tolerance


def _consecutive_months(periods: Sequence[Period]) -> bool:
    if any(p.type != "month" for p in periods):
        return False
    indexes = [p.start.year * 12 + p.start.month for p in periods]
    return all(b - a == 1 for a, b in zip(indexes, indexes[1:]))


def _candidate_units(temporal: "Temporal", periods: Sequence[Period]) -> List[str]:
    settings = temporal.settings
    candidates = []
    if len(periods) == 7 and all(_is_day_like(p, settings.day_length_tolerance) for p in periods):
        candidates.append("week")
    if len(periods) == 12 and _consecutive_months(periods):
        candidates.append("year")

    types = {p.type for p in periods}
    if len(types) == 1:
        definition = temporal.registry.get_unit_definition(types.pop())
        if definition is not None and definition.merges_to:
            candidates.append(definition.merges_to)

    # Keep first occurrence order, drop units this registry does not know
    seen = []
    for unit in candidates:
        if unit not in seen and temporal.registry.has_unit(unit):
            seen.append(unit)
    return seen


def _matches(period: Period, start, end, tolerance: timedelta) -> bool:
    return abs(period.start - start) <= tolerance and abs(period.end - end) <= tolerance


def merge(temporal: "Temporal", periods: Sequence[Period]) -> Optional[Period]:
    """
    Merge periods into a single period.

    Args:
        temporal: Temporal context
        periods: Periods of any type, in any order

    Returns:
        None for an empty input, the period itself for a single input, a
        natural unit period when the run fills one exactly, otherwise a
        "custom" period from the earliest start to the latest end

    Examples:
        >>> days = divide(temporal, create_period(temporal, "week", datetime(2024, 3, 13)), "day")
        >>> merge(temporal, list(reversed(days))).type
        'week'
    """
    if not periods:
        return None
    if len(periods) == 1:
        return periods[0]

    ordered = sorted(periods, key=lambda p: p.start)
    start = ordered[0].start
    end = max(p.end for p in ordered)
    tolerance = temporal.settings.merge_tolerance

    if _is_contiguous(ordered, tolerance):
        # Middle period's reference date sits safely inside any natural unit
        anchor = ordered[len(ordered) // 2].date
        for unit in _candidate_units(temporal, ordered):
            candidate = create_period(temporal, unit, anchor)
            if _matches(candidate, start, end, tolerance):
                return candidate

    return create_custom_period(start, end)


__all__ = [
    "merge",
]
