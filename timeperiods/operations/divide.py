"""Divide and split periods into sub-periods.

  divide(temporal, period, unit)          contiguous sub-periods of a unit
  split(temporal, period, by=/count=/duration=)
                                          unit, equal-count or fixed-size split
  split_at(period, at)                    two custom halves around an instant

Every result list is bounded by the context's max_divisions ceiling.
"""

from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from timeperiods.errors import DivisionTooLargeError, UnsupportedDivisionError
from timeperiods.period.periodfactory import (
    STABLE_MONTH_DAYS,
    STABLE_MONTH_WEEKS,
    create_custom_period,
    create_period,
    following_instant,
)
from timeperiods.period.periodtypes import RESOLUTION, DurationLike, Period, as_duration

if TYPE_CHECKING:
    from timeperiods.temporal.temporalcore import Temporal


STABLE_MONTH_DIVISIONS = ("day", "week")


def _bounded(periods: Iterable[Period], unit: str, limit: int) -> List[Period]:
    """Materialize at most `limit` periods, failing instead of growing past it."""
    result: List[Period] = []
    for period in periods:
        if len(result) >= limit:
            raise DivisionTooLargeError(unit, limit)
        result.append(period)
    return result


def _walk_unit(temporal: "Temporal", period: Period, unit: str) -> Iterator[Period]:
    """Consecutive `unit` periods from period.start until past period.end."""
    cursor = period.start
    while cursor <= period.end:
        current = create_period(temporal, unit, cursor)
        yield current
        # cursor lies inside `current`, so this always moves forward
        cursor = following_instant(current)


def _divide_stable_month(temporal: "Temporal", period: Period, unit: str) -> List[Period]:
    if unit not in STABLE_MONTH_DIVISIONS:
        raise UnsupportedDivisionError(
            f"stableMonth can only be divided by 'day' or 'week', not {unit!r}"
        )
    if unit == "day":
        count, stride = STABLE_MONTH_DAYS, 1
    else:
        count, stride = STABLE_MONTH_WEEKS, 7
    adapter = temporal.adapter
    return [
        create_period(temporal, unit, adapter.add(period.start, i * stride, "day"))
        for i in range(count)
    ]


def divide(temporal: "Temporal", period: Period, unit: str) -> List[Period]:
    """
    Divide a period into contiguous, non-overlapping `unit` periods.

    Args:
        temporal: Temporal context
        period: Period to divide
        unit: Target unit (built-in or registered)

    Returns:
        Ordered list of `unit` periods covering [period.start, period.end]

    Raises:
        UnsupportedDivisionError: Dividing by "stableMonth" or "custom", or
            dividing a stableMonth by anything but "day"/"week"
        UnknownUnitError: Unit is not registered
        DivisionTooLargeError: More than max_divisions periods

    Examples:
        >>> months = divide(temporal, create_period(temporal, "year", datetime(2023, 6, 1)), "month")
        >>> len(months), months[1].end.day
        (12, 28)
    """
    if unit == "stableMonth":
        raise UnsupportedDivisionError(
            "Cannot divide by stableMonth. Create a stableMonth period with create_period() instead."
        )
    if unit == "custom":
        raise UnsupportedDivisionError(
            "Cannot divide by 'custom'. Use split(count=...) or split(duration=...) instead."
        )

    if period.type == "stableMonth":
        return _divide_stable_month(temporal, period, unit)

    definition = temporal.registry.require(unit)
    if definition.adapter_unit is not None:
        dates = temporal.adapter.each_interval(
            period.start,
            period.end,
            definition.adapter_unit,
            week_starts_on=temporal.week_starts_on,
        )
        periods = (create_period(temporal, unit, d) for d in dates)
    else:
        periods = _walk_unit(temporal, period, unit)

    return _bounded(periods, unit, temporal.max_divisions)


def _split_count(temporal: "Temporal", period: Period, count: int) -> List[Period]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise ValueError(f"count must be a positive integer, got {count!r}")
    if count > temporal.max_divisions:
        raise DivisionTooLargeError("custom", temporal.max_divisions)

    size = period.duration // count
    if size < RESOLUTION:
        raise ValueError(f"Period is too short to split into {count} parts")

    segments = []
    for i in range(count):
        start = period.start + size * i
        # Last segment absorbs the rounding remainder
        end = period.end if i == count - 1 else start + size - RESOLUTION
        segments.append(create_custom_period(start, end, number=i + 1))
    return segments


def _split_duration(temporal: "Temporal", period: Period, duration: DurationLike) -> List[Period]:
    step = as_duration(duration)
    if step.is_zero():
        raise ValueError("duration must not be zero")

    adapter = temporal.adapter

    def chunks() -> Iterator[Period]:
        start = period.start
        index = 1
        while start <= period.end:
            # Anchor every boundary on period.start so month clamping never drifts
            following = adapter.add(period.start, step.scaled(index))
            if following <= start:
                raise ValueError(f"duration {step} does not move forward from {start.isoformat()}")
            end = min(following - RESOLUTION, period.end)
            yield create_custom_period(start, end, number=index)
            start = following
            index += 1

    return _bounded(chunks(), "custom", temporal.max_divisions)


def split(
    temporal: "Temporal",
    period: Period,
    *,
    by: Optional[str] = None,
    count: Optional[int] = None,
    duration: Optional[DurationLike] = None,
) -> List[Period]:
    """
    Split a period by unit, into equal parts, or into fixed-size chunks.

    Exactly one option must be given:
      - by: unit name, same as divide() (segments keep the unit's type)
      - count: N equal "custom" segments; the last absorbs any remainder
      - duration: Duration (or mapping such as {"days": 2, "hours": 12});
        "custom" chunks from period.start, the last clipped to period.end

    Raises:
        ValueError: Zero or several options, non-positive count, zero duration
        DivisionTooLargeError: More than max_divisions segments

    Examples:
        >>> parts = split(temporal, workday, count=4)
        >>> parts[-1].end == workday.end
        True
    """
    given = [name for name, value in (("by", by), ("count", count), ("duration", duration)) if value is not None]
    if len(given) != 1:
        raise ValueError(
            "Split requires exactly one of 'by', 'count', or 'duration' option"
            + (f" (got {', '.join(given)})" if given else "")
        )

    if by is not None:
        return divide(temporal, period, by)
    if count is not None:
        return _split_count(temporal, period, count)
    return _split_duration(temporal, period, duration)


def split_at(period: Period, at: datetime) -> Tuple[Period, Period]:
    """
    Split a period into two custom periods at an instant.

    The first part ends just before `at`; the second starts at `at`.

    Raises:
        ValueError: Unless period.start < at <= period.end
    """
    if not (period.start < at <= period.end):
        raise ValueError(
            f"Split point {at.isoformat()} must fall after {period.start.isoformat()} "
            f"and no later than {period.end.isoformat()}"
        )
    return (
        create_custom_period(period.start, at - RESOLUTION),
        create_custom_period(at, period.end),
    )


__all__ = [
    "divide",
    "split",
    "split_at",
]
