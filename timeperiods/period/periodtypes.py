"""Period Value Types
------------------

Immutable value objects shared by every operation:

  - Duration: closed set of calendar/clock fields, zero by default
  - Period: a {type, date, start, end} span with inclusive bounds

Examples:
  >>> Duration.of(1, "quarter")
  Duration(years=0, months=3, weeks=0, days=0, hours=0, minutes=0, seconds=0, microseconds=0)

  >>> Duration.from_mapping({"days": 2, "hours": 12}).scaled(2)
  Duration(years=0, months=0, weeks=0, days=4, hours=24, minutes=0, seconds=0, microseconds=0)
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from typing import Mapping, Union


# One microsecond: the gap between a period's end and the next period's start
RESOLUTION = timedelta(microseconds=1)

# Multipliers for unit names that are not Duration fields themselves
_UNIT_TO_FIELD = {
    "year": ("years", 1),
    "quarter": ("months", 3),
    "month": ("months", 1),
    "stableMonth": ("months", 1),
    "week": ("weeks", 1),
    "day": ("days", 1),
    "hour": ("hours", 1),
    "minute": ("minutes", 1),
    "second": ("seconds", 1),
    "microsecond": ("microseconds", 1),
    "decade": ("years", 10),
    "century": ("years", 100),
    "millennium": ("years", 1000),
}


@dataclass(frozen=True)
class Duration:
    """Calendar-aware amount of time.

    Month and year fields are calendar quantities (their length depends on
    where they are applied); the remaining fields are fixed clock lengths.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    microseconds: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a meaningful amount
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Duration.{f.name} must be an integer, got {value!r}"
                )

    @classmethod
    def of(cls, amount: int, unit: str) -> "Duration":
        """Duration of `amount` units (e.g. Duration.of(2, "quarter") → 6 months)."""
        try:
            field_name, factor = _UNIT_TO_FIELD[unit]
        except KeyError:
            raise ValueError(f"No fixed duration for unit {unit!r}") from None
        return cls(**{field_name: amount * factor})

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> "Duration":
        """Build from a dict, rejecting keys that are not Duration fields."""
        allowed = {f.name for f in fields(cls)}
        unknown = set(mapping) - allowed
        if unknown:
            raise ValueError(
                f"Unknown duration field(s): {sorted(unknown)}. "
                f"Allowed: {sorted(allowed)}"
            )
        return cls(**dict(mapping))

    def scaled(self, factor: int) -> "Duration":
        return Duration(**{f.name: getattr(self, f.name) * factor for f in fields(self)})

    def __neg__(self) -> "Duration":
        return self.scaled(-1)

    def is_zero(self) -> bool:
        return all(getattr(self, f.name) == 0 for f in fields(self))

    def has_calendar_fields(self) -> bool:
        """True when years or months are set (length depends on the anchor)."""
        return bool(self.years or self.months)

    def to_timedelta(self) -> timedelta:
        """Fixed-length part as a timedelta.

        Raises:
            ValueError: If years or months are set
        """
        if self.has_calendar_fields():
            raise ValueError("Durations with years/months have no fixed length")
        return timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            microseconds=self.microseconds,
        )


DurationLike = Union[Duration, Mapping[str, int]]


def as_duration(value: DurationLike) -> Duration:
    """Coerce a Duration or a plain mapping to a Duration."""
    if isinstance(value, Duration):
        return value
    if isinstance(value, Mapping):
        return Duration.from_mapping(value)
    raise ValueError(f"Expected Duration or mapping, got {type(value).__name__}")


@dataclass(frozen=True)
class Period:
    """Immutable span of time.

    Attributes:
        type: Unit name ("year", "month", ..., "custom", or a registered unit)
        date: Reference instant the period was derived from
        start: Inclusive lower bound
        end: Inclusive upper bound (e.g. 23:59:59.999999 for a day)
        number: Ordinal of the period within its parent (2024 for a year,
            1-12 for a month, 1-4 for a quarter); 0 when not meaningful
    """

    type: str
    date: datetime
    start: datetime
    end: datetime
    number: int = 0

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"Period start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )
        if not (self.start <= self.date <= self.end):
            raise ValueError(
                f"Period reference date {self.date.isoformat()} is outside "
                f"[{self.start.isoformat()}, {self.end.isoformat()}]"
            )

    @property
    def duration(self) -> timedelta:
        """Covered length, counting the inclusive end instant."""
        return self.end - self.start + RESOLUTION

    def __contains__(self, target) -> bool:
        from timeperiods.operations.compare import contains

        return contains(self, target)


__all__ = [
    "RESOLUTION",
    "Duration",
    "DurationLike",
    "as_duration",
    "Period",
]
