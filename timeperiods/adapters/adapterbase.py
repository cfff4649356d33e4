"""Date adapter contract.

The period engine never does wall-clock arithmetic itself for the adapter
vocabulary; it asks a backend. Backends must be pure (never mutate their
inputs) and must agree on:

  - start_of / end_of bounds, with end_of inclusive (next boundary - 1 µs)
  - week day numbering 0 = Sunday .. 6 = Saturday
  - each_interval yielding `start` first, then aligned sub-unit starts

Backend quirks (for example quarter semantics) are normalized by the core.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterator, Optional, Union

from timeperiods.period.periodtypes import Duration, DurationLike, as_duration


ADAPTER_UNITS = (
    "year",
    "quarter",
    "month",
    "week",
    "day",
    "hour",
    "minute",
    "second",
)


def js_weekday(date: datetime) -> int:
    """Day of week with 0 = Sunday .. 6 = Saturday."""
    return (date.weekday() + 1) % 7


def check_unit(unit: str) -> str:
    if unit not in ADAPTER_UNITS:
        raise ValueError(
            f"Unsupported adapter unit {unit!r}. Expected one of {list(ADAPTER_UNITS)}"
        )
    return unit


def check_week_start(week_starts_on: int) -> int:
    if isinstance(week_starts_on, bool) or not isinstance(week_starts_on, int) or not 0 <= week_starts_on <= 6:
        raise ValueError(f"week_starts_on must be an integer 0-6, got {week_starts_on!r}")
    return week_starts_on


class DateAdapter(ABC):
    """Abstract backend for calendar arithmetic.

    Args:
        week_starts_on: Default week start (0 = Sunday .. 6 = Saturday),
            used when a call does not pass one explicitly
    """

    name = "abstract"

    def __init__(self, week_starts_on: int = 1):
        self.week_starts_on = check_week_start(week_starts_on)

    def _week_start(self, week_starts_on: Optional[int]) -> int:
        if week_starts_on is None:
            return self.week_starts_on
        return check_week_start(week_starts_on)

    @abstractmethod
    def start_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        """First instant of the `unit` containing `date`."""

    @abstractmethod
    def end_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        """Last instant (inclusive) of the `unit` containing `date`."""

    @abstractmethod
    def _add_duration(self, date: datetime, duration: Duration) -> datetime:
        """Apply a duration (calendar fields clamp to month end)."""

    def add(self, date: datetime, amount: Union[int, DurationLike], unit: Optional[str] = None) -> datetime:
        """Add `amount` units, or a Duration when `unit` is omitted.

        Examples:
            >>> adapter.add(datetime(2024, 1, 31), 1, "month")
            datetime.datetime(2024, 2, 29, 0, 0)
            >>> adapter.add(datetime(2024, 1, 1), Duration(days=2, hours=12))
            datetime.datetime(2024, 1, 3, 12, 0)
        """
        return self._add_duration(date, self._to_duration(amount, unit))

    def subtract(self, date: datetime, amount: Union[int, DurationLike], unit: Optional[str] = None) -> datetime:
        return self._add_duration(date, -self._to_duration(amount, unit))

    @staticmethod
    def _to_duration(amount, unit: Optional[str]) -> Duration:
        if unit is None:
            return as_duration(amount)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Amount must be an integer when a unit is given, got {amount!r}")
        return Duration.of(amount, unit)

    def is_same(self, a: datetime, b: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> bool:
        return (
            self.start_of(a, unit, week_starts_on=week_starts_on)
            == self.start_of(b, unit, week_starts_on=week_starts_on)
        )

    def is_before(self, a: datetime, b: datetime) -> bool:
        return a < b

    def is_after(self, a: datetime, b: datetime) -> bool:
        return a > b

    def each_interval(
        self,
        start: datetime,
        end: datetime,
        unit: str,
        *,
        week_starts_on: Optional[int] = None,
    ) -> Iterator[datetime]:
        """Yield one representative date per `unit` overlapping [start, end].

        The first representative is `start` itself; the rest are aligned
        starts of the following units. The iterator is lazy so callers can
        stop consuming it at a safety ceiling.
        """
        check_unit(unit)
        if start > end:
            return
        yield start
        current = self.start_of(start, unit, week_starts_on=week_starts_on)
        while True:
            current = self.add(current, 1, unit)
            if current > end:
                return
            yield current

    @abstractmethod
    def diff(self, a: datetime, b: datetime, unit: str) -> int:
        """Whole `unit`s from `a` to `b` (negative when b < a)."""

    def __repr__(self):
        return f"{type(self).__name__}(week_starts_on={self.week_starts_on})"


__all__ = [
    "ADAPTER_UNITS",
    "DateAdapter",
    "check_unit",
    "check_week_start",
    "js_weekday",
]
