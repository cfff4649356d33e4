"""Native datetime adapter
-------------------------

Calendar arithmetic on plain `datetime` values using python-dateutil.
Month arithmetic clamps to the end of the month:

  >>> NativeAdapter().add(datetime(2024, 1, 31), 1, "month")
  datetime.datetime(2024, 2, 29, 0, 0)

tzinfo is carried through untouched (no conversion is ever performed).
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from timeperiods.adapters.adapterbase import DateAdapter, check_unit, js_weekday
from timeperiods.period.periodtypes import RESOLUTION, Duration


_MIDNIGHT = dict(hour=0, minute=0, second=0, microsecond=0)


def _to_relativedelta(duration: Duration) -> relativedelta:
    return relativedelta(
        years=duration.years,
        months=duration.months,
        weeks=duration.weeks,
        days=duration.days,
        hours=duration.hours,
        minutes=duration.minutes,
        seconds=duration.seconds,
        microseconds=duration.microseconds,
    )


class NativeAdapter(DateAdapter):
    """Adapter over `datetime` + `dateutil.relativedelta`."""

    name = "native"

    def start_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        check_unit(unit)
        if unit == "year":
            return date.replace(month=1, day=1, **_MIDNIGHT)
        if unit == "quarter":
            first_month = (date.month - 1) // 3 * 3 + 1
            return date.replace(month=first_month, day=1, **_MIDNIGHT)
        if unit == "month":
            return date.replace(day=1, **_MIDNIGHT)
        if unit == "week":
            offset = (js_weekday(date) - self._week_start(week_starts_on)) % 7
            return (date - timedelta(days=offset)).replace(**_MIDNIGHT)
        if unit == "day":
            return date.replace(**_MIDNIGHT)
        if unit == "hour":
            return date.replace(minute=0, second=0, microsecond=0)
        if unit == "minute":
            return date.replace(second=0, microsecond=0)
        return date.replace(microsecond=0)

    def end_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        start = self.start_of(date, unit, week_starts_on=week_starts_on)
        return self._add_duration(start, Duration.of(1, unit)) - RESOLUTION

    def _add_duration(self, date: datetime, duration: Duration) -> datetime:
        return date + _to_relativedelta(duration)

    def diff(self, a: datetime, b: datetime, unit: str) -> int:
        check_unit(unit)
        if unit in ("year", "quarter", "month"):
            delta = relativedelta(b, a)
            months = delta.years * 12 + delta.months
            if unit == "year":
                return int(months / 12)
            if unit == "quarter":
                return int(months / 3)
            return months
        seconds = {
            "week": 7 * 86400,
            "day": 86400,
            "hour": 3600,
            "minute": 60,
            "second": 1,
        }[unit]
        # Truncate toward zero like the calendar branch above
        return int((b - a) / timedelta(seconds=seconds))


__all__ = [
    "NativeAdapter",
]
