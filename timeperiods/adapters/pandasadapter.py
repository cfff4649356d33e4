"""Pandas adapter
--------------

Calendar arithmetic on `pandas.Timestamp` / `pandas.DateOffset`. Results are
returned as plain `datetime` values so periods built on this backend compare
equal to periods built on the native one.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional

try:
    import pandas as pd
except ImportError as e:
    raise ImportError("pandas not installed. pip install pandas") from e

from timeperiods.adapters.adapterbase import DateAdapter, check_unit, js_weekday
from timeperiods.period.periodtypes import Duration


# pandas floor() aliases for clock units
_FLOOR_FREQ = {
    "day": "D",
    "hour": "h",
    "minute": "min",
    "second": "s",
}


def _to_offset(duration: Duration) -> pd.DateOffset:
    return pd.DateOffset(
        years=duration.years,
        months=duration.months,
        weeks=duration.weeks,
        days=duration.days,
        hours=duration.hours,
        minutes=duration.minutes,
        seconds=duration.seconds,
        microseconds=duration.microseconds,
    )


def _to_datetime(ts: pd.Timestamp) -> datetime:
    return ts.to_pydatetime()


class PandasAdapter(DateAdapter):
    """Adapter over pandas timestamps and date offsets."""

    name = "pandas"

    def _start(self, ts: pd.Timestamp, unit: str, week_starts_on: Optional[int]) -> pd.Timestamp:
        if unit in _FLOOR_FREQ:
            if unit == "day":
                return ts.normalize()
            return ts.floor(_FLOOR_FREQ[unit])
        day = ts.normalize()
        if unit == "year":
            return day.replace(month=1, day=1)
        if unit == "quarter":
            # Calendar quarters regardless of any fiscal anchoring in pandas
            return day.replace(month=(day.month - 1) // 3 * 3 + 1, day=1)
        if unit == "month":
            return day.replace(day=1)
        offset = (js_weekday(day) - self._week_start(week_starts_on)) % 7
        return day - pd.Timedelta(days=offset)

    def start_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        check_unit(unit)
        return _to_datetime(self._start(pd.Timestamp(date), unit, week_starts_on))

    def end_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        check_unit(unit)
        start = self._start(pd.Timestamp(date), unit, week_starts_on)
        end = start + _to_offset(Duration.of(1, unit)) - pd.Timedelta(microseconds=1)
        return _to_datetime(end)

    def _add_duration(self, date: datetime, duration: Duration) -> datetime:
        return _to_datetime(pd.Timestamp(date) + _to_offset(duration))

    def diff(self, a: datetime, b: datetime, unit: str) -> int:
        check_unit(unit)
        ta, tb = pd.Timestamp(a), pd.Timestamp(b)
        if unit in ("year", "quarter", "month"):
            months = (tb.year - ta.year) * 12 + (tb.month - ta.month)
            # Drop the last month when it has not fully elapsed
            anchored = ta + pd.DateOffset(months=months)
            if months > 0 and anchored > tb:
                months -= 1
            elif months < 0 and anchored < tb:
                months += 1
            if unit == "year":
                return int(months / 12)
            if unit == "quarter":
                return int(months / 3)
            return months
        length = pd.Timedelta(**{"weeks" if unit == "week" else unit + "s": 1})
        return int((tb - ta) / length)


__all__ = [
    "PandasAdapter",
]
