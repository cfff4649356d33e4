"""Date adapters: pluggable backends for calendar arithmetic.

Public API:
    DateAdapter        abstract contract consumed by the period engine
    NativeAdapter      datetime + python-dateutil backend
    PandasAdapter      pandas Timestamp / DateOffset backend
    ADAPTER_UNITS      unit vocabulary every backend supports

Examples:
    >>> from timeperiods.adapters import NativeAdapter
    >>> adapter = NativeAdapter(week_starts_on=1)
    >>> adapter.end_of(datetime(2024, 2, 15), "month")
    datetime.datetime(2024, 2, 29, 23, 59, 59, 999999)
"""

from timeperiods.adapters.adapterbase import (
    ADAPTER_UNITS,
    DateAdapter,
    js_weekday,
)
from timeperiods.adapters.nativeadapter import NativeAdapter
from timeperiods.adapters.pandasadapter import PandasAdapter

__all__ = [
    "ADAPTER_UNITS",
    "DateAdapter",
    "NativeAdapter",
    "PandasAdapter",
    "js_weekday",
]
