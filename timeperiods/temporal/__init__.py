"""Temporal context and settings.

Public API:
    create_temporal(date=..., adapter=..., now=None, week_starts_on=None) -> Temporal
    load_settings(path=None) -> TemporalSettings
"""

from timeperiods.temporal.temporalconfig import (
    TemporalSettings,
    clear_settings_cache,
    load_settings,
)
from timeperiods.temporal.temporalcore import (
    NOW_UNIT,
    Temporal,
    create_temporal,
)

__all__ = [
    "TemporalSettings",
    "clear_settings_cache",
    "load_settings",
    "NOW_UNIT",
    "Temporal",
    "create_temporal",
]
