"""Temporal settings.

Settings come from three layers, later layers winning:

  1. Packaged defaults in temporalconfig.yaml (or TIMEPERIODS_CONFIG_PATH)
  2. Environment overrides: TIMEPERIODS_WEEK_STARTS_ON, TIMEPERIODS_MAX_DIVISIONS
  3. Explicit create_temporal(...) arguments

Examples:
    >>> settings = load_settings()
    >>> settings.max_divisions
    1000
    >>> settings.merge_tolerance
    datetime.timedelta(microseconds=999000)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields, replace
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from timeperiods.errors import ConfigurationError
from timeperiods.utils.loaders import load_yaml_file

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = Path(__file__).parent / "temporalconfig.yaml"

CONFIG_PATH_ENV = "TIMEPERIODS_CONFIG_PATH"

# Environment variable → settings field
ENV_OVERRIDES = {
    "TIMEPERIODS_WEEK_STARTS_ON": "week_starts_on",
    "TIMEPERIODS_MAX_DIVISIONS": "max_divisions",
}


@dataclass(frozen=True)
class TemporalSettings:
    """Validated engine settings shared by a Temporal context."""

    week_starts_on: int = 1
    max_divisions: int = 1000
    merge_tolerance_ms: int = 999
    day_length_tolerance_hours: int = 1
    unit_suggestion_threshold: int = 75
    unit_suggestion_limit: int = 3

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"Setting {f.name} must be an integer, got {value!r}")
        if not 0 <= self.week_starts_on <= 6:
            raise ConfigurationError(
                f"week_starts_on must be between 0 (Sunday) and 6 (Saturday), got {self.week_starts_on}"
            )
        if self.max_divisions < 1:
            raise ConfigurationError(f"max_divisions must be positive, got {self.max_divisions}")
        if not 0 <= self.merge_tolerance_ms < 1000:
            raise ConfigurationError(
                f"merge_tolerance_ms must be sub-second (0-999), got {self.merge_tolerance_ms}"
            )
        if self.day_length_tolerance_hours < 0:
            raise ConfigurationError("day_length_tolerance_hours must not be negative")

    @property
    def merge_tolerance(self) -> timedelta:
        return timedelta(milliseconds=self.merge_tolerance_ms)

    @property
    def day_length_tolerance(self) -> timedelta:
        return timedelta(hours=self.day_length_tolerance_hours)

    def with_overrides(self, **overrides: Any) -> "TemporalSettings":
        """Copy with non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        try:
            return replace(self, **changes)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e


def _settings_from_mapping(data: Dict[str, Any], source: str) -> TemporalSettings:
    known = {f.name for f in fields(TemporalSettings)}
    unknown = set(data) - known
    if unknown:
        raise ConfigurationError(f"Unknown setting(s) in {source}: {sorted(unknown)}")
    return TemporalSettings(**data)


def _env_overrides() -> Dict[str, int]:
    overrides = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            overrides[field_name] = int(raw)
        except ValueError:
            raise ConfigurationError(f"{env_name} must be an integer, got {raw!r}") from None
        logger.debug(f"Setting {field_name}={overrides[field_name]} from {env_name}")
    return overrides


@lru_cache(maxsize=8)
def _load_file_settings(path: str) -> TemporalSettings:
    data = load_yaml_file(Path(path))
    logger.info(f"Loaded temporal settings from {path}")
    return _settings_from_mapping(data, path)


def load_settings(path: Optional[Path] = None) -> TemporalSettings:
    """
    Load settings from YAML with environment overrides applied.

    Args:
        path: Explicit YAML path (default: TIMEPERIODS_CONFIG_PATH or the
            packaged temporalconfig.yaml)

    Returns:
        TemporalSettings

    Raises:
        ConfigurationError: Unknown keys or invalid values
        FileNotFoundError: Explicit or env-provided path does not exist
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH
    settings = _load_file_settings(str(path))
    return settings.with_overrides(**_env_overrides())


def clear_settings_cache() -> None:
    """Forget cached YAML files (tests and long-lived processes)."""
    _load_file_settings.cache_clear()


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_OVERRIDES",
    "TemporalSettings",
    "load_settings",
    "clear_settings_cache",
]
