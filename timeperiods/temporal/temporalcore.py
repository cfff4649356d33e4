"""Temporal context.

A Temporal is the small state container every operation reads: the date
adapter, the week start, the unit registry, and two host-owned periods:

  - browsing: the period the host is currently navigating
  - now: the current instant at "second" precision

Operations never mutate a Temporal; they return new Period values and the
host decides what to assign back to `browsing` / `now`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from timeperiods.adapters.adapterbase import DateAdapter
from timeperiods.errors import ConfigurationError
from timeperiods.period.periodfactory import DateOrPeriod, create_period, reference_date
from timeperiods.period.periodtypes import Period
from timeperiods.temporal.temporalconfig import TemporalSettings, load_settings
from timeperiods.units.unitregistry import UnitRegistry, create_unit_registry

logger = logging.getLogger(__name__)


# Precision of the `now` period
NOW_UNIT = "second"


@dataclass
class Temporal:
    """Adapter, configuration and navigation state shared across operations.

    Build with create_temporal(); direct construction skips validation.
    """

    adapter: DateAdapter
    registry: UnitRegistry
    settings: TemporalSettings
    browsing: Optional[Period] = None
    now: Optional[Period] = None
    browsing_unit: str = field(default="day")

    @property
    def week_starts_on(self) -> int:
        return self.settings.week_starts_on

    @property
    def max_divisions(self) -> int:
        return self.settings.max_divisions

    def refresh_now(self, at: Optional[datetime] = None) -> Period:
        """Re-derive and store the `now` period (host-side helper).

        Args:
            at: Instant to use (default: the current wall-clock time, in the
                browsing period's timezone when it has one)
        """
        if at is None:
            tz = self.browsing.date.tzinfo if self.browsing is not None else None
            at = datetime.now(tz)
        self.now = create_period(self, NOW_UNIT, at)
        return self.now


def create_temporal(
    *,
    date: Optional[DateOrPeriod] = None,
    adapter: Optional[DateAdapter] = None,
    now: Optional[DateOrPeriod] = None,
    week_starts_on: Optional[int] = None,
    registry: Optional[UnitRegistry] = None,
    settings: Optional[TemporalSettings] = None,
    max_divisions: Optional[int] = None,
    browsing_unit: str = "day",
) -> Temporal:
    """
    Create a Temporal context.

    Args:
        date: Reference date for the initial browsing period (required)
        adapter: DateAdapter backend (required)
        now: Current instant (default: datetime.now() in `date`'s timezone)
        week_starts_on: 0 = Sunday .. 6 = Saturday (default from settings: 1)
        registry: Unit registry (default: a fresh registry seeded with the
            built-in units)
        settings: Base settings (default: load_settings())
        max_divisions: Override for the divide/split safety ceiling
        browsing_unit: Unit of the initial browsing period (default: "day")

    Returns:
        Temporal

    Raises:
        ConfigurationError: Missing adapter or date, or invalid settings
        UnknownUnitError: browsing_unit is not registered

    Examples:
        >>> temporal = create_temporal(date=datetime(2024, 3, 14), adapter=NativeAdapter())
        >>> temporal.browsing.type, temporal.week_starts_on
        ('day', 1)
    """
    if adapter is None:
        raise ConfigurationError(
            "A date adapter is required. Pass adapter=NativeAdapter() or another DateAdapter."
        )
    if not isinstance(adapter, DateAdapter):
        raise ConfigurationError(
            f"adapter must be a DateAdapter instance, got {type(adapter).__name__}"
        )
    if date is None:
        raise ConfigurationError("A reference date is required (date=datetime(...)).")

    try:
        start_date = reference_date(date)
        now_date = reference_date(now) if now is not None else datetime.now(start_date.tzinfo)
    except TypeError as e:
        raise ConfigurationError(str(e)) from e

    base = settings if settings is not None else load_settings()
    resolved = base.with_overrides(week_starts_on=week_starts_on, max_divisions=max_divisions)

    if registry is None:
        registry = create_unit_registry(
            suggestion_threshold=resolved.unit_suggestion_threshold,
            suggestion_limit=resolved.unit_suggestion_limit,
        )

    temporal = Temporal(
        adapter=adapter,
        registry=registry,
        settings=resolved,
        browsing_unit=browsing_unit,
    )
    temporal.browsing = create_period(temporal, browsing_unit, start_date)
    temporal.now = create_period(temporal, NOW_UNIT, now_date)

    logger.debug(
        f"Created temporal context (adapter={adapter.name}, "
        f"week_starts_on={resolved.week_starts_on}, units={len(registry)})"
    )
    return temporal


__all__ = [
    "NOW_UNIT",
    "Temporal",
    "create_temporal",
]
