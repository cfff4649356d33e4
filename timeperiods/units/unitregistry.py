"""Unit Registry
-------------

Maps unit names to UnitDefinition objects. The registry is the only way to
extend the unit vocabulary; the period factory, divide, merge, navigation
and comparison all resolve names through it, so registered units behave
exactly like the built-ins.

A registry is an explicit object (one per Temporal context by default), not
a module global, so independent contexts and tests never share state.

Examples:
  >>> registry = create_unit_registry()
  >>> registry.has_unit("month")
  True
  >>> registry.define_unit("sprint", UnitDefinition(
  ...     create_period=sprint_bounds, divisions=("week", "day")))
  >>> "sprint" in registry.get_registered_units()
  True
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from timeperiods.errors import UnknownUnitError
from timeperiods.period.periodtypes import Duration, DurationLike, Period, as_duration
from timeperiods.units.unitnorm import suggest_units, validate_unit_name

logger = logging.getLogger(__name__)


Span = Tuple[datetime, datetime]


@dataclass(frozen=True)
class UnitDefinition:
    """How to build, check, divide, merge and step periods of one unit.

    Attributes:
        create_period: (date, adapter) -> (start, end). Receives an extra
            `week_starts_on=` keyword when `week_sensitive` is set
        validate: Optional shape check, (period) -> bool
        divisions: Units this unit is normally divided into, finest last
        merges_to: Unit a complete run of these periods merges up into
        week_sensitive: Pass the context's week start to create_period
        adapter_unit: Adapter vocabulary unit to delegate iteration and
            same-unit checks to; None means the engine walks the unit itself
        step: Duration moved by one navigation step; None means stepping
            across period boundaries
    """

    create_period: Callable[..., Span]
    validate: Optional[Callable[[Period], bool]] = None
    divisions: Sequence[str] = ()
    merges_to: Optional[str] = None
    week_sensitive: bool = False
    adapter_unit: Optional[str] = None
    step: Optional[Union[Duration, DurationLike]] = None

    def __post_init__(self):
        if not callable(self.create_period):
            raise TypeError("UnitDefinition.create_period must be callable")
        if self.validate is not None and not callable(self.validate):
            raise TypeError("UnitDefinition.validate must be callable")
        if isinstance(self.divisions, str):
            raise TypeError("UnitDefinition.divisions must be a sequence of unit names, not a string")
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "divisions", tuple(self.divisions))
        if self.step is not None:
            step = as_duration(self.step)
            if step.is_zero():
                raise ValueError("UnitDefinition.step must not be zero")
            object.__setattr__(self, "step", step)

    def build(self, date: datetime, adapter, week_starts_on: int) -> Span:
        """Run create_period with the right arguments for this unit."""
        if self.week_sensitive:
            return self.create_period(date, adapter, week_starts_on=week_starts_on)
        return self.create_period(date, adapter)


class UnitRegistry:
    """Name → UnitDefinition table with validation and suggestions.

    Args:
        definitions: Initial definitions to register (no overwrite warnings)
        suggestion_threshold: Minimum fuzzy score for "did you mean" hints
        suggestion_limit: Maximum number of hints per error
    """

    def __init__(
        self,
        definitions: Optional[Dict[str, UnitDefinition]] = None,
        *,
        suggestion_threshold: int = 75,
        suggestion_limit: int = 3,
    ):
        self._units: Dict[str, UnitDefinition] = {}
        self.suggestion_threshold = suggestion_threshold
        self.suggestion_limit = suggestion_limit
        for name, definition in (definitions or {}).items():
            self._units[validate_unit_name(name)] = definition

    def define_unit(self, name: str, definition: UnitDefinition) -> UnitDefinition:
        """
        Register (or replace) a unit definition.

        Overwriting an existing name is allowed: the last definition wins and
        a warning is logged.

        Args:
            name: Unit name (stripped; case-sensitive)
            definition: UnitDefinition to store

        Returns:
            The stored definition

        Raises:
            InvalidUnitNameError: Empty or reserved name
            TypeError: definition is not a UnitDefinition
        """
        name = validate_unit_name(name)
        if not isinstance(definition, UnitDefinition):
            raise TypeError(
                f"define_unit expects a UnitDefinition, got {type(definition).__name__}"
            )
        if name in self._units:
            logger.warning(f"Unit type {name!r} is already defined. Overwriting previous definition.")
        self._units[name] = definition
        return definition

    def unit(self, name: str, **options) -> Callable[[Callable[..., Span]], Callable[..., Span]]:
        """Decorator form of define_unit for a bare create_period function.

        Examples:
            >>> @registry.unit("fortnight", divisions=("week", "day"))
            ... def fortnight(date, adapter):
            ...     ...
        """
        def decorator(create_period: Callable[..., Span]) -> Callable[..., Span]:
            self.define_unit(name, UnitDefinition(create_period=create_period, **options))
            return create_period
        return decorator

    def get_unit_definition(self, name: str) -> Optional[UnitDefinition]:
        if not isinstance(name, str):
            return None
        return self._units.get(name)

    def require(self, name: str) -> UnitDefinition:
        """Definition for `name`, or UnknownUnitError with suggestions."""
        definition = self.get_unit_definition(name)
        if definition is None:
            raise UnknownUnitError(
                name,
                suggest_units(
                    name,
                    self._units,
                    threshold=self.suggestion_threshold,
                    limit=self.suggestion_limit,
                ),
            )
        return definition

    def has_unit(self, name: str) -> bool:
        return self.get_unit_definition(name) is not None

    def get_registered_units(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._units)

    def remove_unit(self, name: str) -> bool:
        """Remove a unit; returns False when it was not registered."""
        return self._units.pop(name, None) is not None

    def clear(self) -> None:
        self._units.clear()

    def copy(self) -> "UnitRegistry":
        """Independent registry with the same definitions."""
        return UnitRegistry(
            dict(self._units),
            suggestion_threshold=self.suggestion_threshold,
            suggestion_limit=self.suggestion_limit,
        )

    def __contains__(self, name) -> bool:
        return self.has_unit(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._units))

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self):
        return f"UnitRegistry({self.get_registered_units()!r})"


def create_unit_registry(
    *,
    include_builtins: bool = True,
    suggestion_threshold: int = 75,
    suggestion_limit: int = 3,
) -> UnitRegistry:
    """
    Create a registry seeded with the built-in calendar units.

    Built-ins: year, quarter, month, week, day, hour, minute, second,
    stableMonth, decade, century, millennium.

    Args:
        include_builtins: Seed built-in units (default: True)
        suggestion_threshold: Minimum fuzzy score for unknown-unit hints
        suggestion_limit: Maximum number of hints per error

    Returns:
        A new, independent UnitRegistry
    """
    from timeperiods.units.unitdefinitions import builtin_unit_definitions

    definitions = builtin_unit_definitions() if include_builtins else {}
    return UnitRegistry(
        definitions,
        suggestion_threshold=suggestion_threshold,
        suggestion_limit=suggestion_limit,
    )


__all__ = [
    "Span",
    "UnitDefinition",
    "UnitRegistry",
    "create_unit_registry",
]
