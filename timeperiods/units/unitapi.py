"""Public API for unit registration.

Plugins extend the unit vocabulary through these functions. Each takes the
registry to act on, either directly or through a Temporal context that owns
one, so registrations never leak between independent contexts.

Examples:
    >>> from timeperiods import create_temporal, NativeAdapter
    >>> from timeperiods.units import define_unit, UnitDefinition
    >>> temporal = create_temporal(date=datetime(2024, 3, 14), adapter=NativeAdapter())
    >>> define_unit(temporal, "fiscalQuarter", UnitDefinition(
    ...     create_period=fiscal_quarter_bounds,
    ...     divisions=("month", "week", "day"),
    ...     merges_to="fiscalYear",
    ... ))
    >>> has_unit(temporal, "fiscalQuarter")
    True
"""

from typing import List, Optional

from timeperiods.units.unitregistry import UnitDefinition, UnitRegistry


def _registry(target) -> UnitRegistry:
    if isinstance(target, UnitRegistry):
        return target
    registry = getattr(target, "registry", None)
    if isinstance(registry, UnitRegistry):
        return registry
    raise TypeError(
        f"Expected a UnitRegistry or a Temporal context, got {type(target).__name__}"
    )


def define_unit(target, name: str, definition: UnitDefinition) -> UnitDefinition:
    """Register `definition` under `name` (last write wins, with a warning).

    Raises:
        InvalidUnitNameError: Empty or reserved name such as "__proto__"
    """
    return _registry(target).define_unit(name, definition)


def get_unit_definition(target, name: str) -> Optional[UnitDefinition]:
    return _registry(target).get_unit_definition(name)


def has_unit(target, name: str) -> bool:
    return _registry(target).has_unit(name)


def get_registered_units(target) -> List[str]:
    return _registry(target).get_registered_units()


__all__ = [
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "get_registered_units",
]
