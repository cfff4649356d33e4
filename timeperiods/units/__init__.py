"""Units module: the unit vocabulary and its extension registry.

Public API:
    create_unit_registry() -> UnitRegistry
        Registry seeded with the built-in calendar units

    define_unit(target, name, definition)
        Register a custom unit (target: UnitRegistry or Temporal)

    get_unit_definition(target, name) / has_unit(target, name)
    get_registered_units(target)
        Lookups

Key Principles:
1. Registered units are dispatched exactly like built-ins
2. Last registration wins (a warning is logged)
3. Reserved names ("__proto__", "constructor", "custom", ...) are rejected
4. Unknown names raise UnknownUnitError with "did you mean" hints
"""

from .unitregistry import (
    UnitDefinition,
    UnitRegistry,
    create_unit_registry,
)
from .unitapi import (
    define_unit,
    get_unit_definition,
    has_unit,
    get_registered_units,
)
from .unitnorm import (
    RESERVED_UNIT_NAMES,
    validate_unit_name,
    suggest_units,
)

__all__ = [
    "UnitDefinition",
    "UnitRegistry",
    "create_unit_registry",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "get_registered_units",
    "RESERVED_UNIT_NAMES",
    "validate_unit_name",
    "suggest_units",
]
