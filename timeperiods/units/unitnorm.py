"""Unit Name Validation
--------------------

Rules for names that may enter a unit registry, plus "did you mean"
suggestions for names that do not resolve.

Examples:
  >>> validate_unit_name("  sprint ")
  'sprint'

  >>> validate_unit_name("__proto__")
  Traceback (most recent call last):
  ...
  InvalidUnitNameError: Unit name '__proto__' is reserved

  >>> suggest_units("mnth", ["year", "month", "week"])
  ['month']
"""

from typing import Iterable, List

from timeperiods.errors import InvalidUnitNameError
from timeperiods.utils.resolver import topk_matches


# Names that shadow object machinery in attribute-style lookups
RESERVED_UNIT_NAMES = frozenset({
    "__proto__",
    "constructor",
    "prototype",
    "custom",  # built from explicit bounds, never derived from a date
})

RESERVED_PREFIXES = ("__",)


def validate_unit_name(name: str) -> str:
    """
    Validate and normalize a unit name for registration.

    Surrounding whitespace is stripped; case is preserved ("stableMonth").

    Args:
        name: Proposed unit name

    Returns:
        The stripped name

    Raises:
        InvalidUnitNameError: If the name is not a string, is blank, is
            reserved, or starts with a reserved prefix
    """
    if not isinstance(name, str):
        raise InvalidUnitNameError(f"Unit name must be a string, got {type(name).__name__}")

    stripped = name.strip()
    if not stripped:
        raise InvalidUnitNameError("Unit name must not be empty")

    if stripped in RESERVED_UNIT_NAMES or stripped.startswith(RESERVED_PREFIXES):
        raise InvalidUnitNameError(f"Unit name {stripped!r} is reserved")

    return stripped


def suggest_units(
    name: str,
    known: Iterable[str],
    threshold: int = 75,
    limit: int = 3,
) -> List[str]:
    """Registered names close to `name`, best first."""
    if not isinstance(name, str):
        return []
    return [unit for unit, _ in topk_matches(name, known, k=limit, threshold=threshold)]


__all__ = [
    "RESERVED_UNIT_NAMES",
    "RESERVED_PREFIXES",
    "validate_unit_name",
    "suggest_units",
]
