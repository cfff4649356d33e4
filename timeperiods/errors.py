"""Error taxonomy for period computations.

Every error is raised synchronously at the call site. Computations are
deterministic, so nothing here is retried.

Hierarchy:
  TemporalError
    ConfigurationError       (also ValueError)   missing adapter / date, bad settings
    UnknownUnitError         (also ValueError)   unit with no built-in or registry entry
    UnsupportedDivisionError (also ValueError)   stableMonth division rules
    InvalidUnitNameError     (also ValueError)   empty or reserved registry name
    DivisionTooLargeError    (also RuntimeError) division exceeds the safety ceiling
"""

from __future__ import annotations
from typing import Optional, Sequence


class TemporalError(Exception):
    """Base class for all period engine errors."""


class ConfigurationError(TemporalError, ValueError):
    """Context or settings cannot be built from the given options."""


class UnknownUnitError(TemporalError, ValueError):
    """Unit name has no built-in handling and no registry entry.

    Args:
        unit: The unit name that failed to resolve
        suggestions: Close registered names (best first)
    """

    def __init__(self, unit: str, suggestions: Optional[Sequence[str]] = None):
        self.unit = unit
        self.suggestions = list(suggestions or [])
        message = f"Unknown unit: {unit!r}"
        if self.suggestions:
            quoted = ", ".join(repr(s) for s in self.suggestions)
            message += f". Did you mean {quoted}?"
        super().__init__(message)


class UnsupportedDivisionError(TemporalError, ValueError):
    """Division requested between units that cannot be divided."""


class InvalidUnitNameError(TemporalError, ValueError):
    """Unit name rejected at registration time."""


class DivisionTooLargeError(TemporalError, RuntimeError):
    """Division would produce more periods than the configured ceiling."""

    def __init__(self, unit: str, limit: int):
        self.unit = unit
        self.limit = limit
        super().__init__(
            f"Dividing by {unit!r} would produce more than {limit} periods "
            f"(max_divisions={limit})"
        )


__all__ = [
    "TemporalError",
    "ConfigurationError",
    "UnknownUnitError",
    "UnsupportedDivisionError",
    "InvalidUnitNameError",
    "DivisionTooLargeError",
]
