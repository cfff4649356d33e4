"""Period operations: pure functions over a Temporal context and Periods.

None of these mutate their inputs or the context; they return new Periods.
"""

from timeperiods.operations.divide import (
    divide,
    split,
    split_at,
)
from timeperiods.operations.merge import (
    merge,
)
from timeperiods.operations.navigate import (
    go,
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
)
from timeperiods.operations.compare import (
    contains,
    is_same,
    is_today,
    is_valid_period,
    is_weekday,
    is_weekend,
)

__all__ = [
    # Subdivision
    "divide",
    "split",
    "split_at",
    # Combination
    "merge",
    # Navigation
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    # Comparison
    "contains",
    "is_same",
    "is_today",
    "is_valid_period",
    "is_weekday",
    "is_weekend",
]
