"""Time Periods - hierarchical calendar periods

Public API for building, dividing, merging and navigating calendar periods
(years, quarters, months, weeks, days, ...) over a pluggable date backend.

Usage:
    from datetime import datetime
    from timeperiods import create_temporal, create_period, divide, next_period
    from timeperiods import NativeAdapter

    temporal = create_temporal(date=datetime(2024, 3, 14), adapter=NativeAdapter())

    # Normalized period containing a date
    quarter = create_period(temporal, "quarter", datetime(2024, 2, 15))  # Jan 1 - Mar 31

    # Subdivide
    months = divide(temporal, quarter, "month")  # 3 month periods

    # Navigate
    q2 = next_period(temporal, quarter)

    # Register a custom unit
    define_unit(temporal, "sprint", UnitDefinition(create_period=sprint_bounds))
"""

__version__ = "0.1.0"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    TemporalError,             # Base class for every engine error
    ConfigurationError,        # Missing adapter/date, bad settings
    UnknownUnitError,          # Unit not built in or registered
    UnsupportedDivisionError,  # stableMonth division rules
    InvalidUnitNameError,      # Empty or reserved unit name
    DivisionTooLargeError,     # Division exceeds max_divisions
)

# ============================================================================
# Adapters
# ============================================================================

from .adapters import (
    DateAdapter,     # Abstract backend contract
    NativeAdapter,   # datetime + dateutil backend
    PandasAdapter,   # pandas backend
)

# ============================================================================
# Period Model & Factory
# ============================================================================

from .period import (
    Duration,              # Calendar-aware amount of time
    Period,                # Immutable period value
    create_period,         # Primary API - normalized period containing a date
    create_custom_period,  # Period from explicit bounds
    to_period,             # create_period with "day" default
)

# ============================================================================
# Temporal Context
# ============================================================================

from .temporal import (
    Temporal,           # Adapter + registry + settings + browsing/now
    TemporalSettings,   # Validated settings
    create_temporal,    # Primary API - build a context
    load_settings,      # YAML + environment settings
)

# ============================================================================
# Operations
# ============================================================================

from .operations import (
    divide,
    split,
    split_at,
    merge,
    go,
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
    is_same,
    contains,
    is_valid_period,
    is_today,
    is_weekday,
    is_weekend,
)

# ============================================================================
# Unit Registry
# ============================================================================

from .units import (
    UnitDefinition,         # Custom unit description
    UnitRegistry,           # Per-context unit registry
    create_unit_registry,   # Registry seeded with built-in units
    define_unit,            # Register a custom unit
    get_unit_definition,    # Look up a unit
    has_unit,               # Membership test
    get_registered_units,   # All registered unit names
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "create_temporal",   # Build a context
    "create_period",     # Period of a unit containing a date
    "divide",            # Period -> sub-periods
    "merge",             # Sub-periods -> period
    "go",                # Move N periods

    # ========================================================================
    # Errors
    # ========================================================================
    "TemporalError",
    "ConfigurationError",
    "UnknownUnitError",
    "UnsupportedDivisionError",
    "InvalidUnitNameError",
    "DivisionTooLargeError",

    # ========================================================================
    # Adapters
    # ========================================================================
    "DateAdapter",
    "NativeAdapter",
    "PandasAdapter",

    # ========================================================================
    # Period Model
    # ========================================================================
    "Duration",
    "Period",
    "create_custom_period",
    "to_period",

    # ========================================================================
    # Temporal Context
    # ========================================================================
    "Temporal",
    "TemporalSettings",
    "load_settings",

    # ========================================================================
    # Operations
    # ========================================================================
    "split",
    "split_at",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    "is_same",
    "contains",
    "is_valid_period",
    "is_today",
    "is_weekday",
    "is_weekend",

    # ========================================================================
    # Unit Registry
    # ========================================================================
    "UnitDefinition",
    "UnitRegistry",
    "create_unit_registry",
    "define_unit",
    "get_unit_definition",
    "has_unit",
    "get_registered_units",
]
