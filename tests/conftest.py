"""Shared test fixtures and utilities for timeperiods tests."""

import pytest
from datetime import datetime

from timeperiods.adapters import NativeAdapter, PandasAdapter
from timeperiods.temporal import clear_settings_cache, create_temporal
from timeperiods.temporal.temporalconfig import CONFIG_PATH_ENV, ENV_OVERRIDES


# Fixed clock so is_today and `now` are deterministic
REFERENCE_DATE = datetime(2024, 3, 14, 10, 30)

ADAPTERS = {
    "native": NativeAdapter,
    "pandas": PandasAdapter,
}


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against the packaged defaults.

    Removes TIMEPERIODS_* variables from the environment and forgets any
    cached YAML so one test's configuration never leaks into another.
    """
    for name in list(ENV_OVERRIDES) + [CONFIG_PATH_ENV]:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(params=sorted(ADAPTERS))
def adapter(request):
    """Each date backend in turn (native, pandas)."""
    return ADAPTERS[request.param]()


@pytest.fixture
def native_adapter():
    return NativeAdapter()


@pytest.fixture
def temporal(adapter):
    """Temporal context on each backend, weeks starting Monday.

    Example:
        def test_month(temporal):
            p = create_period(temporal, "month", datetime(2024, 2, 15))
            assert p.end.day == 29
    """
    return create_temporal(date=REFERENCE_DATE, now=REFERENCE_DATE, adapter=adapter)


@pytest.fixture
def native_temporal(native_adapter):
    """Temporal context on the native backend only.

    Used where dates fall outside the pandas Timestamp range (years
    before 1677 or after 2262).
    """
    return create_temporal(date=REFERENCE_DATE, now=REFERENCE_DATE, adapter=native_adapter)


@pytest.fixture
def sunday_temporal(adapter):
    """Temporal context with weeks starting on Sunday."""
    return create_temporal(
        date=REFERENCE_DATE,
        now=REFERENCE_DATE,
        adapter=adapter,
        week_starts_on=0,
    )
