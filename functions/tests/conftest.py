"""Pytest configuration and shared fixtures for BuildMarket tests."""

import os
import sys
from datetime import datetime, timezone

import pytest
import structlog


# ============================================================================
# Ensure local imports work (config/, models/, services/, validators/, utils/)
# ============================================================================
#
# The codebase uses absolute imports like `from models...` / `from services...`.
# This guarantees that `functions/` is importable as the top-level module root.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


from models.area import AreaInput, AreaResult, Unit  # noqa: E402
from services.analytics_service import AnalyticsService  # noqa: E402
from services.area_calculator import area_result  # noqa: E402
from services.event_store import EventStore  # noqa: E402


# ============================================================================
# Logging
# ============================================================================

@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo configure_logging() calls so log capture sees every level."""
    yield
    structlog.reset_defaults()


# ============================================================================
# Time
# ============================================================================

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now():
    """The instant returned by the analytics service clock."""
    return FIXED_NOW


# ============================================================================
# Analytics
# ============================================================================

@pytest.fixture
def event_store():
    """Small event store so eviction is cheap to exercise."""
    return EventStore(capacity=100)


@pytest.fixture
def analytics_service(fixed_now):
    """Analytics service with its own store and a fixed clock."""
    return AnalyticsService(store=EventStore(), clock=lambda: fixed_now)


@pytest.fixture
def make_event(fixed_now):
    """Factory for event payload dicts in camelCase form."""
    def _make(event, user_id="user-1", role="general_user", timestamp=None, **metadata):
        return {
            "event": event,
            "userId": user_id,
            "userRole": role,
            "timestamp": timestamp or fixed_now,
            "metadata": metadata,
        }
    return _make


# ============================================================================
# Areas
# ============================================================================

@pytest.fixture
def plot_10x10_m():
    """10 m x 10 m plot."""
    return AreaInput(length=10, width=10, unit=Unit.METERS)


@pytest.fixture
def plot_10x10_ft():
    """10 ft x 10 ft plot."""
    return AreaInput(length=10, width=10, unit=Unit.FEET)


@pytest.fixture
def area_100_sq_m() -> AreaResult:
    return area_result(100)


@pytest.fixture
def area_1000_sq_ft() -> AreaResult:
    """1000 sq ft expressed through the canonical m² area."""
    return area_result(1000 / 10.7639)
