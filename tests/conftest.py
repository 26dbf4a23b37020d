"""Pytest configuration and fixtures for Chronospan tests."""

from __future__ import annotations

import datetime
import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronospan can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronospan.clock import FixedClock  # noqa: E402
from chronospan.format.config import reset_default_config  # noqa: E402


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the fixed default patterns."""
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture
def fixed_now() -> datetime.datetime:
    return datetime.datetime(2024, 6, 15, 12, 30, 45)


@pytest.fixture
def clock(fixed_now: datetime.datetime) -> FixedClock:
    """A clock frozen at 2024-06-15 12:30:45."""
    return FixedClock(fixed_now)
