"""Pytest configuration and fixtures for Datewise tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datewise can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datewise import config  # noqa: E402
from datewise.core.instant import Instant  # noqa: E402
from datewise.units.timezone import TimeZone  # noqa: E402


@pytest.fixture(autouse=True)
def default_zone_utc(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the default zone so field accessors do not depend on the host."""
    monkeypatch.setattr(config, "DEFAULT_TIMEZONE", "UTC")
    monkeypatch.setattr(config, "JUST_NOW_SECONDS", 1.0)
    monkeypatch.setattr(config, "RELATIVE_MAX_UNITS", 1)


@pytest.fixture
def utc() -> TimeZone:
    return TimeZone.utc()


@pytest.fixture
def new_york() -> TimeZone:
    return TimeZone.lookup("America/New_York")


@pytest.fixture
def rome() -> TimeZone:
    return TimeZone.lookup("Europe/Rome")


@pytest.fixture
def reference() -> Instant:
    """Monday 2024-01-15 14:30:45 UTC."""
    return Instant.from_timestamp(1_705_329_045)
