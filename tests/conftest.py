"""Pytest fixtures for level-thresholds tests"""

import pytest

from level_thresholds.config.thresholds import (
    BasicThresholds,
    DynamicThresholds,
    ManualThresholds,
)
from level_thresholds.logging import LogStore, reset_log_store


@pytest.fixture
def basic() -> BasicThresholds:
    """low/medium/high Basic table"""
    return BasicThresholds(low="low", medium="medium", high="high")


@pytest.fixture
def dynamic() -> DynamicThresholds:
    """Three-bucket Dynamic table"""
    return DynamicThresholds(["low", "medium", "high"])


@pytest.fixture
def manual() -> ManualThresholds:
    """Manual table with levels 0, 33 and 67"""
    return ManualThresholds({0: "low", 33: "medium", 67: "high"})


@pytest.fixture
def log_store(tmp_path) -> LogStore:
    """LogStore in a temporary directory with a fixed session"""
    reset_log_store()
    store = LogStore(tmp_path / "logs", session_id="test_session")
    yield store
    reset_log_store()


@pytest.fixture
def volume_yaml() -> str:
    """Config document with one table of each shape"""
    return """
volume:
  icons:
    low: "icon:volume_low"
    medium: "icon:volume_medium"
    high: "icon:volume_high"
battery:
  icons:
    - "battery-empty"
    - "battery-quarter"
    - "battery-half"
    - "battery-three-quarters"
    - "battery-full"
brightness:
  Icons:
    0: "dim"
    40: "normal"
    90: "bright"
"""
