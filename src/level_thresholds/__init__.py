"""level-thresholds: Threshold tables for status indicators

Maps a measurement and its maximum (volume, battery, brightness...)
onto a configured icon, label or color using one of three shapes:
Basic (low/medium/high), Dynamic (equal buckets) or Manual (levels).
"""

from .interfaces import ThresholdKind, ThresholdTable
from .config import (
    BasicThresholds,
    DynamicThresholds,
    ManualThresholds,
    ThresholdConfigError,
    load_thresholds,
    loads_thresholds,
    parse_thresholds,
)
from .indicator import IndicatorConfig, LevelIndicator
from .logging import (
    ResolutionLogger,
    ResolutionLogEntry,
    LogStore,
    get_log_store,
    reset_log_store,
)

__version__ = "1.0.0"
__all__ = [
    # Interfaces
    "ThresholdKind",
    "ThresholdTable",
    # Tables
    "BasicThresholds",
    "DynamicThresholds",
    "ManualThresholds",
    # Config loading
    "ThresholdConfigError",
    "load_thresholds",
    "loads_thresholds",
    "parse_thresholds",
    # Indicator
    "IndicatorConfig",
    "LevelIndicator",
    # Logging
    "ResolutionLogger",
    "ResolutionLogEntry",
    "LogStore",
    "get_log_store",
    "reset_log_store",
]
