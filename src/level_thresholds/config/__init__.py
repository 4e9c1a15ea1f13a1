"""Configuration module for threshold tables"""

from .thresholds import BasicThresholds, DynamicThresholds, ManualThresholds
from .loader import (
    ThresholdConfigError,
    load_thresholds,
    loads_thresholds,
    normalize_key,
    parse_thresholds,
)

__all__ = [
    "BasicThresholds",
    "DynamicThresholds",
    "ManualThresholds",
    "ThresholdConfigError",
    "load_thresholds",
    "loads_thresholds",
    "normalize_key",
    "parse_thresholds",
]
