"""Logging module for level-thresholds

Provides structured JSON Lines logging of threshold resolutions.
"""

from .resolution_logger import ResolutionLogger, ResolutionLogEntry
from .log_store import LogStore, get_log_store, reset_log_store

__all__ = [
    "ResolutionLogger",
    "ResolutionLogEntry",
    "LogStore",
    "get_log_store",
    "reset_log_store",
]
