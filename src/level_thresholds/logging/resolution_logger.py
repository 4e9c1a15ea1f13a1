"""Resolution logging

Records which value each indicator selected, so a configuration
can be checked against real measurements (e.g. an icon that is never
shown, or a Manual table whose lowest level is set too high and keeps
falling back).
"""

from collections import Counter
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..interfaces import ThresholdTable
from .log_store import LogStore, get_log_store

_JSON_SCALARS = (str, int, float, bool, type(None))


def _loggable(payload: Any) -> Any:
    """Keep JSON scalars as-is, fall back to repr for anything else"""
    if isinstance(payload, _JSON_SCALARS):
        return payload
    return repr(payload)


@dataclass
class ResolutionLogEntry:
    """One resolution

    Attributes:
        timestamp: ISO format timestamp
        indicator: Indicator name (e.g. "volume")
        kind: ThresholdKind value of the table
        value: Measurement
        max_value: Maximum of the measurement's domain
        resolved: Payload returned to the caller
        used_fallback: True if the table had no entry for the measurement
    """

    timestamp: str
    indicator: str
    kind: str
    value: float
    max_value: float
    resolved: Any = None
    used_fallback: bool = False


class ResolutionLogger:
    """Writes ResolutionLogEntry records and summarizes them

    Usage:
        logger = ResolutionLogger()
        logger.log("volume", table, 42.0, 100.0, "icon:volume_medium")
        logger.get_summary(indicator="volume")
    """

    LOG_TYPE = "resolution"

    def __init__(self, log_store: Optional[LogStore] = None):
        self._log_store = log_store

    @property
    def log_store(self) -> LogStore:
        """Store to write to (the shared one unless given)"""
        if self._log_store is None:
            self._log_store = get_log_store()
        return self._log_store

    def log(
        self,
        indicator: str,
        table: ThresholdTable,
        value: float,
        max_value: float,
        resolved: Any,
        used_fallback: bool = False,
    ) -> ResolutionLogEntry:
        entry = ResolutionLogEntry(
            timestamp=datetime.now().isoformat(),
            indicator=indicator,
            kind=table.kind.value,
            value=value,
            max_value=max_value,
            resolved=_loggable(resolved),
            used_fallback=used_fallback,
        )
        self.log_store.write(self.LOG_TYPE, entry)
        return entry

    def get_summary(self, indicator: Optional[str] = None) -> dict:
        """Summarize logged resolutions

        Args:
            indicator: Only count this indicator (all if None)

        Returns:
            total_events, fallbacks, fallback_rate, by_kind
            and by_payload (how often each payload was selected)
        """
        records = [
            record
            for record in self.log_store.read_all(self.LOG_TYPE)
            if indicator is None or record.get("indicator") == indicator
        ]
        fallbacks = [r for r in records if r.get("used_fallback")]
        selected = Counter(
            str(r.get("resolved")) for r in records if not r.get("used_fallback")
        )

        return {
            "total_events": len(records),
            "fallbacks": len(fallbacks),
            "fallback_rate": len(fallbacks) / len(records) if records else 0.0,
            "by_kind": dict(Counter(r.get("kind", "unknown") for r in records)),
            "by_payload": dict(selected.most_common()),
        }
