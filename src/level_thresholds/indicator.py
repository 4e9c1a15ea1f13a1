"""Level indicator: threshold lookup for a status widget

Wraps one threshold table with the settings a widget needs:
a fallback for measurements the table has no entry for,
and optional resolution logging.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .config.loader import parse_thresholds
from .interfaces import ThresholdTable
from .logging import ResolutionLogger


@dataclass
class IndicatorConfig:
    """Indicator settings

    Attributes:
        fallback: Returned when the table resolves to nothing
        log_resolutions: Write every resolution to the log store
    """

    fallback: Optional[Any] = None
    log_resolutions: bool = False


class LevelIndicator:
    """Select the configured value (icon, label, color) for a measurement

    Usage:
        indicator = LevelIndicator(
            {"low": "icon:volume_low", "medium": "icon:volume_medium",
             "high": "icon:volume_high"},
            name="volume",
        )
        indicator.select(42, 100)  # "icon:volume_medium"
    """

    def __init__(
        self,
        table: Any,
        config: Optional[IndicatorConfig] = None,
        name: str = "level",
        logger: Optional[ResolutionLogger] = None,
    ):
        """Initialize LevelIndicator

        Args:
            table: ThresholdTable, or raw configuration data for one
            config: IndicatorConfig (defaults used if not provided)
            name: Indicator name used in logs
            logger: ResolutionLogger (created on demand if logging is on)
        """
        self.table: ThresholdTable = parse_thresholds(table)
        self.config = config or IndicatorConfig()
        self.name = name
        self._logger = logger

    @property
    def logger(self) -> ResolutionLogger:
        """Get resolution logger (lazy initialization)"""
        if self._logger is None:
            self._logger = ResolutionLogger()
        return self._logger

    def select(self, value: float, max_value: float) -> Any:
        """Resolve a measurement, falling back to config.fallback

        Args:
            value: Current measurement
            max_value: Maximum of the measurement's domain

        Returns:
            Configured payload, or the fallback
        """
        resolved = self.table.threshold_for(value, max_value)
        used_fallback = resolved is None
        if used_fallback:
            resolved = self.config.fallback

        if self.config.log_resolutions:
            self.logger.log(
                indicator=self.name,
                table=self.table,
                value=value,
                max_value=max_value,
                resolved=resolved,
                used_fallback=used_fallback,
            )
        return resolved

    def resolution_summary(self) -> dict:
        """Summary of this indicator's logged resolutions

        Returns:
            ResolutionLogger.get_summary() restricted to this indicator
        """
        return self.logger.get_summary(indicator=self.name)

    def __repr__(self) -> str:
        return f"LevelIndicator({self.name!r}, {self.table.describe()})"
