"""Threshold table interfaces and data types

Defines the protocol shared by the three threshold table variants.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ThresholdKind(str, Enum):
    """Shape of a configured threshold table"""

    BASIC = "BASIC"  # Fixed low/medium/high slots
    DYNAMIC = "DYNAMIC"  # Ordered list of equal-width buckets
    MANUAL = "MANUAL"  # Sparse map of integer boundaries to values


class ThresholdTable(ABC, Generic[T]):
    """Protocol for threshold tables

    A threshold table maps a measurement and its maximum
    (e.g. volume level out of 100) onto one configured value
    such as an icon name, a label or a color.

    Tables are built once while loading configuration
    and are read-only afterwards.
    """

    kind: ThresholdKind

    @abstractmethod
    def threshold_for(self, value: float, max_value: float) -> Optional[T]:
        """Resolve the configured value for a measurement

        Args:
            value: Current measurement, normally within [0, max_value]
            max_value: Upper bound of the measurement's domain

        Returns:
            Selected payload, or None if nothing is configured for it
        """
        pass

    @abstractmethod
    def values(self) -> list[T]:
        """Return configured payloads in ascending threshold order"""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Build a one-line human-readable summary of the table"""
        pass

    def __len__(self) -> int:
        return len(self.values())
