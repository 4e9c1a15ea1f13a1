"""Threshold tables for icon and label configuration

Maps a measurement (volume, battery percentage, brightness...)
onto one of several configured values as it passes thresholds.
For example, showing low/medium/high volume icons as volume changes.

Three shapes are supported:
1. Basic: fixed low/medium/high slots, each covering a third of the range
2. Dynamic: a list whose items split the range into equal buckets
3. Manual: a map of integer levels to values, for non-linear behaviour
"""

import math
from bisect import bisect_right
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from ..interfaces import T, ThresholdKind, ThresholdTable

# Dynamic bucket positions within this distance above an edge
# still belong to the lower bucket
BOUNDARY_TOLERANCE = 0.00001


def _usable_max(max_value: float) -> bool:
    """Check that a maximum can be used to split the range"""
    return max_value > 0 and math.isfinite(max_value)


@dataclass(frozen=True)
class BasicThresholds(ThresholdTable[T]):
    """Auto-calculated thresholds using "low", "medium" and "high" keys

    The range [0, max] is split into three equal intervals.
    Values outside the range are clamped, so negative values
    select low and values above max select high.

    Example (YAML):
        icons:
          low: "icon:volume_low"
          medium: "icon:volume_medium"
          high: "icon:volume_high"
    """

    low: T
    medium: T
    high: T

    kind = ThresholdKind.BASIC

    def threshold_for(self, value: float, max_value: float) -> Optional[T]:
        if math.isnan(value) or not _usable_max(max_value):
            return None

        interval = max_value / 3.0
        ratio = min(max(value / interval, 0.0), 3.0)

        if ratio < 1.0:
            return self.low
        if ratio < 2.0:
            return self.medium
        return self.high

    def values(self) -> list[T]:
        return [self.low, self.medium, self.high]

    def describe(self) -> str:
        return (
            f"[{self.kind.value}] low={self.low!r}, "
            f"medium={self.medium!r}, high={self.high!r}"
        )


@dataclass(frozen=True)
class DynamicThresholds(ThresholdTable[T]):
    """Auto-calculated thresholds using a list

    Bucket boundaries are linearly separated based on the number of items.
    Values are rounded *down* to the nearest level: a value sitting exactly
    on a boundary belongs to the lower bucket, so max selects the last item.
    Anything above max also selects the last item, whatever max is.
    An unbounded max puts every finite value in the first bucket.

    Example (YAML):
        icons: ["icon:volume_low", "icon:volume_medium", "icon:volume_high"]
    """

    entries: Sequence[T] = ()

    kind = ThresholdKind.DYNAMIC

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))

    def threshold_for(self, value: float, max_value: float) -> Optional[T]:
        if not self.entries:
            return None
        if math.isnan(value) or math.isnan(max_value):
            return None

        if value > max_value:
            return self.entries[-1]
        if max_value <= 0:
            return None
        if value >= max_value:
            return self.entries[-1]
        if value <= 0:
            return self.entries[0]

        # subtract a small amount so boundaries (and float noise just above
        # them) fall to the previous bucket
        position = (value / max_value) * len(self.entries) - BOUNDARY_TOLERANCE
        index = math.floor(position)
        return self.entries[min(max(index, 0), len(self.entries) - 1)]

    def values(self) -> list[T]:
        return list(self.entries)

    def describe(self) -> str:
        items = ", ".join(repr(entry) for entry in self.entries)
        return f"[{self.kind.value}] {len(self.entries)} buckets: {items}"


@dataclass(frozen=True)
class ManualThresholds(ThresholdTable[T]):
    """Pre-defined thresholds using a map of levels to values

    The selected value is the one with the greatest level
    less than or equal to the measurement. Values are rounded
    **down** to the nearest level; negative values count as 0.
    The maximum is not used.

    Example (YAML):
        icons:
          0: "icon:volume_low"
          33: "icon:volume_medium"
          67: "icon:volume_high"
    """

    entries: Mapping[int, T] = field(default_factory=dict)
    _boundaries: tuple[int, ...] = field(init=False, repr=False, compare=False)

    kind = ThresholdKind.MANUAL

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(self, "_boundaries", tuple(sorted(self.entries)))

    @property
    def boundaries(self) -> tuple[int, ...]:
        """Configured levels in ascending order"""
        return self._boundaries

    def threshold_for(self, value: float, max_value: float) -> Optional[T]:
        if math.isnan(value):
            return None

        # Levels are integers, so comparing against the raw value
        # is the same as comparing against its floor
        position = bisect_right(self._boundaries, max(value, 0))
        if position == 0:
            return None
        return self.entries[self._boundaries[position - 1]]

    def values(self) -> list[T]:
        return [self.entries[level] for level in self._boundaries]

    def describe(self) -> str:
        items = ", ".join(
            f"{level} -> {self.entries[level]!r}" for level in self._boundaries
        )
        return f"[{self.kind.value}] {items}"
