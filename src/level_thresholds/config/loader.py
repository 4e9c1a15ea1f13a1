"""Threshold configuration loading

Builds threshold tables from user configuration (YAML or plain Python data).
The shape of the configuration decides the table type:

1. Basic: a mapping with exactly the keys low, medium and high
2. Dynamic: a list of values
3. Manual: a mapping whose keys are non-negative integers

Each shape is tried in that order. Configuration that matches no shape,
or more than one, is rejected with a ThresholdConfigError.
"""

import re
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

from ..interfaces import ThresholdKind, ThresholdTable
from .thresholds import BasicThresholds, DynamicThresholds, ManualThresholds

BASIC_KEYS = ("low", "medium", "high")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATORS = re.compile(r"[\s\-]+")


class ThresholdConfigError(ValueError):
    """Raised when threshold configuration has an unusable shape"""


def normalize_key(key: Any) -> Any:
    """Normalize a mapping key to snake_case

    Non-string keys (e.g. integer levels from YAML) are returned unchanged.

    Args:
        key: Raw configuration key

    Returns:
        Normalized key ("Low" -> "low", "VeryHigh" -> "very_high")
    """
    if not isinstance(key, str):
        return key
    key = _CAMEL_BOUNDARY.sub("_", key.strip())
    return _SEPARATORS.sub("_", key).lower()


def _parse_level(key: Any) -> Optional[int]:
    """Parse a Manual level key, or return None if it is not one"""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.strip().isdecimal():
        return int(key.strip())
    return None


def _as_basic(data: Any) -> ThresholdTable:
    if not isinstance(data, dict):
        raise ThresholdConfigError("expected a mapping")

    normalized: dict[Any, Any] = {}
    for key, value in data.items():
        name = normalize_key(key)
        if name in normalized:
            raise ThresholdConfigError(f"duplicate key {key!r}")
        normalized[name] = value

    if set(normalized) != set(BASIC_KEYS):
        keys = ", ".join(sorted(str(key) for key in normalized))
        raise ThresholdConfigError(
            f"expected exactly the keys low, medium, high (got {keys})"
        )
    return BasicThresholds(
        low=normalized["low"],
        medium=normalized["medium"],
        high=normalized["high"],
    )


def _as_dynamic(data: Any) -> ThresholdTable:
    if not isinstance(data, (list, tuple)):
        raise ThresholdConfigError("expected a list")
    return DynamicThresholds(data)


def _as_manual(data: Any) -> ThresholdTable:
    if not isinstance(data, dict):
        raise ThresholdConfigError("expected a mapping")

    entries: dict[int, Any] = {}
    for key, value in data.items():
        level = _parse_level(key)
        if level is None:
            raise ThresholdConfigError(
                f"key {key!r} is not a non-negative integer level"
            )
        if level in entries:
            raise ThresholdConfigError(f"duplicate level {level}")
        entries[level] = value
    return ManualThresholds(entries)


# Tried in order; the first match wins unless another also matches
SHAPE_VALIDATORS: list[tuple[ThresholdKind, Callable[[Any], ThresholdTable]]] = [
    (ThresholdKind.BASIC, _as_basic),
    (ThresholdKind.DYNAMIC, _as_dynamic),
    (ThresholdKind.MANUAL, _as_manual),
]


def parse_thresholds(data: Any) -> ThresholdTable:
    """Build a threshold table from structured configuration

    Args:
        data: Mapping or list loaded from configuration,
              or an already-built ThresholdTable (returned as-is)

    Returns:
        BasicThresholds, DynamicThresholds or ManualThresholds

    Raises:
        ThresholdConfigError: If the data is empty, matches no shape,
                              or matches several shapes
    """
    if isinstance(data, ThresholdTable):
        return data
    if isinstance(data, (dict, list, tuple)) and not data:
        raise ThresholdConfigError("No thresholds configured (empty value)")

    matches: list[ThresholdTable] = []
    rejections: list[str] = []
    for kind, validator in SHAPE_VALIDATORS:
        try:
            matches.append(validator(data))
        except ThresholdConfigError as e:
            rejections.append(f"{kind.value.lower()}: {e}")

    if not matches:
        raise ThresholdConfigError(
            f"Invalid threshold configuration {data!r} "
            f"({'; '.join(rejections)})"
        )
    if len(matches) > 1:
        kinds = ", ".join(table.kind.value.lower() for table in matches)
        raise ThresholdConfigError(
            f"Ambiguous threshold configuration {data!r} (matches {kinds})"
        )
    return matches[0]


def _select_section(document: Any, section: Optional[str]) -> Any:
    """Walk a dotted path (e.g. "volume.icons") into a loaded document"""
    if not section:
        return document

    node = document
    for part in section.split("."):
        if not isinstance(node, dict):
            raise ThresholdConfigError(
                f"Section {section!r} not found: {part!r} is not inside a mapping"
            )
        matched = [key for key in node if normalize_key(key) == normalize_key(part)]
        if not matched:
            raise ThresholdConfigError(f"Section {section!r} not found: no {part!r}")
        if len(matched) > 1:
            keys = ", ".join(repr(key) for key in matched)
            raise ThresholdConfigError(
                f"Section {section!r} is ambiguous: {keys} all match {part!r}"
            )
        node = node[matched[0]]
    return node


def loads_thresholds(text: str, section: Optional[str] = None) -> ThresholdTable:
    """Build a threshold table from YAML text

    Args:
        text: YAML document
        section: Optional dotted path to the thresholds inside the document

    Returns:
        Parsed ThresholdTable
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ThresholdConfigError(f"Invalid YAML: {e}") from e
    return parse_thresholds(_select_section(document, section))


def load_thresholds(
    path: str | Path,
    section: Optional[str] = None,
) -> ThresholdTable:
    """Build a threshold table from a YAML file

    Args:
        path: Path to the YAML file
        section: Optional dotted path to the thresholds inside the file

    Returns:
        Parsed ThresholdTable
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Threshold config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return loads_thresholds(f.read(), section=section)
