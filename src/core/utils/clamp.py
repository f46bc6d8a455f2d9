"""Helpers for clamping source-reported counters into label tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, TypeVar

T = TypeVar("T")

LENGTH_FLOOR: Final[int] = 0


def clamp_length(value: int, upper: int) -> int:
    """Clamp a reported length into ``[0, upper]``.

    Negative values come from malformed sources and collapse to zero;
    anything above the top of a label table maps to its last label.
    """

    if value <= LENGTH_FLOOR:
        return LENGTH_FLOOR
    return min(value, upper)


def label_for_length(value: int, table: Mapping[int, T], default: T) -> T:
    """Look up ``value`` in a threshold table, clamping above its maximum."""

    if not table:
        return default
    return table.get(clamp_length(value, max(table)), default)
