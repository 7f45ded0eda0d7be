"""Small numeric helpers shared by the scoring engines."""

from __future__ import annotations

import math


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (built-in round() is banker's)."""
    return math.floor(value + 0.5)
