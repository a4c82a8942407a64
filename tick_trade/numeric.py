"""Integer rounding and clamping shared by the pricing and stats systems."""
from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's ``round`` uses banker's rounding; prices must round the same
    way on every platform, so ``2.5 -> 3`` and ``-2.5 -> -2``.
    """
    return math.floor(value + 0.5)
