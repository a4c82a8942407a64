"""Prosperity and town-size price multipliers."""
from __future__ import annotations

from dataclasses import dataclass

from tick_trade.numeric import clamp, round_half_up
from tick_trade.types import ProsperityTier


@dataclass(frozen=True)
class ProsperityMultipliers:
    struggling: float = 0.9
    modest: float = 1.0
    prosperous: float = 1.1
    opulent: float = 1.2

    def factor(self, tier: ProsperityTier) -> float:
        return getattr(self, tier.value)


DEFAULT_PROSPERITY_MULT = ProsperityMultipliers()


def apply_prosperity_and_scale(
    price: float,
    tier: ProsperityTier,
    mult: ProsperityMultipliers = DEFAULT_PROSPERITY_MULT,
    size_factor: float = 1.0,
    lo: float = 1,
    hi: float = 9999,
) -> int:
    """``clamp(round(price * prosperity_factor * size_factor), lo, hi)``."""
    adjusted = round_half_up(price * mult.factor(tier) * size_factor)
    return int(clamp(adjusted, lo, hi))
