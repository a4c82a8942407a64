"""tick_trade - deterministic turn-based trading simulation core."""
from __future__ import annotations

from tick_trade.rng import seeded_rand
from tick_trade.types import (
    GameState,
    GoodConfig,
    GoodEffects,
    GoodId,
    MilitaryTier,
    ProsperityTier,
    Revealed,
    Town,
    TownNotFoundError,
    UnknownGoodError,
)

__all__ = [
    "GameState",
    "GoodConfig",
    "GoodEffects",
    "GoodId",
    "MilitaryTier",
    "ProsperityTier",
    "Revealed",
    "Town",
    "TownNotFoundError",
    "UnknownGoodError",
    "seeded_rand",
]
