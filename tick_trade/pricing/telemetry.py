"""Price change traces for explaining repricing decisions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from tick_trade.types import GoodId, ProsperityTier


class PriceChangeCause(Enum):
    POST_TRADE = "post-trade"
    DRIFT = "drift"


@dataclass(frozen=True)
class PriceChangeTrace:
    """Every input and intermediate value behind one repricing.

    Attributes:
        old_price: Price before the change.
        curve_price: Equilibrium price from the curve.
        smoothed: Price after EMA smoothing (and drift, for drift traces).
        final: Price after prosperity scaling and clamping.
    """

    town_id: str
    good_id: GoodId
    old_price: int
    curve_price: int
    smoothed: int
    final: int
    stock: int
    target: float
    elasticity: float
    prosperity_tier: ProsperityTier
    prosperity_factor: float
    cause: PriceChangeCause


PriceChangeTracer = Callable[[PriceChangeTrace], None]
