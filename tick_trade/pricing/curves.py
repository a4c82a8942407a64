"""Log-ratio supply/demand curve and EMA smoothing."""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_trade.numeric import clamp, round_half_up
from tick_trade.pricing.config import PriceCurveConfig


@dataclass(frozen=True)
class TownPriceState:
    stock: int
    price: int


@dataclass(frozen=True)
class Smoothing:
    """EMA blend factor. 0 keeps the old price, 1 jumps to the new one."""

    alpha: float = 0.5


DEFAULT_SMOOTH = Smoothing()


def next_price(state: TownPriceState, cfg: PriceCurveConfig) -> int:
    """Equilibrium price ``base * (target / stock) ** elasticity``.

    Stock is floored at 1. The result is rounded half-up and clamped to
    ``[min_price, max_price]``. At ``stock == target_stock`` this is
    exactly ``base_price``.
    """
    stock = max(1, state.stock)
    if stock == cfg.target_stock:
        raw = cfg.base_price
    elif cfg.target_stock <= 0:
        raw = 0.0
    else:
        # log-ratio form: base * exp(elasticity * ln(target / stock))
        raw = cfg.base_price * math.exp(cfg.elasticity * math.log(cfg.target_stock / stock))
    return int(clamp(round_half_up(raw), cfg.min_price, cfg.max_price))


def smooth_price(old: float, new: float, s: Smoothing = DEFAULT_SMOOTH) -> int:
    alpha = clamp(s.alpha, 0.0, 1.0)
    return round_half_up(old * (1 - alpha) + new * alpha)
