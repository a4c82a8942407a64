"""Curve-based post-trade repricing.

``CurvePriceModel`` satisfies the same ``quote``/``apply_trade`` protocol as
``tick_trade.trade.LinearPriceModel``, so either can be handed to
``perform_trade`` or the turn controller. It ignores the size of the
quantity delta and reprices from the town's post-trade stock instead.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from tick_trade.pricing.config import PriceCurveTable
from tick_trade.pricing.curves import DEFAULT_SMOOTH, Smoothing, TownPriceState, next_price, smooth_price
from tick_trade.pricing.multipliers import (
    DEFAULT_PROSPERITY_MULT,
    ProsperityMultipliers,
    apply_prosperity_and_scale,
)
from tick_trade.pricing.telemetry import PriceChangeCause, PriceChangeTrace, PriceChangeTracer
from tick_trade.types import GoodId, Town


def read_town_price_state(town: Town, good_id: GoodId) -> TownPriceState:
    return TownPriceState(stock=town.resources[good_id], price=town.prices[good_id])


def write_town_price(town: Town, good_id: GoodId, price: float) -> Town:
    """Copy of *town* with *price* truncated to an int and floored at 1."""
    return replace(town, prices={**town.prices, good_id: max(1, int(price))})


class CurvePriceModel:
    """Reprices a town from the curve, smoothing, and prosperity multiplier."""

    def __init__(
        self,
        tables: PriceCurveTable,
        smoothing: Smoothing = DEFAULT_SMOOTH,
        multipliers: ProsperityMultipliers = DEFAULT_PROSPERITY_MULT,
        on_trace: Optional[PriceChangeTracer] = None,
    ) -> None:
        self._tables = tables
        self._smoothing = smoothing
        self._multipliers = multipliers
        self._on_trace = on_trace

    def quote(self, town: Town, good_id: GoodId) -> int:
        return town.prices[good_id]

    def apply_trade(self, town: Town, good_id: GoodId, quantity_delta: int) -> Town:
        if quantity_delta == 0:
            return town
        cfg = self._tables.get(good_id)
        if cfg is None:
            raise KeyError(f"No price curve configuration found for good: {good_id}")

        current = read_town_price_state(town, good_id)
        curve = next_price(current, cfg)
        smoothed = smooth_price(current.price, curve, self._smoothing)
        tier = town.revealed.prosperity_tier
        final = apply_prosperity_and_scale(
            smoothed, tier, self._multipliers, 1.0, cfg.min_price, cfg.max_price,
        )

        if self._on_trace is not None:
            self._on_trace(PriceChangeTrace(
                town_id=town.id,
                good_id=good_id,
                old_price=current.price,
                curve_price=curve,
                smoothed=smoothed,
                final=final,
                stock=current.stock,
                target=cfg.target_stock,
                elasticity=cfg.elasticity,
                prosperity_tier=tier,
                prosperity_factor=self._multipliers.factor(tier),
                cause=PriceChangeCause.POST_TRADE,
            ))
        return write_town_price(town, good_id, final)
