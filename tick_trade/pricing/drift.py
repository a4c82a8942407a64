"""Passive per-turn price drift toward the curve equilibrium."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from tick_trade.numeric import round_half_up
from tick_trade.pricing.config import PriceCurveTable
from tick_trade.pricing.curves import DEFAULT_SMOOTH, Smoothing, TownPriceState, next_price, smooth_price
from tick_trade.pricing.multipliers import (
    DEFAULT_PROSPERITY_MULT,
    ProsperityMultipliers,
    apply_prosperity_and_scale,
)
from tick_trade.pricing.telemetry import PriceChangeCause, PriceChangeTrace, PriceChangeTracer
from tick_trade.state import replace_towns
from tick_trade.types import GameState


@dataclass(frozen=True)
class DriftOptions:
    """Drift settings.

    Attributes:
        rate: Fraction in [0, 1] of the remaining gap closed after smoothing.
        smoothing: EMA applied before the drift step.
        multipliers: Prosperity scaling applied last.
    """

    rate: float = 0.15
    smoothing: Smoothing = DEFAULT_SMOOTH
    multipliers: ProsperityMultipliers = DEFAULT_PROSPERITY_MULT

    def __post_init__(self) -> None:
        if not 0 <= self.rate <= 1:
            raise ValueError(f"Drift rate must be between 0 and 1, got {self.rate}")


DEFAULT_DRIFT = DriftOptions()


def apply_passive_drift(
    state: GameState,
    tables: PriceCurveTable,
    opts: DriftOptions = DEFAULT_DRIFT,
    on_trace: Optional[PriceChangeTracer] = None,
) -> GameState:
    """Move every town's prices toward the curve price for its current stock.

    Goods without a curve keep their price. Towns whose prices all stay put
    are kept as the same object.
    """
    towns = []
    for town in state.towns:
        prices = dict(town.prices)
        for good_id in state.goods:
            cfg = tables.get(good_id)
            if cfg is None:
                continue
            current = town.prices.get(good_id, 0)
            stock = town.resources.get(good_id, 0)

            target = next_price(TownPriceState(stock=stock, price=current), cfg)
            smoothed = smooth_price(current, target, opts.smoothing)
            drifted = smoothed + round_half_up(opts.rate * (target - smoothed))
            tier = town.revealed.prosperity_tier
            final = apply_prosperity_and_scale(
                drifted, tier, opts.multipliers, 1.0, cfg.min_price, cfg.max_price,
            )
            prices[good_id] = final

            if on_trace is not None:
                on_trace(PriceChangeTrace(
                    town_id=town.id,
                    good_id=good_id,
                    old_price=current,
                    curve_price=target,
                    smoothed=drifted,
                    final=final,
                    stock=stock,
                    target=cfg.target_stock,
                    elasticity=cfg.elasticity,
                    prosperity_tier=tier,
                    prosperity_factor=opts.multipliers.factor(tier),
                    cause=PriceChangeCause.DRIFT,
                ))
        towns.append(town if prices == town.prices else replace(town, prices=prices))
    return replace_towns(state, towns)


def make_drift_system(
    tables: PriceCurveTable,
    opts: DriftOptions = DEFAULT_DRIFT,
    on_trace: Optional[PriceChangeTracer] = None,
) -> Callable[[GameState], GameState]:
    """Return an update-pipeline system that applies passive drift."""

    def drift_system(state: GameState) -> GameState:
        return apply_passive_drift(state, tables, opts, on_trace)

    return drift_system
