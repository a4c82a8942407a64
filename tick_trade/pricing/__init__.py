"""Price curves, smoothing, drift, and curve-based post-trade repricing."""
from __future__ import annotations

from tick_trade.pricing.config import (
    DEFAULT_PRICE_CURVES,
    PriceCurveConfig,
    PriceCurveConfigError,
    PriceCurveTable,
    load_price_curves,
)
from tick_trade.pricing.curves import DEFAULT_SMOOTH, Smoothing, TownPriceState, next_price, smooth_price
from tick_trade.pricing.drift import DEFAULT_DRIFT, DriftOptions, apply_passive_drift, make_drift_system
from tick_trade.pricing.multipliers import (
    DEFAULT_PROSPERITY_MULT,
    ProsperityMultipliers,
    apply_prosperity_and_scale,
)
from tick_trade.pricing.post_trade import CurvePriceModel, read_town_price_state, write_town_price
from tick_trade.pricing.telemetry import PriceChangeCause, PriceChangeTrace, PriceChangeTracer

__all__ = [
    "CurvePriceModel",
    "DEFAULT_DRIFT",
    "DEFAULT_PRICE_CURVES",
    "DEFAULT_PROSPERITY_MULT",
    "DEFAULT_SMOOTH",
    "DriftOptions",
    "PriceChangeCause",
    "PriceChangeTrace",
    "PriceChangeTracer",
    "PriceCurveConfig",
    "PriceCurveConfigError",
    "PriceCurveTable",
    "ProsperityMultipliers",
    "Smoothing",
    "TownPriceState",
    "apply_passive_drift",
    "apply_prosperity_and_scale",
    "load_price_curves",
    "make_drift_system",
    "next_price",
    "read_town_price_state",
    "smooth_price",
    "write_town_price",
]
