"""Trade validation, execution, and post-trade price models."""
from __future__ import annotations

from tick_trade.trade.executor import execute_trade
from tick_trade.trade.price_model import LinearPriceModel, PriceModel, apply_post_trade_pricing
from tick_trade.trade.service import perform_trade
from tick_trade.trade.types import (
    DEFAULT_LIMITS,
    InsufficientStockError,
    InsufficientTreasuryError,
    InvalidPriceError,
    InvalidQuantityError,
    PriceMismatchError,
    SameTownError,
    TradeCooldownError,
    TradeExecutionError,
    TradeGoodError,
    TradeLimits,
    TradeRequest,
    TradeResult,
    TradeSide,
    TradeValidationError,
    UnknownTownError,
    ValidatedTrade,
    limit_price,
    limit_resource,
    limit_treasury,
)
from tick_trade.trade.validator import validate_trade

__all__ = [
    "DEFAULT_LIMITS",
    "InsufficientStockError",
    "InsufficientTreasuryError",
    "InvalidPriceError",
    "InvalidQuantityError",
    "LinearPriceModel",
    "PriceMismatchError",
    "PriceModel",
    "SameTownError",
    "TradeCooldownError",
    "TradeExecutionError",
    "TradeGoodError",
    "TradeLimits",
    "TradeRequest",
    "TradeResult",
    "TradeSide",
    "TradeValidationError",
    "UnknownTownError",
    "ValidatedTrade",
    "apply_post_trade_pricing",
    "execute_trade",
    "limit_price",
    "limit_resource",
    "limit_treasury",
    "perform_trade",
    "validate_trade",
]
