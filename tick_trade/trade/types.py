"""Trade requests, validated trades, results, limits, and errors."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from tick_trade.numeric import clamp
from tick_trade.types import GameState, GoodId, Town


class TradeSide(Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class TradeRequest:
    """A proposed trade between two towns.

    ``sell``: ``from_town_id`` ships goods to ``to_town_id`` and is paid.
    ``buy``: ``from_town_id`` receives goods from ``to_town_id`` and pays.
    ``price_per_unit`` must match the quote of ``to_town_id``.
    """

    from_town_id: str
    to_town_id: str
    good_id: GoodId
    quantity: int
    side: TradeSide
    price_per_unit: int


@dataclass(frozen=True)
class ValidatedTrade:
    from_town: Town
    to_town: Town
    good_id: GoodId
    qty: int
    unit_price: int
    side: TradeSide


@dataclass(frozen=True)
class TradeResult:
    state: GameState
    unit_price_applied: int
    deltas: dict[str, dict[str, Any]] = field(default_factory=dict)


class TradeValidationError(ValueError):
    """Raised when a trade request is rejected. ``path`` names the bad field."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class UnknownTownError(TradeValidationError):
    pass


class TradeGoodError(TradeValidationError):
    pass


class InvalidQuantityError(TradeValidationError):
    pass


class InvalidPriceError(TradeValidationError):
    pass


class InsufficientStockError(TradeValidationError):
    pass


class InsufficientTreasuryError(TradeValidationError):
    pass


class PriceMismatchError(TradeValidationError):
    pass


class SameTownError(TradeValidationError):
    """Raised when a request names the same town on both sides."""


class TradeCooldownError(TradeValidationError):
    """Raised when a player trade touches a (town, good) pair on cooldown."""


class TradeExecutionError(RuntimeError):
    """Raised when a validated trade cannot be applied to the current state."""


@dataclass(frozen=True)
class TradeLimits:
    """Hard caps that keep towns out of runaway states.

    Attributes:
        max_resource: Most units of one good a town may hold (None = unbounded).
        max_treasury: Most currency a town may hold (None = unbounded).
        min_price: Price floor.
        max_price: Price ceiling (None = unbounded).
    """

    max_resource: Optional[int] = 1_000_000
    max_treasury: Optional[int] = 1_000_000_000
    min_price: Optional[int] = 1
    max_price: Optional[int] = 9999


DEFAULT_LIMITS = TradeLimits()


def limit_resource(value: int, limits: TradeLimits) -> int:
    if limits.max_resource is None:
        return max(0, value)
    return int(clamp(value, 0, limits.max_resource))


def limit_treasury(value: int, limits: TradeLimits) -> int:
    if limits.max_treasury is None:
        return max(0, value)
    return int(clamp(value, 0, limits.max_treasury))


def limit_price(value: int, limits: TradeLimits) -> int:
    lo = limits.min_price if limits.min_price is not None else 0
    hi = limits.max_price if limits.max_price is not None else value
    return int(clamp(value, lo, max(lo, hi)))
