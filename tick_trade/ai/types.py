"""AI profiles, trade quotes, and decision records."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tick_trade.trade.types import TradeRequest
from tick_trade.types import GoodId


class AiMode(Enum):
    RANDOM = "random"
    GREEDY = "greedy"


@dataclass(frozen=True)
class AiWeights:
    """Scoring weights for greedy mode. They need not sum to 1."""

    price_spread: float = 0.5
    prosperity: float = 0.25
    military: float = 0.25


@dataclass(frozen=True)
class AiProfile:
    """How an AI town chooses trades.

    Attributes:
        id: Profile identifier referenced by ``Town.ai_profile_id``.
        mode: ``GREEDY`` picks the best-scoring candidate, ``RANDOM`` a seeded pick.
        weights: Greedy scoring weights.
        max_trades_per_turn: Trades the town may execute in one turn.
        max_quantity_per_trade: Upper bound on units per trade.
    """

    id: str
    mode: AiMode
    weights: AiWeights = field(default_factory=AiWeights)
    max_trades_per_turn: int = 1
    max_quantity_per_trade: int = 5

    def __post_init__(self) -> None:
        if self.max_trades_per_turn < 0:
            raise ValueError(f"max_trades_per_turn must be >= 0, got {self.max_trades_per_turn}")
        if self.max_quantity_per_trade < 1:
            raise ValueError(
                f"max_quantity_per_trade must be >= 1, got {self.max_quantity_per_trade}"
            )


@dataclass(frozen=True)
class Quote:
    """A feasible trade: seller ships ``quantity`` to buyer at ``unit_sell_price``."""

    seller_id: str
    buyer_id: str
    good_id: GoodId
    unit_sell_price: int
    unit_buy_price: int
    quantity: int


@dataclass(frozen=True)
class AiTrace:
    ai_town_id: str
    mode: Optional[AiMode]
    candidate_count: int
    reason: str
    chosen: Optional[Quote] = None
    score: Optional[float] = None


@dataclass(frozen=True)
class AiDecision:
    """Outcome of one AI decision. ``request`` is None when skipped."""

    reason: str
    trace: AiTrace
    request: Optional[TradeRequest] = None
    skipped: bool = False
