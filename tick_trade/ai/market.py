"""Read-only market views and quantity caps used by the AI."""
from __future__ import annotations

from dataclasses import dataclass

from tick_trade.types import GameState, GoodId


@dataclass(frozen=True)
class MarketTownView:
    id: str
    prices: dict[GoodId, int]
    stock: dict[GoodId, int]
    treasury: int
    prosperity_raw: int
    military_raw: int


@dataclass(frozen=True)
class MarketSnapshot:
    towns: tuple[MarketTownView, ...]


def snapshot_market(state: GameState) -> MarketSnapshot:
    return MarketSnapshot(towns=tuple(
        MarketTownView(
            id=town.id,
            prices=dict(town.prices),
            stock=dict(town.resources),
            treasury=town.treasury,
            prosperity_raw=town.prosperity_raw,
            military_raw=town.military_raw,
        )
        for town in state.towns
    ))


def max_affordable(qty: int, unit_price: int, treasury: int) -> int:
    """Largest quantity up to *qty* that *treasury* can pay for.

    Free goods (price 0) leave *qty* unchanged.
    """
    if unit_price < 0:
        return 0
    if unit_price == 0:
        return qty
    if treasury <= 0:
        return 0
    return min(qty, treasury // unit_price)


def max_tradable_stock(qty: int, stock: int) -> int:
    if stock <= 0 or qty <= 0:
        return 0
    return min(qty, stock)
