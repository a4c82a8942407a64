"""Post-trade price models and their application to both trade parties."""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Protocol

from tick_trade.numeric import clamp
from tick_trade.state import town_index
from tick_trade.trade.types import TradeLimits, TradeSide, ValidatedTrade
from tick_trade.types import GameState, GoodId, Town


class PriceModel(Protocol):
    """Quotes prices and reacts to inventory changes.

    ``apply_trade`` receives the change in the town's stock: negative when
    goods left the town, positive when they arrived.
    """

    def quote(self, town: Town, good_id: GoodId) -> int: ...

    def apply_trade(self, town: Town, good_id: GoodId, quantity_delta: int) -> Town: ...


class LinearPriceModel:
    """Fixed-step repricing. Only the sign of the delta matters.

    Goods leaving a town raise its price by ``base_step``; goods arriving
    lower it. ``limits.min_price``/``limits.max_price`` override ``min``/``max``
    when given.
    """

    def __init__(
        self,
        base_step: int = 1,
        min: int = 0,
        max: int = 100,
        limits: Optional[TradeLimits] = None,
    ) -> None:
        self.base_step = base_step
        self.min = min
        self.max = max
        if limits is not None:
            if limits.min_price is not None:
                self.min = limits.min_price
            if limits.max_price is not None:
                self.max = limits.max_price

    def quote(self, town: Town, good_id: GoodId) -> int:
        return town.prices[good_id]

    def apply_trade(self, town: Town, good_id: GoodId, quantity_delta: int) -> Town:
        if quantity_delta == 0:
            return town
        step = self.base_step if quantity_delta < 0 else -self.base_step
        price = int(clamp(town.prices[good_id] + step, self.min, self.max))
        return replace(town, prices={**town.prices, good_id: price})


def apply_post_trade_pricing(
    state: GameState, vt: ValidatedTrade, model: PriceModel,
) -> GameState:
    """Reprice both parties of *vt* against the current *state*.

    Raises ``TownNotFoundError`` when either town id no longer resolves.
    """
    from_idx = town_index(state, vt.from_town.id)
    to_idx = town_index(state, vt.to_town.id)

    if vt.side is TradeSide.SELL:
        from_delta, to_delta = -vt.qty, vt.qty
    else:
        from_delta, to_delta = vt.qty, -vt.qty

    towns = list(state.towns)
    towns[from_idx] = model.apply_trade(towns[from_idx], vt.good_id, from_delta)
    towns[to_idx] = model.apply_trade(towns[to_idx], vt.good_id, to_delta)
    return replace(state, towns=tuple(towns))
