"""Apply a validated trade: move goods and money, then good effects."""
from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Optional

from tick_trade.state import add_military, add_prosperity, town_index
from tick_trade.trade.types import (
    DEFAULT_LIMITS,
    TradeExecutionError,
    TradeLimits,
    TradeResult,
    TradeSide,
    ValidatedTrade,
    limit_resource,
    limit_treasury,
)
from tick_trade.types import GameState, GoodConfig, GoodId, Town, TownNotFoundError


def _transfer(town: Town, good_id: GoodId, qty: int, money: int, limits: TradeLimits) -> Town:
    return replace(
        town,
        resources={
            **town.resources,
            good_id: limit_resource(town.resources[good_id] + qty, limits),
        },
        treasury=limit_treasury(town.treasury + money, limits),
    )


def _delta(town: Town) -> dict[str, object]:
    return {
        "resources": dict(town.resources),
        "treasury": town.treasury,
        "prosperity_raw": town.prosperity_raw,
        "military_raw": town.military_raw,
    }


def execute_trade(
    state: GameState,
    vt: ValidatedTrade,
    goods: Mapping[GoodId, GoodConfig],
    limits: Optional[TradeLimits] = None,
) -> TradeResult:
    """Return the state after *vt* settles.

    Both towns gain the good's prosperity effect; only the town receiving
    the goods gains its military effect.
    """
    limits = limits if limits is not None else DEFAULT_LIMITS
    try:
        from_idx = town_index(state, vt.from_town.id)
        to_idx = town_index(state, vt.to_town.id)
    except TownNotFoundError as exc:
        raise TradeExecutionError(
            f"Town '{exc.town_id}' not found in state during trade execution"
        ) from exc
    good = goods.get(vt.good_id)
    if good is None:
        raise TradeExecutionError(f"No configuration for good '{vt.good_id}'")

    total = vt.qty * vt.unit_price
    from_town = state.towns[from_idx]
    to_town = state.towns[to_idx]

    if vt.side is TradeSide.SELL:
        from_town = _transfer(from_town, vt.good_id, -vt.qty, total, limits)
        to_town = _transfer(to_town, vt.good_id, vt.qty, -total, limits)
    else:
        from_town = _transfer(from_town, vt.good_id, vt.qty, -total, limits)
        to_town = _transfer(to_town, vt.good_id, -vt.qty, total, limits)

    from_town = add_prosperity(from_town, good.effects.prosperity_delta)
    to_town = add_prosperity(to_town, good.effects.prosperity_delta)
    if vt.side is TradeSide.BUY:
        from_town = add_military(from_town, good.effects.military_delta)
    else:
        to_town = add_military(to_town, good.effects.military_delta)

    towns = list(state.towns)
    towns[from_idx] = from_town
    towns[to_idx] = to_town
    return TradeResult(
        state=replace(state, towns=tuple(towns)),
        unit_price_applied=vt.unit_price,
        deltas={"from": _delta(from_town), "to": _delta(to_town)},
    )
