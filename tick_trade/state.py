"""Copy-on-write accessors for towns and game state.

Every helper returns a new object and leaves its input untouched. Unchanged
substructures are shared by reference, so callers may use ``is`` to detect
whether anything actually changed.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from tick_trade.types import GameState, Town, TownNotFoundError, UnknownGoodError


def town_index(state: GameState, town_id: str) -> int:
    for i, town in enumerate(state.towns):
        if town.id == town_id:
            return i
    raise TownNotFoundError(town_id)


def get_town(state: GameState, town_id: str) -> Town:
    return state.towns[town_index(state, town_id)]


def replace_town(state: GameState, town: Town) -> GameState:
    """Swap in *town* by id. Returns *state* itself if nothing changed."""
    idx = town_index(state, town.id)
    if state.towns[idx] is town:
        return state
    towns = state.towns[:idx] + (town,) + state.towns[idx + 1:]
    return replace(state, towns=towns)


def replace_towns(state: GameState, towns: Iterable[Town]) -> GameState:
    """Replace the town tuple, reusing *state* when every town is identical."""
    new_towns = tuple(towns)
    if len(new_towns) == len(state.towns) and all(
        a is b for a, b in zip(new_towns, state.towns)
    ):
        return state
    return replace(state, towns=new_towns)


def _check_good(town: Town, good_id: str) -> None:
    if good_id not in town.resources or good_id not in town.prices:
        raise UnknownGoodError(good_id)


def _check_int(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer, got: {value!r}")


def set_resource(town: Town, good_id: str, amount: int) -> Town:
    _check_good(town, good_id)
    _check_int(amount, "Amount")
    return replace(town, resources={**town.resources, good_id: max(0, amount)})


def inc_resource(town: Town, good_id: str, delta: int) -> Town:
    """Add *delta* units of a good, flooring the result at 0."""
    _check_good(town, good_id)
    _check_int(delta, "Delta")
    amount = max(0, town.resources[good_id] + delta)
    return replace(town, resources={**town.resources, good_id: amount})


def set_price(town: Town, good_id: str, price: int) -> Town:
    _check_good(town, good_id)
    _check_int(price, "Price")
    return replace(town, prices={**town.prices, good_id: max(0, price)})


def inc_price(town: Town, good_id: str, delta: int) -> Town:
    _check_good(town, good_id)
    _check_int(delta, "Delta")
    price = max(0, town.prices[good_id] + delta)
    return replace(town, prices={**town.prices, good_id: price})


def add_prosperity(town: Town, delta: int) -> Town:
    """Shift raw prosperity. Revealed tiers are left alone."""
    _check_int(delta, "Delta")
    return replace(town, prosperity_raw=town.prosperity_raw + delta)


def add_military(town: Town, delta: int) -> Town:
    _check_int(delta, "Delta")
    return replace(town, military_raw=town.military_raw + delta)


def advance_turn(state: GameState) -> GameState:
    return replace(state, turn=state.turn + 1)
