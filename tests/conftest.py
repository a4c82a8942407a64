"""Shared builders for towns and game states."""
from __future__ import annotations

from typing import Any, Callable, Optional

import pytest

from tick_trade.types import (
    GameState,
    GoodConfig,
    GoodEffects,
    MilitaryTier,
    ProsperityTier,
    Revealed,
    Town,
)

GOODS = {
    "fish": GoodConfig(id="fish", name="Fish", effects=GoodEffects(prosperity_delta=1)),
    "wood": GoodConfig(id="wood", name="Wood"),
    "ore": GoodConfig(id="ore", name="Ore", effects=GoodEffects(military_delta=2)),
}


def _town(
    town_id: str,
    resources: Optional[dict[str, int]] = None,
    prices: Optional[dict[str, int]] = None,
    treasury: int = 1000,
    prosperity_raw: int = 0,
    military_raw: int = 0,
    ai_profile_id: Optional[str] = None,
    revealed: Optional[Revealed] = None,
) -> Town:
    return Town(
        id=town_id,
        name=town_id.title(),
        resources=dict(resources) if resources is not None else {"fish": 50, "wood": 60, "ore": 30},
        prices=dict(prices) if prices is not None else {"fish": 10, "wood": 8, "ore": 20},
        military_raw=military_raw,
        prosperity_raw=prosperity_raw,
        treasury=treasury,
        revealed=revealed or Revealed(MilitaryTier.MILITIA, ProsperityTier.MODEST, 0),
        ai_profile_id=ai_profile_id,
    )


def _state(*towns: Town, turn: int = 0, seed: str = "seed-1", **kwargs: Any) -> GameState:
    return GameState(
        turn=turn,
        version=1,
        rng_seed=seed,
        towns=towns,
        goods=kwargs.get("goods", GOODS),
    )


@pytest.fixture
def goods() -> dict[str, GoodConfig]:
    return dict(GOODS)


@pytest.fixture
def make_town() -> Callable[..., Town]:
    return _town


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    return _state
