"""Apply one turn of production to every town."""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Callable

from tick_trade.production.config import ProductionConfig
from tick_trade.rng import hash_string
from tick_trade.state import replace_towns
from tick_trade.types import GameState, GoodId


def production_jitter(seed: str, town_id: str, turn: int, good_id: GoodId, magnitude: int) -> int:
    """Deterministic offset in ``[-magnitude, magnitude]``."""
    h = hash_string(f"{seed}-{town_id}-{turn}-{good_id}")
    return abs(h) % (2 * magnitude + 1) - magnitude


def production_delta(state: GameState, cfg: ProductionConfig, town_id: str, good_id: GoodId) -> int:
    delta = math.floor(cfg.base[good_id] * cfg.multiplier(town_id, good_id))
    if cfg.variance_enabled:
        jitter = production_jitter(state.rng_seed, town_id, state.turn, good_id, cfg.variance_magnitude)
        delta = max(0, delta + jitter)
    return delta


def apply_production_turn(state: GameState, cfg: ProductionConfig, clamp_min: int = 0) -> GameState:
    """Add ``floor(base * town multiplier)`` (plus jitter) of each good.

    Resources are never left below *clamp_min*. Towns whose resources do
    not change are kept as the same object.
    """
    towns = []
    for town in state.towns:
        resources = dict(town.resources)
        for good_id in cfg.base:
            current = resources.get(good_id, 0)
            resources[good_id] = max(clamp_min, current + production_delta(state, cfg, town.id, good_id))
        towns.append(town if resources == town.resources else replace(town, resources=resources))
    return replace_towns(state, towns)


def make_production_system(cfg: ProductionConfig, clamp_min: int = 0) -> Callable[[GameState], GameState]:
    """Return an update-pipeline system that runs production."""

    def production_system(state: GameState) -> GameState:
        return apply_production_turn(state, cfg, clamp_min)

    return production_system
