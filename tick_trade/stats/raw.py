"""Per-turn decay of raw prosperity and military."""
from __future__ import annotations

from dataclasses import dataclass, replace

from tick_trade.stats.tiers import clamp_raw
from tick_trade.state import replace_towns
from tick_trade.types import GameState


@dataclass(frozen=True)
class RawStatRules:
    """Decay applied each turn. Negative decay means growth.

    Attributes:
        prosperity_decay_per_turn: Subtracted from ``prosperity_raw``.
        military_decay_per_turn: Subtracted from ``military_raw``.
        max_raw: Upper clamp for both stats; the lower clamp is 0.
    """

    prosperity_decay_per_turn: int = 1
    military_decay_per_turn: int = 0
    max_raw: int = 100

    def __post_init__(self) -> None:
        if self.max_raw < 0:
            raise ValueError(f"max_raw must be >= 0, got {self.max_raw}")


DEFAULT_RAW_RULES = RawStatRules()


def apply_raw_stat_turn(
    state: GameState, rules: RawStatRules = DEFAULT_RAW_RULES,
) -> GameState:
    towns = []
    for town in state.towns:
        prosperity = clamp_raw(
            town.prosperity_raw - rules.prosperity_decay_per_turn, 0, rules.max_raw,
        )
        military = clamp_raw(
            town.military_raw - rules.military_decay_per_turn, 0, rules.max_raw,
        )
        if prosperity == town.prosperity_raw and military == town.military_raw:
            towns.append(town)
        else:
            towns.append(replace(
                town, prosperity_raw=prosperity, military_raw=military,
            ))
    return replace_towns(state, towns)
