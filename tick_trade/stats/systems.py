"""Update-pipeline system factory for stat decay and tier reveal."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from tick_trade.stats.raw import RawStatRules, apply_raw_stat_turn
from tick_trade.stats.reveal import RevealPolicy, apply_reveal_pass
from tick_trade.stats.tiers import DEFAULT_TIER_CONFIG, FuzzOptions, TierConfig
from tick_trade.types import GameState


@dataclass(frozen=True)
class StatsUpdateOptions:
    raw: RawStatRules = field(default_factory=RawStatRules)
    reveal_interval: int = 2
    fuzz: FuzzOptions = field(default_factory=FuzzOptions)
    tiers: TierConfig = DEFAULT_TIER_CONFIG


def make_stats_system(
    opts: Optional[StatsUpdateOptions] = None,
    seed_accessor: Optional[Callable[[GameState], str]] = None,
) -> Callable[[GameState], GameState]:
    """Return a system that decays raw stats, then runs the reveal pass.

    The reveal seed comes from ``seed_accessor(state)`` when given,
    otherwise from ``state.rng_seed``.
    """
    options = opts if opts is not None else StatsUpdateOptions()
    policy = RevealPolicy(interval=options.reveal_interval)

    def stats_system(state: GameState) -> GameState:
        decayed = apply_raw_stat_turn(state, options.raw)
        seed = seed_accessor(decayed) if seed_accessor is not None else decayed.rng_seed
        return apply_reveal_pass(decayed, seed, policy, options.tiers, options.fuzz)

    return stats_system
