"""Reveal cadence and the pass that refreshes towns' displayed tiers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Sequence

from tick_trade.stats.tiers import (
    DEFAULT_FUZZ,
    DEFAULT_TIER_CONFIG,
    FuzzOptions,
    TierConfig,
    TierThreshold,
    fuzzy_tier_for,
)
from tick_trade.state import replace_towns
from tick_trade.types import GameState, MilitaryTier, ProsperityTier

logger = logging.getLogger(__name__)


class TierConfigError(ValueError):
    """Raised when a tier configuration names a tier outside its enum."""


@dataclass(frozen=True)
class RevealPolicy:
    """How often revealed tiers refresh.

    Attributes:
        interval: Turns between reveals. 0 means reveal once and never again.
    """

    interval: int = 2

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError(f"interval must be >= 0, got {self.interval}")


DEFAULT_REVEAL_POLICY = RevealPolicy()


def is_reveal_due(current_turn: int, last_updated_turn: int, policy: RevealPolicy) -> bool:
    if last_updated_turn == -1:
        return True
    if policy.interval == 0:
        return False
    since = current_turn - last_updated_turn
    return since > 0 and since % policy.interval == 0


def _check_tiers(thresholds: Sequence[TierThreshold], allowed: type, label: str) -> None:
    for threshold in thresholds:
        if not isinstance(threshold.tier, allowed):
            raise TierConfigError(
                f"Invalid {label} tier in configuration: {threshold.tier!r}"
            )


def apply_reveal_pass(
    state: GameState,
    seed: str,
    policy: RevealPolicy = DEFAULT_REVEAL_POLICY,
    tiers: TierConfig = DEFAULT_TIER_CONFIG,
    fuzz: FuzzOptions = DEFAULT_FUZZ,
) -> GameState:
    """Recompute fuzzy tiers for every town whose reveal is due.

    Towns that are not due are kept as the same object.
    """
    _check_tiers(tiers.military, MilitaryTier, "military")
    _check_tiers(tiers.prosperity, ProsperityTier, "prosperity")

    towns = []
    for town in state.towns:
        if not is_reveal_due(state.turn, town.revealed.last_updated_turn, policy):
            towns.append(town)
            continue

        military = fuzzy_tier_for(
            town.military_raw, tiers.military, seed, town.id, state.turn, fuzz,
        )
        prosperity = fuzzy_tier_for(
            town.prosperity_raw, tiers.prosperity, seed, town.id, state.turn, fuzz,
        )
        if not isinstance(military, MilitaryTier):
            raise TierConfigError(f"Revealed military tier {military!r} is not allowed")
        if not isinstance(prosperity, ProsperityTier):
            raise TierConfigError(f"Revealed prosperity tier {prosperity!r} is not allowed")

        logger.debug(
            "reveal town=%s turn=%d military=%s prosperity=%s",
            town.id, state.turn, military.value, prosperity.value,
        )
        towns.append(replace(
            town,
            revealed=replace(
                town.revealed,
                military_tier=military,
                prosperity_tier=prosperity,
                last_updated_turn=state.turn,
            ),
        ))
    return replace_towns(state, towns)
