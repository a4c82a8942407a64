"""Raw stat -> tier step functions, with optional seeded jitter."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from tick_trade.numeric import clamp
from tick_trade.rng import seeded_rand
from tick_trade.types import MilitaryTier, ProsperityTier

Tier = Union[MilitaryTier, ProsperityTier]


class EmptyThresholdsError(ValueError):
    """Raised when a tier lookup is given no thresholds."""


@dataclass(frozen=True)
class TierThreshold:
    tier: Tier
    min: int


@dataclass(frozen=True)
class TierConfig:
    military: tuple[TierThreshold, ...]
    prosperity: tuple[TierThreshold, ...]


DEFAULT_TIER_CONFIG = TierConfig(
    military=(
        TierThreshold(MilitaryTier.MILITIA, 0),
        TierThreshold(MilitaryTier.GARRISON, 20),
        TierThreshold(MilitaryTier.FORMIDABLE, 50),
        TierThreshold(MilitaryTier.HOST, 90),
    ),
    prosperity=(
        TierThreshold(ProsperityTier.STRUGGLING, 0),
        TierThreshold(ProsperityTier.MODEST, 25),
        TierThreshold(ProsperityTier.PROSPEROUS, 60),
        TierThreshold(ProsperityTier.OPULENT, 95),
    ),
)


@dataclass(frozen=True)
class FuzzOptions:
    """Jitter settings for revealed tiers.

    Attributes:
        jitter_prob: Chance in [0, 1] of showing a neighbouring tier.
    """

    jitter_prob: float = 0.2


DEFAULT_FUZZ = FuzzOptions()


def clamp_raw(x: int, lo: int = 0, hi: int = 100) -> int:
    return int(clamp(x, lo, hi))


def tier_label(tier: Tier) -> str:
    return tier.value if isinstance(tier, Enum) else str(tier)


def _sorted(thresholds: Sequence[TierThreshold]) -> list[TierThreshold]:
    if not thresholds:
        raise EmptyThresholdsError("Thresholds cannot be empty")
    return sorted(thresholds, key=lambda t: t.min)


def _tier_index(raw: float, ordered: list[TierThreshold]) -> int:
    for i in range(len(ordered) - 1, -1, -1):
        if raw >= ordered[i].min:
            return i
    return 0


def map_to_tier(raw: float, thresholds: Sequence[TierThreshold]) -> Tier:
    """Tier of the highest threshold whose ``min`` is <= *raw*.

    Input order does not matter. Values below every threshold map to the
    lowest tier.
    """
    ordered = _sorted(thresholds)
    return ordered[_tier_index(raw, ordered)].tier


def fuzzy_tier_for(
    raw: float,
    thresholds: Sequence[TierThreshold],
    seed: str,
    town_id: str,
    turn: int,
    opts: FuzzOptions = DEFAULT_FUZZ,
) -> Tier:
    """Like ``map_to_tier`` but shifted one step with probability ``jitter_prob``.

    The draw is keyed by ``"{town_id}:{turn}:{lowest tier label}"`` so the
    same town on the same turn always sees the same tier. The shift direction
    is down when the draw falls in the lower half of the jitter band, up
    otherwise, and the result is clamped to the ends of the tier list.
    """
    ordered = _sorted(thresholds)
    idx = _tier_index(raw, ordered)

    r = seeded_rand(seed)(f"{town_id}:{turn}:{tier_label(ordered[0].tier)}")
    if r < opts.jitter_prob:
        step = -1 if r < opts.jitter_prob / 2 else 1
        idx = max(0, min(len(ordered) - 1, idx + step))
    return ordered[idx].tier
