"""Raw stat decay, tier mapping, and fuzzy tier reveal."""
from __future__ import annotations

from tick_trade.stats.raw import DEFAULT_RAW_RULES, RawStatRules, apply_raw_stat_turn
from tick_trade.stats.reveal import (
    DEFAULT_REVEAL_POLICY,
    RevealPolicy,
    TierConfigError,
    apply_reveal_pass,
    is_reveal_due,
)
from tick_trade.stats.systems import StatsUpdateOptions, make_stats_system
from tick_trade.stats.tiers import (
    DEFAULT_FUZZ,
    DEFAULT_TIER_CONFIG,
    EmptyThresholdsError,
    FuzzOptions,
    TierConfig,
    TierThreshold,
    clamp_raw,
    fuzzy_tier_for,
    map_to_tier,
)

__all__ = [
    "DEFAULT_FUZZ",
    "DEFAULT_RAW_RULES",
    "DEFAULT_REVEAL_POLICY",
    "DEFAULT_TIER_CONFIG",
    "EmptyThresholdsError",
    "FuzzOptions",
    "RawStatRules",
    "RevealPolicy",
    "StatsUpdateOptions",
    "TierConfig",
    "TierConfigError",
    "TierThreshold",
    "apply_raw_stat_turn",
    "apply_reveal_pass",
    "clamp_raw",
    "fuzzy_tier_for",
    "is_reveal_due",
    "make_stats_system",
    "map_to_tier",
]
