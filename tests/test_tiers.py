"""Tests for tier mapping and fuzzy tiers."""
from __future__ import annotations

import pytest

from tick_trade.stats.tiers import (
    DEFAULT_TIER_CONFIG,
    EmptyThresholdsError,
    FuzzOptions,
    TierThreshold,
    clamp_raw,
    fuzzy_tier_for,
    map_to_tier,
)
from tick_trade.types import MilitaryTier, ProsperityTier

MILITARY = DEFAULT_TIER_CONFIG.military
PROSPERITY = DEFAULT_TIER_CONFIG.prosperity


class TestMapToTier:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0, MilitaryTier.MILITIA),
            (19, MilitaryTier.MILITIA),
            (20, MilitaryTier.GARRISON),
            (50, MilitaryTier.FORMIDABLE),
            (89, MilitaryTier.FORMIDABLE),
            (90, MilitaryTier.HOST),
        ],
    )
    def test_boundaries(self, raw, expected) -> None:
        assert map_to_tier(raw, MILITARY) is expected

    def test_order_independent(self) -> None:
        shuffled = (PROSPERITY[2], PROSPERITY[0], PROSPERITY[3], PROSPERITY[1])
        for raw in (-10, 0, 24, 25, 59, 60, 94, 95, 1000):
            assert map_to_tier(raw, shuffled) is map_to_tier(raw, PROSPERITY)

    def test_below_every_threshold(self) -> None:
        thresholds = (
            TierThreshold(ProsperityTier.MODEST, 10),
            TierThreshold(ProsperityTier.OPULENT, 50),
        )
        assert map_to_tier(-5, thresholds) is ProsperityTier.MODEST
        assert map_to_tier(5, thresholds) is ProsperityTier.MODEST

    def test_very_large(self) -> None:
        assert map_to_tier(10**9, PROSPERITY) is ProsperityTier.OPULENT

    def test_empty_thresholds(self) -> None:
        with pytest.raises(EmptyThresholdsError, match="empty"):
            map_to_tier(5, ())


class TestFuzzyTier:
    def test_no_jitter_is_true_tier(self) -> None:
        opts = FuzzOptions(jitter_prob=0.0)
        for turn in range(30):
            for raw in (0, 30, 70, 99):
                assert fuzzy_tier_for(raw, PROSPERITY, "s", "t1", turn, opts) is map_to_tier(
                    raw, PROSPERITY
                )

    def test_full_jitter_moves_interior_tiers(self) -> None:
        opts = FuzzOptions(jitter_prob=1.0)
        order = [t.tier for t in MILITARY]
        for turn in range(50):
            for raw in (25, 60):
                true_idx = order.index(map_to_tier(raw, MILITARY))
                got = order.index(fuzzy_tier_for(raw, MILITARY, "s", "town", turn, opts))
                assert abs(got - true_idx) == 1

    def test_full_jitter_clamps_at_the_ends(self) -> None:
        opts = FuzzOptions(jitter_prob=1.0)
        order = [t.tier for t in MILITARY]
        for turn in range(50):
            lowest = order.index(fuzzy_tier_for(0, MILITARY, "s", "town", turn, opts))
            highest = order.index(fuzzy_tier_for(95, MILITARY, "s", "town", turn, opts))
            assert lowest in (0, 1)
            assert highest in (2, 3)

    def test_deterministic(self) -> None:
        a = fuzzy_tier_for(40, MILITARY, "seed", "town-a", 7)
        b = fuzzy_tier_for(40, MILITARY, "seed", "town-a", 7)
        assert a is b

    def test_empty_thresholds(self) -> None:
        with pytest.raises(EmptyThresholdsError):
            fuzzy_tier_for(5, [], "s", "t", 0)


class TestClampRaw:
    def test_clamp(self) -> None:
        assert clamp_raw(-3) == 0
        assert clamp_raw(150) == 100
        assert clamp_raw(42) == 42
        assert clamp_raw(12, 0, 10) == 10
