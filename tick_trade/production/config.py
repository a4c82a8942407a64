"""Per-turn production rates and their validation."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from tick_trade.types import GoodId

MAX_TOWN_MULTIPLIER = 10
VARIANCE_MAGNITUDES = (1, 2)


class ProductionConfigError(ValueError):
    """Raised when a production config is malformed. ``path`` names the bad field."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"Production config error at {path}: {message}")


def _check_number(value: Any, path: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProductionConfigError(path, f"Expected number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ProductionConfigError(path, f"Expected finite number, got {value}")


def _check_non_negative_int(value: Any, path: str) -> None:
    _check_number(value, path)
    if isinstance(value, float) and not value.is_integer():
        raise ProductionConfigError(path, f"Expected integer, got {value}")
    if value < 0:
        raise ProductionConfigError(path, f"Expected non-negative integer, got {value}")


def _check_multiplier(value: Any, path: str) -> None:
    _check_number(value, path)
    if value <= 0:
        raise ProductionConfigError(path, f"Expected positive number, got {value}")
    if value > MAX_TOWN_MULTIPLIER:
        raise ProductionConfigError(path, f"Expected number <= {MAX_TOWN_MULTIPLIER}, got {value}")


@dataclass(frozen=True)
class ProductionConfig:
    """How much of each good every town produces per turn.

    Attributes:
        base: Units of each good produced per town per turn.
        town_multipliers: Optional ``{town_id: {good_id: factor}}``; factors
            are in (0, 10] and default to 1.
        variance_enabled: Add deterministic jitter to each town's output.
        variance_magnitude: Jitter range, 1 or 2 units either way.
    """

    base: dict[GoodId, int]
    town_multipliers: dict[str, dict[GoodId, float]] = field(default_factory=dict)
    variance_enabled: bool = False
    variance_magnitude: int = 1

    def __post_init__(self) -> None:
        for good_id, rate in self.base.items():
            _check_non_negative_int(rate, f"base.{good_id}")
        for town_id, factors in self.town_multipliers.items():
            if not isinstance(factors, Mapping):
                raise ProductionConfigError(f"townMultipliers.{town_id}", "Expected mapping")
            for good_id, factor in factors.items():
                path = f"townMultipliers.{town_id}.{good_id}"
                if good_id not in self.base:
                    raise ProductionConfigError(path, f"Unknown good: {good_id}")
                _check_multiplier(factor, path)
        if not isinstance(self.variance_enabled, bool):
            raise ProductionConfigError("variance.enabled", "Expected boolean")
        if self.variance_magnitude not in VARIANCE_MAGNITUDES:
            raise ProductionConfigError("variance.magnitude", "Expected 1 or 2")

    def multiplier(self, town_id: str, good_id: GoodId) -> float:
        return self.town_multipliers.get(town_id, {}).get(good_id, 1)


DEFAULT_PRODUCTION = {"base": {"fish": 3, "wood": 2, "ore": 1}}


def load_production_config(
    data: Mapping[str, Any] = DEFAULT_PRODUCTION,
    goods: Iterable[GoodId] = ("fish", "wood", "ore"),
) -> ProductionConfig:
    """Build a validated config from a plain mapping.

    Accepts ``base``, ``townMultipliers`` and ``variance`` keys. Every good
    in *goods* must have a base rate.
    """
    if not isinstance(data, Mapping):
        raise ProductionConfigError("root", "Expected mapping")
    base = data.get("base")
    if not isinstance(base, Mapping):
        raise ProductionConfigError("base", "Expected mapping")
    for good_id in goods:
        if good_id not in base:
            raise ProductionConfigError(f"base.{good_id}", "Missing required good")

    town_multipliers = data.get("townMultipliers", {})
    if not isinstance(town_multipliers, Mapping):
        raise ProductionConfigError("townMultipliers", "Expected mapping")

    variance = data.get("variance", {})
    if not isinstance(variance, Mapping):
        raise ProductionConfigError("variance", "Expected mapping")

    return ProductionConfig(
        base=dict(base),
        town_multipliers={town: dict(f) if isinstance(f, Mapping) else f
                          for town, f in town_multipliers.items()},
        variance_enabled=variance.get("enabled", False),
        variance_magnitude=variance.get("magnitude", 1),
    )
