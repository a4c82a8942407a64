"""Price curve configuration and table loading."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tick_trade.types import GoodId


class PriceCurveConfigError(ValueError):
    """Raised when a price curve is malformed. ``path`` names the bad field."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def _non_negative(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) \
            or not math.isfinite(value) or value < 0:
        raise PriceCurveConfigError(path, f"Expected finite non-negative number, got {value!r}")
    return value


@dataclass(frozen=True)
class PriceCurveConfig:
    """Supply/demand curve for one good.

    Attributes:
        base_price: Price when stock equals ``target_stock``.
        target_stock: Desired inventory per town.
        elasticity: Exponent on ``target / stock``; typical range 0.5-2.
        min_price: Clamp floor.
        max_price: Clamp ceiling.
    """

    base_price: float
    target_stock: float
    elasticity: float
    min_price: float = 1
    max_price: float = 9999

    def __post_init__(self) -> None:
        _non_negative(self.base_price, "base_price")
        _non_negative(self.target_stock, "target_stock")
        _non_negative(self.elasticity, "elasticity")
        _non_negative(self.min_price, "min_price")
        _non_negative(self.max_price, "max_price")
        if self.min_price >= self.max_price:
            raise PriceCurveConfigError(
                "min_price",
                f"min_price ({self.min_price}) must be less than max_price ({self.max_price})",
            )
        if not self.min_price <= self.base_price <= self.max_price:
            raise PriceCurveConfigError(
                "base_price",
                f"base_price ({self.base_price}) must be between min_price "
                f"({self.min_price}) and max_price ({self.max_price})",
            )


PriceCurveTable = dict[GoodId, PriceCurveConfig]

DEFAULT_PRICE_CURVES: dict[GoodId, dict[str, float]] = {
    "fish": {"base_price": 10, "target_stock": 50, "elasticity": 1.0},
    "wood": {"base_price": 8, "target_stock": 60, "elasticity": 0.8},
    "ore": {"base_price": 20, "target_stock": 30, "elasticity": 1.2},
}

_FIELDS = ("base_price", "target_stock", "elasticity", "min_price", "max_price")


def load_price_curves(
    data: Mapping[GoodId, Mapping[str, Any]] = DEFAULT_PRICE_CURVES,
    goods: Iterable[GoodId] = ("fish", "wood", "ore"),
) -> PriceCurveTable:
    """Build a validated curve table from plain mappings.

    Every good in *goods* must have an entry. Field errors are re-raised
    with a ``"<good>.<field>"`` path.
    """
    table: PriceCurveTable = {}
    for good_id in goods:
        entry = data.get(good_id)
        if not isinstance(entry, Mapping):
            raise PriceCurveConfigError(
                good_id, f"Missing or invalid configuration for good: {good_id}",
            )
        unknown = set(entry) - set(_FIELDS)
        if unknown:
            raise PriceCurveConfigError(
                f"{good_id}.{sorted(unknown)[0]}", "Unknown price curve field",
            )
        for required in _FIELDS[:3]:
            if required not in entry:
                raise PriceCurveConfigError(f"{good_id}.{required}", "Missing required field")
        try:
            table[good_id] = PriceCurveConfig(**entry)
        except PriceCurveConfigError as exc:
            raise PriceCurveConfigError(f"{good_id}.{exc.path}", str(exc)) from exc
    return table
