"""Per-turn resource production."""
from __future__ import annotations

from tick_trade.production.config import (
    DEFAULT_PRODUCTION,
    ProductionConfig,
    ProductionConfigError,
    load_production_config,
)
from tick_trade.production.system import (
    apply_production_turn,
    make_production_system,
    production_delta,
    production_jitter,
)

__all__ = [
    "DEFAULT_PRODUCTION",
    "ProductionConfig",
    "ProductionConfigError",
    "apply_production_turn",
    "load_production_config",
    "make_production_system",
    "production_delta",
    "production_jitter",
]
