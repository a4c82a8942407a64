"""Single entry point for a complete trade: validate, execute, reprice."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Mapping, Optional

from tick_trade.trade.executor import execute_trade
from tick_trade.trade.price_model import PriceModel, apply_post_trade_pricing
from tick_trade.trade.types import TradeLimits, TradeRequest, TradeResult
from tick_trade.trade.validator import validate_trade
from tick_trade.types import GameState, GoodConfig, GoodId

logger = logging.getLogger(__name__)


def perform_trade(
    state: GameState,
    request: TradeRequest,
    price_model: PriceModel,
    goods: Mapping[GoodId, GoodConfig],
    limits: Optional[TradeLimits] = None,
) -> TradeResult:
    """Run *request* against *state*. *state* itself is never modified.

    Raises ``TradeValidationError`` subclasses for rejected requests.
    """
    vt = validate_trade(state, request)
    executed = execute_trade(state, vt, goods, limits)
    priced = apply_post_trade_pricing(executed.state, vt, price_model)
    logger.debug(
        "trade %s %s->%s %dx%s @%d",
        vt.side.value, vt.from_town.id, vt.to_town.id, vt.qty, vt.good_id, vt.unit_price,
    )
    return replace(executed, state=priced)
