"""Per-town AI decision: snapshot, enumerate, choose, and build a request."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from tick_trade.ai.candidates import CandidateOptions, generate_candidates
from tick_trade.ai.cooldown import CooldownState
from tick_trade.ai.market import snapshot_market
from tick_trade.ai.policy import choose_trade
from tick_trade.ai.types import AiDecision, AiProfile, AiTrace, Quote
from tick_trade.trade.types import TradeRequest, TradeSide
from tick_trade.types import GameState, GoodConfig, GoodId

logger = logging.getLogger(__name__)

NO_CANDIDATE = "no-candidate"


def quote_to_trade_request(q: Quote) -> TradeRequest:
    """The buyer buys from the seller at the seller's quoted price."""
    return TradeRequest(
        from_town_id=q.buyer_id,
        to_town_id=q.seller_id,
        good_id=q.good_id,
        quantity=q.quantity,
        side=TradeSide.BUY,
        price_per_unit=q.unit_sell_price,
    )


def decide_ai_trade(
    state: GameState,
    town_id: str,
    profile: AiProfile,
    goods: Mapping[GoodId, GoodConfig],
    seed: Optional[str] = None,
    cooldowns: Optional[CooldownState] = None,
    attempt: int = 0,
) -> AiDecision:
    """Pick at most one trade involving *town_id* under *profile*.

    *seed* defaults to ``state.rng_seed``. Candidates whose (town, good)
    key is cooling down at ``state.turn`` are never considered. Returns a
    skipped decision with reason ``"no-candidate"`` when nothing is feasible.
    """
    if seed is None:
        seed = state.rng_seed
    market = snapshot_market(state)
    candidates = generate_candidates(
        market,
        goods.keys(),
        CandidateOptions(max_quantity_per_trade=profile.max_quantity_per_trade, involving=town_id),
        cooldowns=cooldowns,
        turn=state.turn,
    )
    choice = choose_trade(profile, candidates, goods, seed, town_id, state.turn, attempt)
    if choice is None:
        logger.debug("ai %s: no candidate on turn %d", town_id, state.turn)
        trace = AiTrace(ai_town_id=town_id, mode=profile.mode, candidate_count=0, reason=NO_CANDIDATE)
        return AiDecision(reason=NO_CANDIDATE, trace=trace, skipped=True)

    reason = profile.mode.value
    trace = AiTrace(
        ai_town_id=town_id,
        mode=profile.mode,
        candidate_count=len(candidates),
        reason=reason,
        chosen=choice.quote,
        score=choice.score,
    )
    logger.debug(
        "ai %s: %s %s->%s %dx%s of %d candidates",
        town_id, reason, choice.quote.seller_id, choice.quote.buyer_id,
        choice.quote.quantity, choice.quote.good_id, len(candidates),
    )
    return AiDecision(reason=reason, trace=trace, request=quote_to_trade_request(choice.quote))
