"""AI trade selection: candidates, scoring, profiles, and cooldowns."""
from __future__ import annotations

from tick_trade.ai.candidates import CandidateOptions, generate_candidates
from tick_trade.ai.cooldown import (
    CooldownState,
    clear_expired_cooldowns,
    cooldown_key,
    mark_cooldown,
    should_skip_cooldown,
)
from tick_trade.ai.engine import NO_CANDIDATE, decide_ai_trade, quote_to_trade_request
from tick_trade.ai.market import (
    MarketSnapshot,
    MarketTownView,
    max_affordable,
    max_tradable_stock,
    snapshot_market,
)
from tick_trade.ai.policy import TradeChoice, choose_trade
from tick_trade.ai.profiles import DEFAULT_PROFILE_ID, DEFAULT_PROFILES, GREEDY, RANDOM
from tick_trade.ai.types import AiDecision, AiMode, AiProfile, AiTrace, AiWeights, Quote
from tick_trade.ai.valuation import quote_profit, score_all, score_quote

__all__ = [
    "AiDecision",
    "AiMode",
    "AiProfile",
    "AiTrace",
    "AiWeights",
    "CandidateOptions",
    "CooldownState",
    "DEFAULT_PROFILES",
    "DEFAULT_PROFILE_ID",
    "GREEDY",
    "MarketSnapshot",
    "MarketTownView",
    "NO_CANDIDATE",
    "Quote",
    "RANDOM",
    "TradeChoice",
    "choose_trade",
    "clear_expired_cooldowns",
    "cooldown_key",
    "decide_ai_trade",
    "generate_candidates",
    "mark_cooldown",
    "max_affordable",
    "max_tradable_stock",
    "quote_profit",
    "quote_to_trade_request",
    "score_all",
    "score_quote",
    "should_skip_cooldown",
    "snapshot_market",
]
