"""Built-in AI profiles."""
from __future__ import annotations

from tick_trade.ai.types import AiMode, AiProfile, AiWeights

RANDOM = AiProfile(
    id="random",
    mode=AiMode.RANDOM,
    weights=AiWeights(price_spread=0.5, prosperity=0.25, military=0.25),
    max_trades_per_turn=1,
    max_quantity_per_trade=5,
)

# Favours price spread and prosperity over military.
GREEDY = AiProfile(
    id="greedy",
    mode=AiMode.GREEDY,
    weights=AiWeights(price_spread=0.8, prosperity=0.15, military=0.05),
    max_trades_per_turn=1,
    max_quantity_per_trade=5,
)

DEFAULT_PROFILE_ID = GREEDY.id

DEFAULT_PROFILES: dict[str, AiProfile] = {RANDOM.id: RANDOM, GREEDY.id: GREEDY}
