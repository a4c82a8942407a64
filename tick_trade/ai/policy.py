"""Choose one quote from the candidate list."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from tick_trade.ai.types import AiMode, AiProfile, Quote
from tick_trade.ai.valuation import score_all
from tick_trade.rng import seeded_rand
from tick_trade.types import GoodConfig, GoodId


@dataclass(frozen=True)
class TradeChoice:
    quote: Quote
    score: Optional[float] = None


def choose_trade(
    profile: AiProfile,
    candidates: Sequence[Quote],
    goods: Mapping[GoodId, GoodConfig],
    seed: str,
    ai_town_id: str,
    turn: int = 0,
    attempt: int = 0,
) -> Optional[TradeChoice]:
    """Random mode draws ``seeded_rand(seed)("ai:{town}:{turn}:{attempt}:{n}")``.

    Greedy mode takes the highest score; the earliest candidate wins ties.
    """
    if not candidates:
        return None

    if profile.mode is AiMode.RANDOM:
        r = seeded_rand(seed)(f"ai:{ai_town_id}:{turn}:{attempt}:{len(candidates)}")
        return TradeChoice(quote=candidates[int(r * len(candidates))])

    scores = score_all(candidates, goods, profile)
    best = 0
    for i in range(1, len(scores)):
        if scores[i] > scores[best]:
            best = i
    return TradeChoice(quote=candidates[best], score=scores[best])
