"""Greedy scoring of trade quotes."""
from __future__ import annotations

from typing import Mapping, Sequence

from tick_trade.ai.types import AiProfile, Quote
from tick_trade.types import GoodConfig, GoodId


def quote_profit(q: Quote) -> int:
    return (q.unit_buy_price - q.unit_sell_price) * q.quantity


def _effect_scale(goods: Mapping[GoodId, GoodConfig]) -> tuple[int, int]:
    prosperity = max((abs(g.effects.prosperity_delta) for g in goods.values()), default=0)
    military = max((abs(g.effects.military_delta) for g in goods.values()), default=0)
    return max(1, prosperity), max(1, military)


def score_quote(
    q: Quote,
    goods: Mapping[GoodId, GoodConfig],
    profile: AiProfile,
    best_profit: int,
) -> float:
    """Weighted sum of three normalized terms.

    - spread: this quote's profit over *best_profit*, in (0, 1].
    - prosperity / military: the good's effect on the destination town,
      divided by the largest absolute effect of that kind across *goods*.
    """
    spread = quote_profit(q) / best_profit if best_profit > 0 else 0.0
    effects = goods[q.good_id].effects
    p_scale, m_scale = _effect_scale(goods)
    w = profile.weights
    return (
        w.price_spread * spread
        + w.prosperity * effects.prosperity_delta / p_scale
        + w.military * effects.military_delta / m_scale
    )


def score_all(
    candidates: Sequence[Quote],
    goods: Mapping[GoodId, GoodConfig],
    profile: AiProfile,
) -> list[float]:
    best = max((quote_profit(q) for q in candidates), default=0)
    return [score_quote(q, goods, profile, best) for q in candidates]
