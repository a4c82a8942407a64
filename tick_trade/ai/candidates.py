"""Enumerate feasible trades from a market snapshot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tick_trade.ai.cooldown import CooldownState, cooldown_key, should_skip_cooldown
from tick_trade.ai.market import MarketSnapshot, max_affordable, max_tradable_stock
from tick_trade.ai.types import Quote
from tick_trade.types import GoodId


@dataclass(frozen=True)
class CandidateOptions:
    max_quantity_per_trade: int
    involving: Optional[str] = None


def generate_candidates(
    market: MarketSnapshot,
    goods: Iterable[GoodId],
    opts: CandidateOptions,
    cooldowns: Optional[CooldownState] = None,
    turn: int = 0,
) -> list[Quote]:
    """Every profitable (seller, buyer, good) with a positive feasible quantity.

    A pair is profitable when the seller's price is strictly below the
    buyer's. Quantity is capped by the options, the seller's stock, and what
    the buyer can afford at the seller's price. With *cooldowns*, a quote is
    dropped when either town's key for the good is still cooling down. With
    ``opts.involving``, only quotes touching that town are kept.

    Enumeration order is seller, then buyer, then good, and is stable.
    """
    good_ids = list(goods)
    candidates: list[Quote] = []
    for seller in market.towns:
        for buyer in market.towns:
            if seller.id == buyer.id:
                continue
            if opts.involving is not None and opts.involving not in (seller.id, buyer.id):
                continue
            for good_id in good_ids:
                sell_price = seller.prices[good_id]
                buy_price = buyer.prices[good_id]
                if sell_price >= buy_price:
                    continue
                qty = max_tradable_stock(opts.max_quantity_per_trade, seller.stock[good_id])
                qty = max_affordable(qty, sell_price, buyer.treasury)
                if qty <= 0:
                    continue
                if cooldowns and (
                    should_skip_cooldown(cooldowns, cooldown_key(seller.id, good_id), turn)
                    or should_skip_cooldown(cooldowns, cooldown_key(buyer.id, good_id), turn)
                ):
                    continue
                candidates.append(Quote(
                    seller_id=seller.id,
                    buyer_id=buyer.id,
                    good_id=good_id,
                    unit_sell_price=sell_price,
                    unit_buy_price=buy_price,
                    quantity=qty,
                ))
    return candidates
