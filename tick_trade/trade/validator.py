"""Trade request validation."""
from __future__ import annotations

from tick_trade.trade.types import (
    InsufficientStockError,
    InsufficientTreasuryError,
    InvalidPriceError,
    InvalidQuantityError,
    PriceMismatchError,
    SameTownError,
    TradeGoodError,
    TradeRequest,
    TradeSide,
    TradeValidationError,
    UnknownTownError,
    ValidatedTrade,
)
from tick_trade.types import GameState, Town


def _find(state: GameState, town_id: str, path: str) -> tuple[int, Town]:
    for i, town in enumerate(state.towns):
        if town.id == town_id:
            return i, town
    raise UnknownTownError(path, f"Town with ID '{town_id}' not found")


def validate_trade(state: GameState, req: TradeRequest) -> ValidatedTrade:
    """Check *req* against *state* and resolve its towns.

    Raises a ``TradeValidationError`` subclass whose ``path`` points at the
    offending field, e.g. ``"towns[1].treasury"``.
    """
    from_idx, from_town = _find(state, req.from_town_id, "from_town_id")
    to_idx, to_town = _find(state, req.to_town_id, "to_town_id")
    if from_idx == to_idx:
        raise SameTownError(
            "to_town_id", f"Town '{req.to_town_id}' cannot trade with itself",
        )

    for idx, town in ((from_idx, from_town), (to_idx, to_town)):
        if req.good_id not in town.resources:
            raise TradeGoodError(
                f"towns[{idx}].resources.{req.good_id}",
                f"Good '{req.good_id}' not available in town '{town.name}'",
            )

    if isinstance(req.quantity, bool) or not isinstance(req.quantity, int) or req.quantity <= 0:
        raise InvalidQuantityError(
            "quantity", f"Quantity must be a positive integer, got {req.quantity!r}",
        )
    if req.price_per_unit < 0:
        raise InvalidPriceError(
            "price_per_unit", f"Price per unit must be nonnegative, got {req.price_per_unit}",
        )

    if req.side is TradeSide.SELL:
        supplier_idx, supplier = from_idx, from_town
        payer_idx, payer = to_idx, to_town
    elif req.side is TradeSide.BUY:
        supplier_idx, supplier = to_idx, to_town
        payer_idx, payer = from_idx, from_town
    else:
        raise TradeValidationError("side", f"Invalid trade side: {req.side!r}")

    available = supplier.resources[req.good_id]
    if available < req.quantity:
        raise InsufficientStockError(
            f"towns[{supplier_idx}].resources.{req.good_id}",
            f"Insufficient stock: town '{supplier.name}' has {available} "
            f"{req.good_id}, but {req.quantity} requested",
        )

    total = req.quantity * req.price_per_unit
    if payer.treasury < total:
        raise InsufficientTreasuryError(
            f"towns[{payer_idx}].treasury",
            f"Insufficient treasury: town '{payer.name}' has {payer.treasury}, "
            f"but {total} needed",
        )

    quoted = to_town.prices[req.good_id]
    if req.price_per_unit != quoted:
        raise PriceMismatchError(
            "price_per_unit",
            f"Price mismatch: requested {req.price_per_unit} but town "
            f"'{to_town.name}' quotes {quoted} for {req.good_id}",
        )

    return ValidatedTrade(
        from_town=from_town,
        to_town=to_town,
        good_id=req.good_id,
        qty=req.quantity,
        unit_price=req.price_per_unit,
        side=req.side,
    )
