"""Turn sequencing: player queue, update pipeline, and the turn controller."""
from __future__ import annotations

from tick_trade.turn.controller import NO_PROFILE, TurnController
from tick_trade.turn.phase import PHASE_ORDER, TurnPhase
from tick_trade.turn.pipeline import UpdatePipeline, UpdateSystem
from tick_trade.turn.queue import PlayerActionQueue
from tick_trade.turn.types import (
    NoAction,
    PhaseObserver,
    PlayerAction,
    TradeAction,
    TurnPhaseError,
    TurnResult,
)

__all__ = [
    "NO_PROFILE",
    "NoAction",
    "PHASE_ORDER",
    "PhaseObserver",
    "PlayerAction",
    "PlayerActionQueue",
    "TradeAction",
    "TurnController",
    "TurnPhase",
    "TurnPhaseError",
    "TurnResult",
    "UpdatePipeline",
    "UpdateSystem",
]
