"""Turn phases, in the only order a turn runs them."""
from __future__ import annotations

from enum import Enum


class TurnPhase(Enum):
    START = "start"
    PLAYER_ACTION = "playerAction"
    AI_ACTIONS = "aiActions"
    UPDATE_STATS = "updateStats"
    END = "end"


PHASE_ORDER: tuple[TurnPhase, ...] = (
    TurnPhase.START,
    TurnPhase.PLAYER_ACTION,
    TurnPhase.AI_ACTIONS,
    TurnPhase.UPDATE_STATS,
    TurnPhase.END,
)
