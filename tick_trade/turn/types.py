"""Player actions, turn results, and the phase failure error."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from tick_trade.trade.types import TradeRequest
from tick_trade.turn.phase import TurnPhase
from tick_trade.types import GameState


@dataclass(frozen=True)
class NoAction:
    """The player passes this turn."""


@dataclass(frozen=True)
class TradeAction:
    request: TradeRequest


PlayerAction = Union[NoAction, TradeAction]

PhaseObserver = Callable[[TurnPhase, Any], None]


@dataclass(frozen=True)
class TurnResult:
    state: GameState
    phase_log: tuple[TurnPhase, ...] = field(default_factory=tuple)


class TurnPhaseError(RuntimeError):
    """A turn phase raised. The turn produced no new state.

    Attributes:
        phase: The phase that failed.
        cause: The original exception, also chained as ``__cause__``.
        completed: Phases that finished before the failure.
    """

    def __init__(
        self,
        phase: TurnPhase,
        cause: BaseException,
        completed: tuple[TurnPhase, ...] = (),
    ) -> None:
        self.phase = phase
        self.cause = cause
        self.completed = completed
        super().__init__(f"Turn failed in phase {phase.value!r}: {cause}")
