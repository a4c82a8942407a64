"""TurnController - runs one turn through its fixed phase sequence."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from tick_trade.ai.cooldown import (
    CooldownState,
    clear_expired_cooldowns,
    cooldown_key,
    mark_cooldown,
    should_skip_cooldown,
)
from tick_trade.ai.engine import decide_ai_trade
from tick_trade.ai.profiles import DEFAULT_PROFILE_ID, DEFAULT_PROFILES
from tick_trade.ai.types import AiDecision, AiProfile, AiTrace
from tick_trade.state import advance_turn
from tick_trade.trade.price_model import PriceModel
from tick_trade.trade.service import perform_trade
from tick_trade.trade.types import TradeCooldownError, TradeLimits, TradeRequest
from tick_trade.turn.phase import PHASE_ORDER, TurnPhase
from tick_trade.turn.pipeline import UpdatePipeline
from tick_trade.turn.queue import PlayerActionQueue
from tick_trade.turn.types import NoAction, PhaseObserver, TradeAction, TurnPhaseError, TurnResult
from tick_trade.types import GameState, GoodConfig, GoodId, Town

logger = logging.getLogger(__name__)

NO_PROFILE = "no-profile"


class TurnController:
    """Owns the collaborators of a turn and the cooldowns between turns.

    ``run_turn`` never modifies the state it is given. If any phase raises,
    the error is re-raised as a single ``TurnPhaseError`` and neither the
    cooldowns nor any other controller state change.

    Cooldowns are committed per turn number. A turn starting from a state at
    turn N reads the cooldowns committed by turn N (or the latest turn before
    it), so replaying a state yields the same result as the first run.

    The queue and pipeline are shared with the caller: the caller enqueues
    actions and registers systems, the controller drains and runs them.
    """

    def __init__(
        self,
        queue: PlayerActionQueue,
        pipeline: UpdatePipeline,
        price_model: PriceModel,
        goods: Optional[Mapping[GoodId, GoodConfig]] = None,
        ai_profiles: Optional[Mapping[str, AiProfile]] = None,
        player_town_id: Optional[str] = None,
        on_phase: Optional[PhaseObserver] = None,
        default_profile_id: str = DEFAULT_PROFILE_ID,
        cooldown_interval: int = 1,
        enforce_player_cooldown: bool = True,
        limits: Optional[TradeLimits] = None,
    ) -> None:
        if cooldown_interval < 0:
            raise ValueError(f"cooldown_interval must be >= 0, got {cooldown_interval}")
        self._queue = queue
        self._pipeline = pipeline
        self._price_model = price_model
        self._goods = goods
        self._profiles = dict(ai_profiles) if ai_profiles is not None else dict(DEFAULT_PROFILES)
        self._player_town_id = player_town_id
        self._on_phase = on_phase
        self._default_profile_id = default_profile_id
        self._cooldown_interval = cooldown_interval
        self._enforce_player_cooldown = enforce_player_cooldown
        self._limits = limits
        self._committed: dict[int, CooldownState] = {}

    @property
    def queue(self) -> PlayerActionQueue:
        return self._queue

    @property
    def pipeline(self) -> UpdatePipeline:
        return self._pipeline

    @property
    def cooldowns(self) -> CooldownState:
        """A copy of the cooldowns committed by the latest successful turn."""
        if not self._committed:
            return {}
        return dict(self._committed[max(self._committed)])

    def _cooldowns_before(self, turn: int) -> CooldownState:
        earlier = [t for t in self._committed if t <= turn]
        if not earlier:
            return {}
        return dict(self._committed[max(earlier)])

    async def run_turn(self, state: GameState) -> TurnResult:
        """Run Start, PlayerAction, AiActions, UpdateStats and End in order.

        Raises ``TurnPhaseError`` naming the failed phase; the original
        exception is chained as its cause.
        """
        cooldowns = self._cooldowns_before(state.turn)
        completed: list[TurnPhase] = []
        current = state
        for phase in PHASE_ORDER:
            try:
                current, detail = self._run_phase(phase, current, cooldowns)
                if self._on_phase is not None:
                    self._on_phase(phase, detail)
            except Exception as exc:
                logger.debug("turn %d failed in %s: %s", state.turn + 1, phase.value, exc)
                raise TurnPhaseError(phase, exc, tuple(completed)) from exc
            completed.append(phase)
        self._committed[current.turn] = cooldowns
        return TurnResult(state=current, phase_log=tuple(completed))

    def _run_phase(
        self, phase: TurnPhase, state: GameState, cooldowns: CooldownState,
    ) -> tuple[GameState, Any]:
        if phase is TurnPhase.START:
            state = advance_turn(state)
            clear_expired_cooldowns(cooldowns, state.turn - 1)
            return state, {"turn": state.turn}
        if phase is TurnPhase.PLAYER_ACTION:
            return self._player_action(state, cooldowns)
        if phase is TurnPhase.AI_ACTIONS:
            return self._ai_actions(state, cooldowns)
        if phase is TurnPhase.UPDATE_STATS:
            return self._pipeline.run(state), {"systems": self._pipeline.system_count}
        if phase is TurnPhase.END:
            return state, {"turn": state.turn}
        raise ValueError(f"Unknown turn phase: {phase!r}")

    def _goods_for(self, state: GameState) -> Mapping[GoodId, GoodConfig]:
        return self._goods if self._goods is not None else state.goods

    def _player_action(
        self, state: GameState, cooldowns: CooldownState,
    ) -> tuple[GameState, Any]:
        action = self._queue.dequeue()
        if action is None:
            action = NoAction()
        if not isinstance(action, TradeAction):
            return state, {"action": action}

        request = action.request
        if self._enforce_player_cooldown:
            self._check_player_cooldown(request, cooldowns, state.turn)
        result = perform_trade(
            state, request, self._price_model, self._goods_for(state), self._limits,
        )
        actor = self._player_town_id if self._player_town_id is not None else request.from_town_id
        mark_cooldown(
            cooldowns, cooldown_key(actor, request.good_id), result.state.turn,
            self._cooldown_interval,
        )
        return result.state, {"action": action, "result": result}

    @staticmethod
    def _check_player_cooldown(
        request: TradeRequest, cooldowns: CooldownState, turn: int,
    ) -> None:
        for field_name, town_id in (
            ("from_town_id", request.from_town_id),
            ("to_town_id", request.to_town_id),
        ):
            key = cooldown_key(town_id, request.good_id)
            if should_skip_cooldown(cooldowns, key, turn):
                raise TradeCooldownError(
                    field_name,
                    f"'{request.good_id}' in town '{town_id}' is on cooldown "
                    f"until turn {cooldowns[key]}",
                )

    def _resolve_profile(self, town: Town) -> Optional[AiProfile]:
        profile = None
        if town.ai_profile_id is not None:
            profile = self._profiles.get(town.ai_profile_id)
        if profile is None:
            profile = self._profiles.get(self._default_profile_id)
        return profile

    def _ai_actions(
        self, state: GameState, cooldowns: CooldownState,
    ) -> tuple[GameState, Any]:
        goods = self._goods_for(state)
        decisions: list[AiDecision] = []
        # Trades replace town objects; only ids and profile ids are read from this list.
        ai_towns = [t for t in state.towns if t.id != self._player_town_id]
        for town in ai_towns:
            town_id = town.id
            profile = self._resolve_profile(town)
            if profile is None:
                logger.warning(
                    "AI town %s has no usable profile (default %r missing); skipping",
                    town_id, self._default_profile_id,
                )
                decisions.append(AiDecision(
                    reason=NO_PROFILE,
                    trace=AiTrace(ai_town_id=town_id, mode=None, candidate_count=0, reason=NO_PROFILE),
                    skipped=True,
                ))
                continue

            for attempt in range(profile.max_trades_per_turn):
                decision = decide_ai_trade(
                    state, town_id, profile, goods, state.rng_seed, cooldowns, attempt,
                )
                decisions.append(decision)
                if decision.skipped or decision.request is None:
                    break
                result = perform_trade(
                    state, decision.request, self._price_model, goods, self._limits,
                )
                state = result.state
                mark_cooldown(
                    cooldowns, cooldown_key(town_id, decision.request.good_id), state.turn,
                    self._cooldown_interval,
                )
        return state, {"decisions": decisions}
