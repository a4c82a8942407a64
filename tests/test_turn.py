"""Tests for the action queue, update pipeline, and turn controller."""
from __future__ import annotations

import asyncio
import copy
import logging
from dataclasses import replace

import pytest

from tick_trade.ai import RANDOM
from tick_trade.state import get_town, replace_town, set_price
from tick_trade.trade import (
    InvalidQuantityError,
    LinearPriceModel,
    TradeCooldownError,
    TradeRequest,
    TradeSide,
)
from tick_trade.turn import (
    NO_PROFILE,
    PHASE_ORDER,
    NoAction,
    PlayerActionQueue,
    TradeAction,
    TurnController,
    TurnPhase,
    TurnPhaseError,
    UpdatePipeline,
)

EMPTY = {"fish": 0, "wood": 0, "ore": 0}


def run(controller: TurnController, state):
    return asyncio.run(controller.run_turn(state))


def make_controller(**kwargs) -> TurnController:
    kwargs.setdefault("player_town_id", "p")
    return TurnController(
        kwargs.pop("queue", PlayerActionQueue()),
        kwargs.pop("pipeline", UpdatePipeline()),
        kwargs.pop("price_model", LinearPriceModel()),
        **kwargs,
    )


@pytest.fixture
def world(make_town, make_state):
    """Player p holds nothing; AI town a sells fish to AI town b."""
    return make_state(
        make_town("a", prices={"fish": 10, "wood": 8, "ore": 20}, ai_profile_id="greedy"),
        make_town("b", prices={"fish": 12, "wood": 8, "ore": 20}),
        make_town("p", resources=EMPTY, treasury=0),
    )


class TestPlayerActionQueue:
    def test_fifo(self) -> None:
        queue = PlayerActionQueue()
        first, second = NoAction(), TradeAction(TradeRequest("a", "b", "fish", 1, TradeSide.SELL, 1))
        queue.enqueue(first)
        queue.enqueue(second)
        assert len(queue) == 2
        assert queue.dequeue() is first
        assert queue.dequeue() is second
        assert queue.dequeue() is None

    def test_clear(self) -> None:
        queue = PlayerActionQueue()
        queue.enqueue(NoAction())
        queue.clear()
        assert len(queue) == 0


class TestUpdatePipeline:
    def test_empty_returns_input(self, make_town, make_state) -> None:
        state = make_state(make_town("a"))
        pipeline = UpdatePipeline()
        assert pipeline.system_count == 0
        assert pipeline.run(state) is state

    def test_runs_in_registration_order(self, make_town, make_state) -> None:
        calls = []
        pipeline = UpdatePipeline()
        pipeline.register(lambda s: calls.append("first") or replace(s, version=2))
        pipeline.register(lambda s: calls.append(("second", s.version)) or s)
        result = pipeline.run(make_state(make_town("a")))
        assert calls == ["first", ("second", 2)]
        assert result.version == 2
        assert pipeline.system_count == 2


class TestTurnPhases:
    def test_phase_log(self, world) -> None:
        seen = []
        controller = make_controller(on_phase=lambda phase, detail: seen.append(phase))
        result = run(controller, world)
        assert result.phase_log == PHASE_ORDER
        assert tuple(seen) == PHASE_ORDER

    def test_phase_log_every_turn(self, world) -> None:
        controller = make_controller()
        state = world
        for _ in range(3):
            result = run(controller, state)
            assert list(result.phase_log) == [
                TurnPhase.START,
                TurnPhase.PLAYER_ACTION,
                TurnPhase.AI_ACTIONS,
                TurnPhase.UPDATE_STATS,
                TurnPhase.END,
            ]
            state = result.state

    def test_empty_turn_changes_only_turn(self, make_town, make_state) -> None:
        state = make_state(make_town("p"), turn=7)
        result = run(make_controller(), state)
        assert result.state.turn == 8
        assert result.state.towns is state.towns
        assert result.state.goods is state.goods
        assert result.state.rng_seed is state.rng_seed
        assert result.state.version == state.version
        assert state.turn == 7

    def test_observer_details(self, world) -> None:
        details = {}
        controller = make_controller(on_phase=lambda phase, detail: details.setdefault(phase, detail))
        run(controller, world)
        assert details[TurnPhase.START] == {"turn": 1}
        assert details[TurnPhase.END] == {"turn": 1}
        assert isinstance(details[TurnPhase.PLAYER_ACTION]["action"], NoAction)
        assert len(details[TurnPhase.AI_ACTIONS]["decisions"]) == 2
        assert details[TurnPhase.UPDATE_STATS] == {"systems": 0}

    def test_observer_does_not_change_result(self, world) -> None:
        quiet = run(make_controller(), world)
        watched = run(make_controller(on_phase=lambda phase, detail: None), world)
        assert quiet == watched


class TestTurnOutcome:
    def test_ai_trade_then_pipeline(self, world) -> None:
        pipeline = UpdatePipeline()
        pipeline.register(lambda s: replace(s, version=s.version + 1))
        result = run(make_controller(pipeline=pipeline), world)
        a = get_town(result.state, "a")
        b = get_town(result.state, "b")
        assert (a.resources["fish"], a.treasury, a.prices["fish"]) == (45, 1050, 11)
        assert (b.resources["fish"], b.treasury, b.prices["fish"]) == (55, 950, 11)
        assert result.state.version == 2

    def test_deterministic(self, world) -> None:
        twin = copy.deepcopy(world)
        first = run(make_controller(), world)
        second = run(make_controller(), twin)
        assert first == second

    def test_same_controller_replays_identically(self, world) -> None:
        controller = make_controller()
        first = run(controller, world)
        again = run(controller, copy.deepcopy(world))
        assert first == again
        assert get_town(again.state, "a").resources["fish"] == 45
        assert controller.cooldowns == {"a:fish": 2}

    def test_input_is_not_mutated(self, world) -> None:
        before = copy.deepcopy(world)
        run(make_controller(), world)
        assert world == before

    def test_player_trade(self, make_town, make_state) -> None:
        state = make_state(
            make_town("p", resources=EMPTY, treasury=100),
            make_town("a"),
        )
        queue = PlayerActionQueue()
        queue.enqueue(TradeAction(TradeRequest("p", "a", "fish", 3, TradeSide.BUY, 10)))
        controller = make_controller(queue=queue)
        result = run(controller, state)
        p = get_town(result.state, "p")
        a = get_town(result.state, "a")
        assert (p.resources["fish"], p.treasury, p.prices["fish"]) == (3, 70, 9)
        assert (a.resources["fish"], a.prices["fish"]) == (47, 11)
        # a could now buy the fish back from p, but p:fish is cooling down
        assert controller.cooldowns == {"p:fish": 2}
        assert len(queue) == 0


class TestTurnErrors:
    def test_player_error_is_wrapped(self, world) -> None:
        before = copy.deepcopy(world)
        queue = PlayerActionQueue()
        queue.enqueue(TradeAction(TradeRequest("b", "a", "fish", 0, TradeSide.BUY, 10)))
        with pytest.raises(TurnPhaseError) as exc:
            run(make_controller(queue=queue), world)
        err = exc.value
        assert err.phase is TurnPhase.PLAYER_ACTION
        assert err.completed == (TurnPhase.START,)
        assert isinstance(err.cause, InvalidQuantityError)
        assert err.__cause__ is err.cause
        assert world == before

    def test_pipeline_error_commits_nothing(self, world) -> None:
        def broken(state):
            raise RuntimeError("stats exploded")

        pipeline = UpdatePipeline()
        pipeline.register(broken)
        controller = make_controller(pipeline=pipeline)
        with pytest.raises(TurnPhaseError, match="stats exploded") as exc:
            run(controller, world)
        assert exc.value.phase is TurnPhase.UPDATE_STATS
        assert exc.value.completed == (TurnPhase.START, TurnPhase.PLAYER_ACTION, TurnPhase.AI_ACTIONS)
        assert controller.cooldowns == {}

    def test_observer_error_fails_phase(self, world) -> None:
        def observer(phase, detail):
            if phase is TurnPhase.END:
                raise ValueError("observer broke")

        with pytest.raises(TurnPhaseError) as exc:
            run(make_controller(on_phase=observer), world)
        assert exc.value.phase is TurnPhase.END
        assert len(exc.value.completed) == 4

    def test_retry_after_failure(self, world) -> None:
        queue = PlayerActionQueue()
        queue.enqueue(TradeAction(TradeRequest("b", "a", "fish", 0, TradeSide.BUY, 10)))
        controller = make_controller(queue=queue)
        with pytest.raises(TurnPhaseError):
            run(controller, world)
        assert run(controller, world).state.turn == 1


class TestAiProfiles:
    def test_unknown_profile_falls_back_to_default(self, world) -> None:
        a = replace(get_town(world, "a"), ai_profile_id="no-such-profile")
        details = {}
        controller = make_controller(on_phase=lambda phase, detail: details.setdefault(phase, detail))
        result = run(controller, replace_town(world, a))
        decisions = details[TurnPhase.AI_ACTIONS]["decisions"]
        assert decisions[0].reason == "greedy"
        assert get_town(result.state, "b").resources["fish"] == 55

    def test_custom_default_profile(self, world) -> None:
        details = {}
        controller = make_controller(
            ai_profiles={"random": RANDOM},
            default_profile_id="random",
            on_phase=lambda phase, detail: details.setdefault(phase, detail),
        )
        run(controller, world)
        assert details[TurnPhase.AI_ACTIONS]["decisions"][0].reason == "random"

    def test_missing_default_skips_with_warning(self, world, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="tick_trade.turn.controller")
        details = {}
        controller = make_controller(
            ai_profiles={},
            on_phase=lambda phase, detail: details.setdefault(phase, detail),
        )
        result = run(controller, world)
        decisions = details[TurnPhase.AI_ACTIONS]["decisions"]
        assert [d.reason for d in decisions] == [NO_PROFILE, NO_PROFILE]
        assert all(d.skipped for d in decisions)
        assert result.state.towns == world.towns
        assert "no usable profile" in caplog.text


class TestCooldownAcrossTurns:
    def test_mirror_trade_is_blocked_next_turn(self, world) -> None:
        ai_details = []

        def observer(phase, detail):
            if phase is TurnPhase.AI_ACTIONS:
                ai_details.append(detail)

        controller = make_controller(on_phase=observer)
        first = run(controller, world)
        assert controller.cooldowns == {"a:fish": 2}

        # Make the reverse trade (b sells fish to a) profitable.
        b = set_price(get_town(first.state, "b"), "fish", 9)
        second = run(controller, replace_town(first.state, b))
        decisions = ai_details[-1]["decisions"]
        assert [d.reason for d in decisions] == ["no-candidate", "no-candidate"]
        assert get_town(second.state, "b").resources["fish"] == 55

        third = run(controller, second.state)
        assert get_town(third.state, "b").resources["fish"] == 50
        assert get_town(third.state, "a").resources["fish"] == 50

    def test_player_trade_against_cooled_town(self, world) -> None:
        queue = PlayerActionQueue()
        controller = make_controller(queue=queue)
        first = run(controller, world)
        queue.enqueue(TradeAction(TradeRequest("p", "a", "fish", 1, TradeSide.BUY, 11)))
        with pytest.raises(TurnPhaseError) as exc:
            run(controller, first.state)
        assert isinstance(exc.value.cause, TradeCooldownError)
        assert exc.value.cause.path == "to_town_id"
        assert controller.cooldowns == {"a:fish": 2}

    def test_player_cooldown_can_be_disabled(self, world) -> None:
        queue = PlayerActionQueue()
        controller = make_controller(queue=queue, enforce_player_cooldown=False)
        first = run(controller, world)
        p = replace(get_town(first.state, "p"), treasury=100)
        queue.enqueue(TradeAction(TradeRequest("p", "a", "fish", 1, TradeSide.BUY, 11)))
        result = run(controller, replace_town(first.state, p))
        assert get_town(result.state, "p").resources["fish"] == 1

    def test_replaying_an_earlier_turn_reads_its_cooldowns(self, world) -> None:
        controller = make_controller()
        first = run(controller, world)
        b = set_price(get_town(first.state, "b"), "fish", 9)
        turn_one = replace_town(first.state, b)
        second = run(controller, turn_one)
        third = run(controller, second.state)
        assert get_town(third.state, "a").resources["fish"] == 50

        replay = run(controller, turn_one)
        assert replay == second
        assert get_town(replay.state, "b").resources["fish"] == 55
