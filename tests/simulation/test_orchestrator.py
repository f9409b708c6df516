"""Tests for round orchestration of one live game."""

from __future__ import annotations

import logging
import random
from concurrent.futures import Executor, Future
from typing import Any

import pytest

from maze_search.config.types import MoverMode, PruningMode
from maze_search.domain.actions import Action
from maze_search.domain.maze import parse_layout
from maze_search.domain.state import GameState
from maze_search.search.bfs import BreadthFirstSearch
from maze_search.search.minimax import Minimax
from maze_search.search.reflex import Reflex
from maze_search.simulation.orchestrator import TurnOrchestrator, build_mover

HALLWAY = """\
%%%%%%%
%P...1%
%%%%%%%
"""

OPEN_HALL = """\
%%%%%%
%P...%
%%%%%%
"""

PAIR = """\
%%%%%
%P12%
%%%%%
"""

ROOM = """\
%%%%%
%P..%
%...%
%..1%
%%%%%
"""


class _StandStill:
    """Mover that never plans a move."""

    def solve(self, state: Any, start: Any, goal: Any, agent_id: Any) -> list[Any]:
        return []


class _FutureExecutor(Executor):
    """Executor returning a pre-resolved future instead of running the task."""

    def __init__(self, exception: BaseException | None = None, cancel: bool = False) -> None:
        self.exception = exception
        self.cancel = cancel
        self.submitted = 0
        self.tasks: list[Any] = []

    def submit(self, fn: Any, /, *args: Any, **kwargs: Any) -> Future:
        self.submitted += 1
        self.tasks.append(fn)
        future: Future = Future()
        if self.cancel:
            future.cancel()
        elif self.exception is not None:
            future.set_exception(self.exception)
        return future


def _state(text: str, n_adversaries: int) -> GameState:
    return GameState.create(parse_layout(text), n_adversaries=n_adversaries)


class TestMoverPlanning:
    def test_plan_is_consumed_one_action_per_round(self) -> None:
        state = _state(OPEN_HALL, 0)
        with TurnOrchestrator(state, BreadthFirstSearch(), random.Random(0)) as orchestrator:
            record = orchestrator.play_round(goal=(4, 1))
            assert record.round_index == 1
            assert [o.action for o in record.outcomes] == [Action.EAST]
            assert orchestrator.planned_actions == (Action.EAST, Action.EAST)
            orchestrator.play_round(goal=(4, 1))
            assert state.position(0) == (3, 1)

    def test_new_goal_replaces_plan(self) -> None:
        state = _state(OPEN_HALL, 0)
        with TurnOrchestrator(state, BreadthFirstSearch(), random.Random(0)) as orchestrator:
            orchestrator.play_round(goal=(4, 1))
            orchestrator.play_round(goal=(1, 1))
            assert state.position(0) == (1, 1)
            assert orchestrator.planned_actions == ()

    def test_empty_plan_skips_mover(self) -> None:
        state = _state(OPEN_HALL, 0)
        with TurnOrchestrator(state, _StandStill(), random.Random(0)) as orchestrator:
            record = orchestrator.play_round()
        assert record.outcomes == ()
        assert record.skipped_moves == 1
        assert state.position(0) == (1, 1)


class TestAdversaries:
    def test_unconfused_adversary_chases_mover(self) -> None:
        state = _state(HALLWAY, 1)
        with TurnOrchestrator(state, _StandStill(), random.Random(0)) as orchestrator:
            records = [orchestrator.play_round() for _ in range(4)]
        assert [r.lost for r in records] == [False, False, False, True]
        assert state.position(1) == (1, 1)
        assert records[-1].score == -500

    def test_moves_stop_once_terminal(self) -> None:
        state = _state(PAIR, 2)
        with TurnOrchestrator(state, _StandStill(), random.Random(0)) as orchestrator:
            record = orchestrator.play_round()
        assert record.lost
        assert [o.agent_id for o in record.outcomes] == [1]
        assert state.position(2) == (3, 1)

    def test_confused_adversary_wanders_with_rng(self) -> None:
        state = _state(ROOM, 1)
        state.confused[1] = True
        state.confusion_countdown = 5
        options = list(state.legal_actions_as_map_no_kins(state.position(1), 1).values())
        expected = random.Random(7).choice(options)
        executor = _FutureExecutor()
        with TurnOrchestrator(state, _StandStill(), random.Random(7), executor=executor) as orchestrator:
            record = orchestrator.play_round()
        assert [o.action for o in record.outcomes] == [expected]
        assert executor.submitted == 0

    def test_sitting_out_adversary_skips(self) -> None:
        state = _state(HALLWAY, 1)
        state.sitting_out.add(1)
        with TurnOrchestrator(state, _StandStill(), random.Random(0)) as orchestrator:
            record = orchestrator.play_round()
        assert state.position(1) == (5, 1)
        assert record.skipped_moves == 2
        assert state.sitting_out == set()

    def test_cancelled_task_skips_move(self, caplog: pytest.LogCaptureFixture) -> None:
        state = _state(HALLWAY, 1)
        executor = _FutureExecutor(cancel=True)
        with caplog.at_level(logging.WARNING, logger="maze_search.simulation.orchestrator"):
            with TurnOrchestrator(state, _StandStill(), random.Random(0), executor=executor) as orchestrator:
                record = orchestrator.play_round()
        assert state.position(1) == (5, 1)
        assert record.skipped_moves == 2
        assert "produced no action" in caplog.text

    def test_pursuit_task_reads_a_private_snapshot(self) -> None:
        state = _state(PAIR, 2)
        state.confused[1] = True
        state.confusion_countdown = 5
        executor = _FutureExecutor(cancel=True)
        with TurnOrchestrator(state, _StandStill(), random.Random(0), executor=executor) as orchestrator:
            orchestrator.play_round()
        assert len(executor.tasks) == 1
        task = executor.tasks[0]
        assert task.agent_id == 2
        assert task.state is not state
        assert task.state.positions is not state.positions
        state.positions[2] = (1, 1)
        assert task.state.position(2) == (3, 1)

    def test_worker_errors_propagate(self) -> None:
        state = _state(HALLWAY, 1)
        executor = _FutureExecutor(exception=RuntimeError("boom"))
        orchestrator = TurnOrchestrator(state, _StandStill(), random.Random(0), executor=executor)
        with pytest.raises(RuntimeError, match="boom"):
            orchestrator.play_round()


class TestLifecycle:
    def test_owned_executor_is_shut_down(self) -> None:
        state = _state(OPEN_HALL, 0)
        with TurnOrchestrator(state, _StandStill(), random.Random(0)) as orchestrator:
            pass
        with pytest.raises(RuntimeError):
            orchestrator.executor.submit(print)

    def test_round_record_reports_state(self) -> None:
        state = _state(OPEN_HALL, 0)
        with TurnOrchestrator(state, Reflex(), random.Random(0)) as orchestrator:
            record = orchestrator.play_round()
        assert record.food_remaining == 2
        assert record.score == 4
        assert not record.won


def test_build_mover() -> None:
    assert isinstance(build_mover(MoverMode.MANUAL, 2, PruningMode.ON), BreadthFirstSearch)
    assert isinstance(build_mover(MoverMode.REFLEX, 2, PruningMode.ON), Reflex)
    minimax = build_mover(MoverMode.MINIMAX, 3, PruningMode.OFF)
    assert isinstance(minimax, Minimax)
    assert minimax.depth == 3
    assert minimax.pruning is PruningMode.OFF
