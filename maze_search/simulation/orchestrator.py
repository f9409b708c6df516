"""Round-by-round driver for one live game.

A round is the mover's move followed by each adversary's move in
increasing index order, then :meth:`GameState.finish_turn`. Unconfused
adversaries chase the mover with a :class:`PersonalizedBFS` task run on a
single-worker executor; confused adversaries wander to a random free
neighbour cell.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from concurrent import futures
from dataclasses import dataclass
from types import TracebackType

from maze_search.config.types import MoverMode, PruningMode
from maze_search.domain.actions import Action, Position
from maze_search.domain.state import ActionOutcome, GameState
from maze_search.search.bfs import BreadthFirstSearch, PersonalizedBFS
from maze_search.search.contracts import SearchAlgorithm
from maze_search.search.minimax import Minimax
from maze_search.search.reflex import Reflex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundRecord:
    """Everything that happened in one round, plus the state after it."""

    round_index: int
    outcomes: tuple[ActionOutcome, ...]
    score: float
    food_remaining: int
    won: bool
    lost: bool
    confused_adversaries: int = 0
    skipped_moves: int = 0


def build_mover(mode: MoverMode, depth: int, pruning: PruningMode) -> SearchAlgorithm:
    """Return the decision procedure for ``mode``."""
    if mode is MoverMode.MANUAL:
        return BreadthFirstSearch()
    if mode is MoverMode.REFLEX:
        return Reflex()
    if mode is MoverMode.MINIMAX:
        return Minimax(depth=depth, pruning=pruning)
    raise ValueError(f"unsupported mover mode: {mode!r}")


class TurnOrchestrator:
    """Advance ``state`` in place, one round per :meth:`play_round` call.

    The mover's algorithm is asked for a new plan only when the queue of
    planned actions is empty or the requested goal changes. An executor
    created here is shut down by :meth:`close`; a caller-supplied one is left
    alone.
    """

    def __init__(
        self,
        state: GameState,
        mover: SearchAlgorithm,
        rng: random.Random,
        executor: futures.Executor | None = None,
        result_timeout: float | None = None,
    ) -> None:
        self.state = state
        self.mover = mover
        self.rng = rng
        self.result_timeout = result_timeout
        self._owns_executor = executor is None
        self.executor = executor or futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="adversary"
        )
        self._planned: deque[Action] = deque()
        self._planned_goal: Position | None = None

    def __enter__(self) -> TurnOrchestrator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)

    @property
    def planned_actions(self) -> tuple[Action, ...]:
        return tuple(self._planned)

    def play_round(self, goal: Position | None = None) -> RoundRecord:
        """Play one full round; ``goal`` is the target cell for a BFS mover."""
        state = self.state
        outcomes: list[ActionOutcome] = []
        skipped = 0

        if not state.is_terminal():
            outcome = self._mover_turn(goal)
            if outcome is None:
                skipped += 1
            else:
                outcomes.append(outcome)

        for agent_id in state.adversary_ids():
            if state.is_terminal():
                break
            outcome = self._adversary_turn(agent_id)
            if outcome is None:
                skipped += 1
            else:
                outcomes.append(outcome)

        summary = state.finish_turn()
        record = RoundRecord(
            round_index=summary.round_index,
            outcomes=tuple(outcomes),
            score=state.score(),
            food_remaining=state.food_remaining(),
            won=state.won,
            lost=state.lost,
            confused_adversaries=sum(state.confused.values()),
            skipped_moves=skipped,
        )
        logger.debug(
            "round %d: score=%.1f food=%d won=%s lost=%s",
            record.round_index,
            record.score,
            record.food_remaining,
            record.won,
            record.lost,
        )
        return record

    def _mover_turn(self, goal: Position | None) -> ActionOutcome | None:
        state = self.state
        if goal != self._planned_goal:
            self._planned.clear()
            self._planned_goal = goal
        if not self._planned:
            plan = self.mover.solve(
                state, state.position(state.mover_id), goal, state.mover_id
            )
            self._planned.extend(plan)
        if not self._planned:
            return None
        return state.apply_action(state.mover_id, self._planned.popleft())

    def _adversary_turn(self, agent_id: int) -> ActionOutcome | None:
        state = self.state
        if agent_id in state.sitting_out:
            return None

        position = state.position(agent_id)
        if state.is_confused(agent_id):
            options = list(state.legal_actions_as_map_no_kins(position, agent_id).values())
            if not options:
                return None
            return state.apply_action(agent_id, self.rng.choice(options))

        task = PersonalizedBFS(
            state.clone(), position, state.position(state.mover_id), agent_id
        )
        future = self.executor.submit(task)
        try:
            action = future.result(timeout=self.result_timeout)
        except (futures.CancelledError, futures.TimeoutError):
            future.cancel()
            logger.warning("adversary %d produced no action this round", agent_id)
            return None
        if action is None:
            return None
        return state.apply_action(agent_id, action)
