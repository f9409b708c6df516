"""Depth-limited minimax with optional alpha-beta pruning.

Agents move round-robin starting with the mover and continuing through
increasing indices modulo the agent count. One ply is a full round, so
``depth`` counts rounds rather than single moves. The mover maximises and
every other agent minimises ``score() + heuristic_evaluation()`` at the
leaves.

Pruning uses strict comparisons: a maximising node stops as soon as its
running value exceeds ``beta`` and a minimising node as soon as it drops
below ``alpha``. Ties never cut, so the pruned run chooses the same action
as the unpruned one while expanding a subset of its nodes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from maze_search.config.types import PruningMode
from maze_search.domain.actions import Position
from maze_search.search.contracts import ExtendedState


@dataclass(frozen=True)
class MinimaxResult:
    """Decision and bookkeeping of one minimax search.

    ``root_values`` lists ``(action, value)`` for every root action in
    evaluation order. ``expanded`` holds the states whose successors were
    generated plus the leaves that were evaluated; it is only filled when the
    engine was built with ``trace=True``.
    """

    action: Any | None
    value: float
    root_values: tuple[tuple[Any, float], ...] = ()
    nodes_expanded: int = 0
    expanded: tuple[Any, ...] = field(default=(), repr=False)


class _SearchRun:
    """Per-call scratch data, so one :class:`Minimax` can be reused."""

    def __init__(self, trace: bool) -> None:
        self.trace = trace
        self.root_values: list[tuple[Any, float]] = []
        self.expanded: list[Any] = []
        self.nodes_expanded = 0

    def record(self, state: Any) -> None:
        self.nodes_expanded += 1
        if self.trace:
            self.expanded.append(state)


class Minimax:
    """Adversarial search for the mover's best action."""

    def __init__(
        self,
        depth: int,
        pruning: PruningMode = PruningMode.ON,
        trace: bool = False,
    ) -> None:
        if depth < 1:
            raise ValueError("depth must be >= 1")
        self.depth = depth
        self.pruning = pruning
        self.trace = trace

    def best_action(self, state: ExtendedState, mover_id: int) -> Any | None:
        return self.search(state, mover_id).action

    def search(self, state: ExtendedState, mover_id: int) -> MinimaxResult:
        """Run the search from ``state`` with ``mover_id`` as the maximiser.

        The chosen action is the last root action whose value equals the
        optimum. When none matches, the first root action is returned; when
        the mover has no legal action the result carries ``None``.

        Agents take turns in index order modulo ``players_number()``,
        starting at ``mover_id``; for a mover other than 0 this is the
        0..N-1 order rotated so the mover opens every round.
        """
        run = _SearchRun(self.trace)
        n_agents = state.players_number()
        value = self._value(
            state, mover_id, mover_id, n_agents, 0, -math.inf, math.inf, run, is_root=True
        )

        action = None
        for root_action, root_value in run.root_values:
            if root_value == value:
                action = root_action
        if action is None and run.root_values:
            action = run.root_values[0][0]

        return MinimaxResult(
            action=action,
            value=value,
            root_values=tuple(run.root_values),
            nodes_expanded=run.nodes_expanded,
            expanded=tuple(run.expanded),
        )

    def solve(
        self,
        state: ExtendedState,
        start: Position | None,
        goal: Position | None,
        agent_id: int,
    ) -> list[Any]:
        action = self.best_action(state, agent_id)
        return [] if action is None else [action]

    def _value(
        self,
        state: ExtendedState,
        agent_id: int,
        mover_id: int,
        n_agents: int,
        plies: int,
        alpha: float,
        beta: float,
        run: _SearchRun,
        is_root: bool = False,
    ) -> float:
        if state.is_win() or state.is_lose() or plies == self.depth:
            run.record(state)
            return state.score() + state.heuristic_evaluation()

        next_agent = (agent_id + 1) % n_agents
        next_plies = plies + 1 if next_agent == mover_id else plies

        actions = state.legal_actions(agent_id)
        if not actions:
            # An agent without a legal move passes its turn.
            return self._value(
                state, next_agent, mover_id, n_agents, next_plies, alpha, beta, run
            )

        run.record(state)
        pruning = self.pruning is PruningMode.ON
        maximising = agent_id == mover_id
        best = -math.inf if maximising else math.inf

        for action in actions:
            child = state.successor_state(agent_id, action)
            child_value = self._value(
                child, next_agent, mover_id, n_agents, next_plies, alpha, beta, run
            )
            if is_root:
                run.root_values.append((action, child_value))

            if maximising:
                best = max(best, child_value)
                if pruning:
                    if best > beta:
                        return best
                    alpha = max(alpha, best)
            else:
                best = min(best, child_value)
                if pruning:
                    if best < alpha:
                        return best
                    beta = min(beta, best)

        return best
