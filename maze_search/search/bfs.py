"""Breadth-first shortest-path search over a :class:`BasicState`.

Successors are visited in the order of the state's legal-action map, so on
a grid the :data:`~maze_search.domain.actions.ACTIONS` order decides which
of several equally short paths is returned.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from maze_search.search.contracts import BasicState


@dataclass(frozen=True)
class BfsResult:
    """Plan from start to goal plus the nodes expanded while finding it."""

    actions: tuple[Any, ...] = ()
    closed: frozenset[Hashable] = field(default_factory=frozenset)

    @property
    def found(self) -> bool:
        return bool(self.actions)


class BreadthFirstSearch:
    """Reusable BFS pathfinder.

    ``last_closed`` mirrors ``closed`` of the most recent :meth:`search`
    result and is replaced, never accumulated, on each call.
    """

    def __init__(self) -> None:
        self.last_closed: frozenset[Hashable] = frozenset()

    def search(self, state: BasicState, start: Hashable, goal: Hashable) -> BfsResult:
        """Find a minimal-length action sequence from ``start`` to ``goal``.

        Returns an empty plan when ``start == goal`` or the goal is
        unreachable. ``closed`` holds every node dequeued and expanded; the
        goal is dequeued but never expanded.
        """
        if start == goal:
            self.last_closed = frozenset()
            return BfsResult()

        frontier: deque[Hashable] = deque([start])
        discovered: set[Hashable] = {start}
        closed: set[Hashable] = set()
        came_from: dict[Hashable, tuple[Hashable, Any]] = {}
        found = False

        while frontier:
            current = frontier.popleft()
            if current == goal:
                found = True
                break
            closed.add(current)
            for neighbor, action in self._successors(state, current).items():
                if neighbor in discovered:
                    continue
                discovered.add(neighbor)
                came_from[neighbor] = (current, action)
                frontier.append(neighbor)

        self.last_closed = frozenset(closed)
        if not found:
            return BfsResult(closed=self.last_closed)

        actions: list[Any] = []
        node = goal
        while node != start:
            node, action = came_from[node]
            actions.append(action)
        actions.reverse()
        return BfsResult(actions=tuple(actions), closed=self.last_closed)

    def solve(
        self,
        state: BasicState,
        start: Hashable,
        goal: Hashable,
        agent_id: int | None = None,
    ) -> list[Any]:
        return list(self.search(state, start, goal).actions)

    def _successors(self, state: BasicState, node: Hashable) -> dict[Any, Any]:
        return state.legal_actions_as_map(node)


class PersonalizedBFS(BreadthFirstSearch):
    """One adversary's pursuit query, packaged as a callable unit of work.

    Cells held by the other adversaries are treated as blocked. Calling the
    instance returns only the first action of the plan, or ``None`` when
    there is no plan.
    """

    def __init__(
        self, state: BasicState, start: Hashable, goal: Hashable, agent_id: int
    ) -> None:
        super().__init__()
        self.state = state
        self.start = start
        self.goal = goal
        self.agent_id = agent_id

    def __call__(self) -> Any | None:
        result = self.search(self.state, self.start, self.goal)
        if not result.actions:
            return None
        return result.actions[0]

    def _successors(self, state: BasicState, node: Hashable) -> dict[Any, Any]:
        return state.legal_actions_as_map_no_kins(node, self.agent_id)
