"""Capability protocols the search algorithms are written against.

The algorithms never import :class:`maze_search.domain.state.GameState`;
anything that satisfies these protocols can be searched, including the
graph doubles in :mod:`maze_search.search.mocks`.
"""

from __future__ import annotations

from typing import Any, Protocol

from maze_search.domain.actions import Position


class BasicState(Protocol):
    """Read-only map of reachable neighbours, enough for path search."""

    def legal_actions_as_map(self, position: Any) -> dict[Any, Any]:
        """Ordered mapping destination -> action, in action-set order."""
        ...

    def legal_actions_as_map_no_kins(self, position: Any, agent_id: int) -> dict[Any, Any]:
        """Same as :meth:`legal_actions_as_map` without cells held by other adversaries."""
        ...


class ExtendedState(BasicState, Protocol):
    """Full game-tree interface used by adversarial search."""

    def legal_actions(self, agent_id: int) -> list[Any]: ...

    def successor_state(self, agent_id: int, action: Any) -> ExtendedState:
        """Return a new state; the receiver is never mutated."""
        ...

    def is_win(self) -> bool: ...

    def is_lose(self) -> bool: ...

    def players_number(self) -> int: ...

    def score(self) -> float: ...

    def heuristic_evaluation(self) -> float: ...


class SearchAlgorithm(Protocol):
    """Uniform entry point shared by BFS, minimax and reflex."""

    def solve(
        self,
        state: Any,
        start: Position | None,
        goal: Position | None,
        agent_id: int | None,
    ) -> list[Any]:
        """Return the planned actions, possibly empty."""
        ...
