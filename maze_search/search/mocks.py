"""Hand-built graph doubles for exercising the search algorithms.

:class:`ManualGraph` is an explicit directed graph whose edges are labelled
with actions. :class:`BasicGraphState` exposes it through the path-search
protocol; :class:`ExtendedGraphState` walks a marker over it as a game tree
with per-node scores and win/lose flags.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any


class ManualGraph:
    """Directed graph with action-labelled edges kept in insertion order."""

    def __init__(self, nodes: Iterable[Hashable]) -> None:
        self._successors: dict[Hashable, dict[Hashable, Any]] = {node: {} for node in nodes}

    def add_action(self, source: Hashable, target: Hashable, action: Any) -> None:
        """Add ``source -> target`` labelled ``action``; unknown nodes are ignored."""
        if source in self._successors and target in self._successors:
            self._successors[source][target] = action

    def legal_actions(self, node: Hashable) -> dict[Hashable, Any]:
        return dict(self._successors.get(node, {}))

    def has_node(self, node: Hashable) -> bool:
        return node in self._successors


class BasicGraphState:
    """:class:`~maze_search.search.contracts.BasicState` over a manual graph."""

    def __init__(self, graph: ManualGraph) -> None:
        self.graph = graph

    def legal_actions_as_map(self, position: Hashable) -> dict[Hashable, Any]:
        return self.graph.legal_actions(position)

    def legal_actions_as_map_no_kins(
        self, position: Hashable, agent_id: int
    ) -> dict[Hashable, Any]:
        return self.graph.legal_actions(position)


class ExtendedGraphState:
    """Game-tree double: a marker on ``node`` of a shared :class:`ManualGraph`.

    Every player's legal actions are the out-edges of the marked node. Both
    ``score()`` and ``heuristic_evaluation()`` return the node's configured
    score, so a leaf evaluates to twice that score.
    """

    def __init__(
        self,
        graph: ManualGraph,
        node: Hashable,
        players: int,
        params: dict[Hashable, tuple[bool, bool, float]] | None = None,
    ) -> None:
        self.graph = graph
        self.node = node
        self.players = players
        self._params = params if params is not None else {}

    def set_node(self, node: Hashable, win: bool = False, lose: bool = False, score: float = 0.0) -> None:
        if self.graph.has_node(node):
            self._params[node] = (win, lose and not win, score)

    def legal_actions(self, agent_id: int) -> list[Any]:
        return list(self.graph.legal_actions(self.node).values())

    def successor_state(self, agent_id: int, action: Any) -> ExtendedGraphState:
        target = next(
            node for node, label in self.graph.legal_actions(self.node).items() if label == action
        )
        return ExtendedGraphState(self.graph, target, self.players, self._params)

    def is_win(self) -> bool:
        return self._params.get(self.node, (False, False, 0.0))[0]

    def is_lose(self) -> bool:
        return self._params.get(self.node, (False, False, 0.0))[1]

    def players_number(self) -> int:
        return self.players

    def score(self) -> float:
        return self._params.get(self.node, (False, False, 0.0))[2]

    def heuristic_evaluation(self) -> float:
        return self.score()

    def legal_actions_as_map(self, position: Hashable) -> dict[Hashable, Any]:
        return self.graph.legal_actions(position)

    def legal_actions_as_map_no_kins(
        self, position: Hashable, agent_id: int
    ) -> dict[Hashable, Any]:
        return self.graph.legal_actions(position)

    def __repr__(self) -> str:
        return f"ExtendedGraphState(node={self.node!r})"
