"""One-ply reflex agent."""

from __future__ import annotations

from typing import Any

from maze_search.config.constants import REFLEX_HEURISTIC_MULTIPLIER
from maze_search.domain.actions import Position
from maze_search.search.contracts import ExtendedState


class Reflex:
    """Pick the action whose successor maximises ``2 * heuristic + score``.

    Equal evaluations resolve to the action evaluated last.
    """

    def choose_action(self, state: ExtendedState, agent_id: int) -> Any | None:
        best_action = None
        best_value = 0.0
        for action in state.legal_actions(agent_id):
            value = self.evaluate(state.successor_state(agent_id, action))
            if best_action is None or value >= best_value:
                best_action = action
                best_value = value
        return best_action

    @staticmethod
    def evaluate(state: ExtendedState) -> float:
        return REFLEX_HEURISTIC_MULTIPLIER * state.heuristic_evaluation() + state.score()

    def solve(
        self,
        state: ExtendedState,
        start: Position | None,
        goal: Position | None,
        agent_id: int,
    ) -> list[Any]:
        action = self.choose_action(state, agent_id)
        return [] if action is None else [action]
