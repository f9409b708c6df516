"""Domain layer: grid primitives, layouts, scoring and the game state."""

from maze_search.domain.actions import (
    ACTIONS,
    Action,
    Position,
    manhattan_distance,
    position_after,
)
from maze_search.domain.maze import DEFAULT_LAYOUT, Layout, Maze, parse_layout
from maze_search.domain.scoring import ScoreCounter, game_score, heuristic_evaluation
from maze_search.domain.state import ActionOutcome, GameState, TurnSummary

__all__ = [
    "ACTIONS",
    "Action",
    "ActionOutcome",
    "DEFAULT_LAYOUT",
    "GameState",
    "Layout",
    "Maze",
    "Position",
    "ScoreCounter",
    "TurnSummary",
    "game_score",
    "heuristic_evaluation",
    "manhattan_distance",
    "parse_layout",
    "position_after",
]
