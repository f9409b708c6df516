"""Score bookkeeping and the mover's heuristic evaluation.

The score is what the mover has actually earned; the heuristic biases the
search toward good futures that have not been scored yet. Every
distance-based term is guarded and contributes 0 when its distance is 0 or
its set is empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from maze_search.config.constants import (
    ADVERSARY_PROXIMITY_THRESHOLD,
    ADVERSARY_PROXIMITY_WEIGHT,
    CAPTURE_SCORE,
    CONFUSED_ADVERSARY_WEIGHT,
    FOOD_COUNT_WEIGHT,
    FOOD_SCORE,
    LOSE_SCORE,
    NEAREST_FOOD_WEIGHT,
    PELLET_SCORE,
    STEP_PENALTY,
    WIN_SCORE,
)
from maze_search.domain.actions import Position, manhattan_distance


@dataclass
class ScoreCounter:
    """Cumulative counters the score is derived from."""

    steps: int = 0
    food_eaten: int = 0
    pellets_eaten: int = 0
    captures: int = 0

    def copy(self) -> ScoreCounter:
        return replace(self)


def game_score(counter: ScoreCounter, won: bool, lost: bool) -> float:
    """Weighted sum of the counters plus the terminal bonus."""
    score = float(
        STEP_PENALTY * counter.steps
        + FOOD_SCORE * counter.food_eaten
        + PELLET_SCORE * counter.pellets_eaten
        + CAPTURE_SCORE * counter.captures
    )
    if won:
        score += WIN_SCORE
    if lost:
        score += LOSE_SCORE
    return score


def nearest_food_term(mover: Position, food: Iterable[Position]) -> float:
    distances = [manhattan_distance(mover, unit) for unit in food]
    if not distances:
        return 0.0
    nearest = min(distances)
    if nearest == 0:
        return 0.0
    return NEAREST_FOOD_WEIGHT / nearest


def food_count_term(food_remaining: int) -> float:
    if food_remaining == 0:
        return 0.0
    return FOOD_COUNT_WEIGHT / food_remaining


def adversary_proximity_term(
    mover: Position,
    adversaries: Mapping[int, Position],
    confused: Mapping[int, bool],
) -> float:
    """Penalty (<= 0) for unconfused adversaries within the proximity threshold."""
    total = sum(
        manhattan_distance(mover, position)
        for agent_id, position in adversaries.items()
        if not confused.get(agent_id, False)
    )
    if total == 0 or total >= ADVERSARY_PROXIMITY_THRESHOLD:
        return 0.0
    return -ADVERSARY_PROXIMITY_WEIGHT / total


def confused_adversary_term(
    mover: Position,
    adversaries: Mapping[int, Position],
    confused: Mapping[int, bool],
) -> float:
    distances = [
        manhattan_distance(mover, position)
        for agent_id, position in adversaries.items()
        if confused.get(agent_id, False)
    ]
    if not distances:
        return 0.0
    nearest = min(distances)
    if nearest == 0:
        return 0.0
    return CONFUSED_ADVERSARY_WEIGHT / nearest


def heuristic_evaluation(
    mover: Position,
    food: Iterable[Position],
    adversaries: Mapping[int, Position],
    confused: Mapping[int, bool],
) -> float:
    """Sum of the four heuristic terms for the mover standing on ``mover``.

    ``adversaries`` maps adversary index to position and must not contain
    the mover itself.
    """
    food = list(food)
    return (
        nearest_food_term(mover, food)
        + food_count_term(len(food))
        + adversary_proximity_term(mover, adversaries, confused)
        + confused_adversary_term(mover, adversaries, confused)
    )
