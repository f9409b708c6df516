"""Configuration layer: constants and typed config dataclasses."""

from maze_search.config.constants import (
    ADVERSARY_PROXIMITY_THRESHOLD,
    ADVERSARY_PROXIMITY_WEIGHT,
    CAPTURE_SCORE,
    CONFUSED_ADVERSARY_WEIGHT,
    CONFUSION_DURATION,
    DEFAULT_ADVERSARIES,
    DEFAULT_MAX_ROUNDS,
    DEFAULT_MINIMAX_DEPTH,
    FLUSH_THRESHOLD,
    FOOD_COUNT_WEIGHT,
    FOOD_SCORE,
    LOSE_SCORE,
    MAX_ADVERSARIES,
    MAX_BATCH_WORK_UNITS,
    NEAREST_FOOD_WEIGHT,
    PELLET_SCORE,
    REFLEX_HEURISTIC_MULTIPLIER,
    STEP_PENALTY,
    WIN_SCORE,
)
from maze_search.config.types import (
    EpisodeConfig,
    EpisodeResult,
    MoverMode,
    PruningMode,
    TerminationReason,
)

__all__ = [
    "ADVERSARY_PROXIMITY_THRESHOLD",
    "ADVERSARY_PROXIMITY_WEIGHT",
    "CAPTURE_SCORE",
    "CONFUSED_ADVERSARY_WEIGHT",
    "CONFUSION_DURATION",
    "DEFAULT_ADVERSARIES",
    "DEFAULT_MAX_ROUNDS",
    "DEFAULT_MINIMAX_DEPTH",
    "EpisodeConfig",
    "EpisodeResult",
    "FLUSH_THRESHOLD",
    "FOOD_COUNT_WEIGHT",
    "FOOD_SCORE",
    "LOSE_SCORE",
    "MAX_ADVERSARIES",
    "MAX_BATCH_WORK_UNITS",
    "MoverMode",
    "NEAREST_FOOD_WEIGHT",
    "PELLET_SCORE",
    "PruningMode",
    "REFLEX_HEURISTIC_MULTIPLIER",
    "STEP_PENALTY",
    "TerminationReason",
    "WIN_SCORE",
]
