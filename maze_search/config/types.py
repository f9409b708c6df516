"""Configuration dataclasses and mode enums for episode runs.

All frozen dataclasses that parameterise single episodes and batch runs
live here, together with the result container returned by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from maze_search.config.constants import (
    DEFAULT_ADVERSARIES,
    DEFAULT_MAX_ROUNDS,
    DEFAULT_MINIMAX_DEPTH,
    MAX_ADVERSARIES,
)

__all__ = [
    "EpisodeConfig",
    "EpisodeResult",
    "MoverMode",
    "PruningMode",
    "TerminationReason",
]


class PruningMode(Enum):
    """Alpha-beta pruning switch for the minimax engine."""

    OFF = "off"
    ON = "on"


class MoverMode(Enum):
    """Decision procedure used for the mover."""

    MANUAL = "manual"
    REFLEX = "reflex"
    MINIMAX = "minimax"


class TerminationReason(Enum):
    """Why an episode stopped."""

    WON = "won"
    LOST = "lost"
    ROUND_LIMIT = "round_limit"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EpisodeResult:
    """Top-level result for one played episode."""

    episode_id: str
    seed: int
    termination_reason: str
    rounds: int
    score: float
    food_eaten: int
    pellets_eaten: int
    captures: int
    food_remaining: int

    @property
    def won(self) -> bool:
        return self.termination_reason == TerminationReason.WON.value


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EpisodeConfig:
    """Parameters shared by every episode of a run.

    ``layout`` is the text of a maze layout; ``None`` selects the built-in
    layout. ``adversary_timeout`` bounds the wait for one adversary decision,
    in seconds; ``None`` waits until the decision is available.
    """

    mover_mode: MoverMode = MoverMode.MINIMAX
    depth: int = DEFAULT_MINIMAX_DEPTH
    pruning: PruningMode = PruningMode.ON
    n_adversaries: int = DEFAULT_ADVERSARIES
    max_rounds: int = DEFAULT_MAX_ROUNDS
    layout: str | None = None
    adversary_timeout: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.mover_mode, MoverMode):
            raise ValueError("mover_mode must be a MoverMode")
        if not isinstance(self.pruning, PruningMode):
            raise ValueError("pruning must be a PruningMode")
        if self.depth < 1:
            raise ValueError("depth must be >= 1")
        if not 0 <= self.n_adversaries <= MAX_ADVERSARIES:
            raise ValueError(f"n_adversaries must be in [0, {MAX_ADVERSARIES}]")
        if self.max_rounds < 1:
            raise ValueError("max_rounds must be >= 1")
        if self.adversary_timeout is not None and self.adversary_timeout <= 0:
            raise ValueError("adversary_timeout must be > 0 when set")
