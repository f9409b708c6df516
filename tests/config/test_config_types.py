"""Tests for configuration dataclasses and enums."""

from __future__ import annotations

import dataclasses

import pytest

from maze_search.config.constants import DEFAULT_MINIMAX_DEPTH, MAX_ADVERSARIES
from maze_search.config.types import (
    EpisodeConfig,
    EpisodeResult,
    MoverMode,
    PruningMode,
    TerminationReason,
)


class TestEpisodeConfig:
    def test_defaults(self) -> None:
        config = EpisodeConfig()
        assert config.mover_mode is MoverMode.MINIMAX
        assert config.pruning is PruningMode.ON
        assert config.depth == DEFAULT_MINIMAX_DEPTH
        assert config.layout is None
        assert config.adversary_timeout is None

    def test_is_frozen(self) -> None:
        config = EpisodeConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.depth = 5  # type: ignore[misc]

    def test_rejects_zero_depth(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            EpisodeConfig(depth=0)

    def test_rejects_too_many_adversaries(self) -> None:
        with pytest.raises(ValueError, match="n_adversaries"):
            EpisodeConfig(n_adversaries=MAX_ADVERSARIES + 1)

    def test_rejects_negative_adversaries(self) -> None:
        with pytest.raises(ValueError, match="n_adversaries"):
            EpisodeConfig(n_adversaries=-1)

    def test_rejects_zero_rounds(self) -> None:
        with pytest.raises(ValueError, match="max_rounds"):
            EpisodeConfig(max_rounds=0)

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="adversary_timeout"):
            EpisodeConfig(adversary_timeout=0.0)

    def test_rejects_raw_string_modes(self) -> None:
        with pytest.raises(ValueError, match="mover_mode"):
            EpisodeConfig(mover_mode="minimax")  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="pruning"):
            EpisodeConfig(pruning="on")  # type: ignore[arg-type]


class TestEnums:
    def test_mode_values_round_trip(self) -> None:
        assert MoverMode("reflex") is MoverMode.REFLEX
        assert PruningMode("off") is PruningMode.OFF
        assert TerminationReason("round_limit") is TerminationReason.ROUND_LIMIT


class TestEpisodeResult:
    def test_won_property(self) -> None:
        result = EpisodeResult(
            episode_id="ep0_s0",
            seed=0,
            termination_reason=TerminationReason.WON.value,
            rounds=10,
            score=520.0,
            food_eaten=5,
            pellets_eaten=0,
            captures=0,
            food_remaining=0,
        )
        assert result.won
        lost = dataclasses.replace(result, termination_reason=TerminationReason.LOST.value)
        assert not lost.won
