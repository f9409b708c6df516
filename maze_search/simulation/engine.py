"""Episode engine: seeded episodes, batch runs and Parquet persistence."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from maze_search.config.constants import FLUSH_THRESHOLD, MAX_BATCH_WORK_UNITS
from maze_search.config.types import EpisodeConfig, EpisodeResult, MoverMode, TerminationReason
from maze_search.domain.maze import DEFAULT_LAYOUT, parse_layout
from maze_search.domain.state import GameState
from maze_search.io.paths import episode_summary_path, logs_dir, round_log_path
from maze_search.io.schemas import (
    EPISODE_SCHEMA_VERSION,
    EPISODE_SUMMARY_SCHEMA,
    ROUND_LOG_SCHEMA,
)
from maze_search.simulation.orchestrator import RoundRecord, TurnOrchestrator, build_mover
from maze_search.simulation.persistence import flush_round_columns

logger = logging.getLogger(__name__)


def _deterministic_episode_id(index: int, seed: int) -> str:
    """Build reproducible episode ID stable across runs for identical seeds."""
    return f"ep{index}_s{seed}"


def _termination_reason(state: GameState) -> TerminationReason:
    if state.won:
        return TerminationReason.WON
    if state.lost:
        return TerminationReason.LOST
    return TerminationReason.ROUND_LIMIT


def run_episode(
    config: EpisodeConfig,
    seed: int,
    episode_id: str | None = None,
) -> tuple[EpisodeResult, list[RoundRecord]]:
    """Play one episode until it is won, lost or hits ``config.max_rounds``.

    ``seed`` drives the confused adversaries' random wandering, so equal
    seeds replay identical episodes.
    """
    if config.mover_mode is MoverMode.MANUAL:
        raise ValueError("manual mover mode needs a goal per round and cannot run unattended")
    episode_id = episode_id or _deterministic_episode_id(0, seed)

    layout = parse_layout(config.layout if config.layout is not None else DEFAULT_LAYOUT)
    state = GameState.create(layout, config.n_adversaries)
    mover = build_mover(config.mover_mode, config.depth, config.pruning)
    rounds: list[RoundRecord] = []

    with TurnOrchestrator(
        state,
        mover,
        random.Random(seed),
        result_timeout=config.adversary_timeout,
    ) as orchestrator:
        for _ in range(config.max_rounds):
            rounds.append(orchestrator.play_round())
            if state.is_terminal():
                break

    reason = _termination_reason(state)
    result = EpisodeResult(
        episode_id=episode_id,
        seed=seed,
        termination_reason=reason.value,
        rounds=len(rounds),
        score=state.score(),
        food_eaten=state.counter.food_eaten,
        pellets_eaten=state.counter.pellets_eaten,
        captures=state.counter.captures,
        food_remaining=state.food_remaining(),
    )
    logger.info(
        "%s finished: %s after %d rounds, score %.1f",
        episode_id,
        result.termination_reason,
        result.rounds,
        result.score,
    )
    return result, rounds


def run_batch_episodes(
    n_episodes: int,
    out_dir: Path,
    config: EpisodeConfig | None = None,
    base_seed: int = 0,
) -> list[EpisodeResult]:
    """Run seeded episodes and persist episode and round logs as Parquet."""
    if n_episodes < 1:
        raise ValueError("n_episodes must be >= 1")
    episode_config = config or EpisodeConfig()
    if episode_config.mover_mode is MoverMode.MANUAL:
        raise ValueError("manual mover mode needs a goal per round and cannot run unattended")

    total_work_units = n_episodes * episode_config.max_rounds
    if total_work_units > MAX_BATCH_WORK_UNITS:
        raise ValueError("batch workload exceeds safety threshold; reduce episodes/max_rounds")

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    round_writer: pq.ParquetWriter | None = None
    round_columns: dict[str, list[int | str | float | bool]] = {
        "episode_id": [],
        "round": [],
        "score": [],
        "food_remaining": [],
        "captures": [],
        "confused_adversaries": [],
        "skipped_moves": [],
        "won": [],
        "lost": [],
    }
    summary_columns: dict[str, list[int | str | float]] = {
        name: [] for name in EPISODE_SUMMARY_SCHEMA.names
    }
    results: list[EpisodeResult] = []

    try:
        for i in range(n_episodes):
            seed = base_seed + i
            episode_id = _deterministic_episode_id(i, seed)
            result, rounds = run_episode(episode_config, seed=seed, episode_id=episode_id)
            results.append(result)

            captures = 0
            for record in rounds:
                captures += sum(len(outcome.captured) for outcome in record.outcomes)
                round_columns["episode_id"].append(episode_id)
                round_columns["round"].append(record.round_index)
                round_columns["score"].append(record.score)
                round_columns["food_remaining"].append(record.food_remaining)
                round_columns["captures"].append(captures)
                round_columns["confused_adversaries"].append(record.confused_adversaries)
                round_columns["skipped_moves"].append(record.skipped_moves)
                round_columns["won"].append(record.won)
                round_columns["lost"].append(record.lost)
            if len(round_columns["episode_id"]) >= FLUSH_THRESHOLD:
                round_writer = flush_round_columns(
                    round_columns=round_columns,
                    round_log_path=round_log_path(out_dir),
                    round_writer=round_writer,
                )

            summary_row: dict[str, int | str | float] = {
                "episode_id": result.episode_id,
                "seed": result.seed,
                "mover_mode": episode_config.mover_mode.value,
                "depth": episode_config.depth,
                "pruning": episode_config.pruning.value,
                "n_adversaries": episode_config.n_adversaries,
                "termination_reason": result.termination_reason,
                "rounds": result.rounds,
                "score": result.score,
                "food_eaten": result.food_eaten,
                "pellets_eaten": result.pellets_eaten,
                "captures": result.captures,
                "food_remaining": result.food_remaining,
                "schema_version": EPISODE_SCHEMA_VERSION,
            }
            for key, value in summary_row.items():
                summary_columns[key].append(value)

        round_writer = flush_round_columns(
            round_columns=round_columns,
            round_log_path=round_log_path(out_dir),
            round_writer=round_writer,
        )
    finally:
        if round_writer is not None:
            round_writer.close()

    if round_writer is None:
        pq.write_table(ROUND_LOG_SCHEMA.empty_table(), round_log_path(out_dir))
    pq.write_table(
        pa.Table.from_pydict(summary_columns, schema=EPISODE_SUMMARY_SCHEMA),
        episode_summary_path(out_dir),
    )
    return results


def summarize_results(results: list[EpisodeResult]) -> dict[str, int | float | None]:
    """Aggregate episode results into counts and means."""
    if not results:
        return {
            "episodes": 0,
            "won": 0,
            "lost": 0,
            "round_limit": 0,
            "win_rate": None,
            "mean_score": None,
            "mean_rounds": None,
            "mean_food_eaten": None,
        }
    reasons = [result.termination_reason for result in results]
    scores = np.array([result.score for result in results], dtype=np.float64)
    rounds = np.array([result.rounds for result in results], dtype=np.float64)
    food = np.array([result.food_eaten for result in results], dtype=np.float64)
    won = reasons.count(TerminationReason.WON.value)
    return {
        "episodes": len(results),
        "won": won,
        "lost": reasons.count(TerminationReason.LOST.value),
        "round_limit": reasons.count(TerminationReason.ROUND_LIMIT.value),
        "win_rate": won / len(results),
        "mean_score": float(np.mean(scores)),
        "mean_rounds": float(np.mean(rounds)),
        "mean_food_eaten": float(np.mean(food)),
    }
