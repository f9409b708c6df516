"""Simulation layer: turn orchestration, episode engine and Parquet persistence."""

from maze_search.simulation.engine import run_batch_episodes, run_episode, summarize_results
from maze_search.simulation.orchestrator import RoundRecord, TurnOrchestrator, build_mover
from maze_search.simulation.persistence import flush_round_columns

__all__ = [
    "RoundRecord",
    "TurnOrchestrator",
    "build_mover",
    "flush_round_columns",
    "run_batch_episodes",
    "run_episode",
    "summarize_results",
]
