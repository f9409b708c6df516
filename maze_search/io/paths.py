"""Path construction helpers for episode output directories.

Centralises the directory/file naming conventions used by the episode
engine and the CLI.
"""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def episode_summary_path(out_dir: Path) -> Path:
    """Return path to the per-episode summary Parquet file."""
    return logs_dir(out_dir) / "episode_summary.parquet"


def round_log_path(out_dir: Path) -> Path:
    """Return path to the per-round log Parquet file."""
    return logs_dir(out_dir) / "round_log.parquet"
