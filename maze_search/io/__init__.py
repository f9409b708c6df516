"""I/O layer: output paths and Arrow schemas."""

from maze_search.io.paths import episode_summary_path, logs_dir, round_log_path
from maze_search.io.schemas import (
    EPISODE_SCHEMA_VERSION,
    EPISODE_SUMMARY_SCHEMA,
    ROUND_LOG_SCHEMA,
)

__all__ = [
    "EPISODE_SCHEMA_VERSION",
    "EPISODE_SUMMARY_SCHEMA",
    "ROUND_LOG_SCHEMA",
    "episode_summary_path",
    "logs_dir",
    "round_log_path",
]
