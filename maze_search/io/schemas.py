"""Parquet schema definitions for episode artifacts.

Both Arrow schemas written by the episode engine live here so that the
engine, the persistence helpers and the tests agree on one column contract.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

EPISODE_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Episode schemas
# ---------------------------------------------------------------------------

EPISODE_SUMMARY_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("seed", pa.int64()),
        ("mover_mode", pa.string()),
        ("depth", pa.int64()),
        ("pruning", pa.string()),
        ("n_adversaries", pa.int64()),
        ("termination_reason", pa.string()),
        ("rounds", pa.int64()),
        ("score", pa.float64()),
        ("food_eaten", pa.int64()),
        ("pellets_eaten", pa.int64()),
        ("captures", pa.int64()),
        ("food_remaining", pa.int64()),
        ("schema_version", pa.int64()),
    ]
)

ROUND_LOG_SCHEMA = pa.schema(
    [
        ("episode_id", pa.string()),
        ("round", pa.int64()),
        ("score", pa.float64()),
        ("food_remaining", pa.int64()),
        ("captures", pa.int64()),
        ("confused_adversaries", pa.int64()),
        ("skipped_moves", pa.int64()),
        ("won", pa.bool_()),
        ("lost", pa.bool_()),
    ]
)
