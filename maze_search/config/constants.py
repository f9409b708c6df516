"""Centralized game constants for the maze pursuit model.

All scoring weights, heuristic weights and run-time defaults live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

STEP_PENALTY = -1
"""Score added for every step the mover takes."""

FOOD_SCORE = 5
"""Score for one eaten food unit."""

PELLET_SCORE = 10
"""Score for one eaten pellet."""

CAPTURE_SCORE = 50
"""Score for capturing one confused adversary."""

WIN_SCORE = 500
"""Bonus applied once the food set is empty at the end of a round."""

LOSE_SCORE = -500
"""Bonus applied once the mover shares a cell with an unconfused adversary."""

CONFUSION_DURATION = 20
"""Rounds the shared confusion window lasts after a pellet is eaten."""

NEAREST_FOOD_WEIGHT = 2.0
"""Heuristic weight divided by the distance to the nearest food unit."""

FOOD_COUNT_WEIGHT = 1.0
"""Heuristic weight divided by the number of remaining food units."""

ADVERSARY_PROXIMITY_WEIGHT = 20.0
"""Heuristic penalty divided by the summed distance to unconfused adversaries."""

ADVERSARY_PROXIMITY_THRESHOLD = 7
"""Summed adversary distance below which the proximity penalty applies."""

CONFUSED_ADVERSARY_WEIGHT = 5.0
"""Heuristic weight divided by the distance to the nearest confused adversary."""

REFLEX_HEURISTIC_MULTIPLIER = 2.0
"""Reflex agent weighting of the heuristic relative to the raw score."""

DEFAULT_MINIMAX_DEPTH = 2
"""Default minimax depth, in full rounds."""

DEFAULT_ADVERSARIES = 2
"""Default number of adversaries per episode."""

MAX_ADVERSARIES = 4
"""Upper bound on adversaries; the built-in layout has four starts."""

DEFAULT_MAX_ROUNDS = 300
"""Default round cap for one episode."""

FLUSH_THRESHOLD = 4_096
"""Flush round-log rows to Parquet once this in-memory row count is reached."""

MAX_BATCH_WORK_UNITS = 10_000_000
"""Safety cap on total rounds across all episodes of a batch."""
