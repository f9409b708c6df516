"""``maze-search``: play seeded maze episodes and print a JSON summary.

Settings come from flags, then an optional ``--config`` JSON file, then the
defaults in :mod:`maze_search.config.constants`. Episodes are played by
:func:`maze_search.simulation.engine.run_batch_episodes`, which also writes
the Parquet logs under ``--out-dir``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from maze_search.config.constants import (
    DEFAULT_ADVERSARIES,
    DEFAULT_MAX_ROUNDS,
    DEFAULT_MINIMAX_DEPTH,
)
from maze_search.config.types import EpisodeConfig, MoverMode, PruningMode
from maze_search.simulation.engine import run_batch_episodes, summarize_results

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------

UNATTENDED_MODES = [MoverMode.REFLEX.value, MoverMode.MINIMAX.value]
"""Mover modes that can play without a goal supplied every round."""

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _parse_mover_mode(raw_mode: str) -> MoverMode:
    """Only modes that need no per-round goal can drive a batch run."""
    if raw_mode not in UNATTENDED_MODES:
        raise ValueError(f"mode must be one of {', '.join(UNATTENDED_MODES)}")
    return MoverMode(raw_mode)


def _as_bool(raw: object, key: str) -> bool:
    if isinstance(raw, str) and raw.strip().lower() in _TRUE_WORDS | _FALSE_WORDS:
        return raw.strip().lower() in _TRUE_WORDS
    if not isinstance(raw, bool):
        raise ValueError(f"{key} must be a boolean value")
    return raw


def _as_int(raw: object, key: str) -> int:
    """JSON may carry ``3.0`` for a count; ``3.5`` and ``true`` are rejected."""
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    return int(raw)


def _as_float(raw: object, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be a float value, got {raw!r}")
    return float(raw)


def _as_str(raw: object, key: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (str, Path, int, float)):
        raise ValueError(f"{key} must be a string value, got {raw!r}")
    return str(raw)


def _resolve(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """Flag value if given, else the config file entry, else ``default``."""
    return cli_val if cli_val is not None else file_cfg.get(key, default)


def _optional_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object]
) -> float | None:
    raw = _resolve(cli_val, key, file_cfg, None)
    return None if raw is None else _as_float(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run seeded maze episodes with a search-driven mover")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--mode", type=str, choices=UNATTENDED_MODES, default=None)
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth in full rounds")
    parser.add_argument("--pruning", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--adversaries", type=int, default=None)
    parser.add_argument("--episodes", type=int, default=None)
    parser.add_argument("--max-rounds", type=int, default=None)
    parser.add_argument("--adversary-timeout", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run a seeded batch and print its summary; bad settings exit via ``parser.error``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    def value(cli_val: object, key: str, default: object) -> object:
        return _resolve(cli_val, key, file_cfg, default)

    try:
        log_level = _as_str(value(args.log_level, "log_level", "WARNING"), "log_level").upper()
        mode = _parse_mover_mode(
            _as_str(value(args.mode, "mode", MoverMode.MINIMAX.value), "mode")
        )
        pruning_on = _as_bool(value(args.pruning, "pruning", True), "pruning")
        config = EpisodeConfig(
            mover_mode=mode,
            depth=_as_int(value(args.depth, "depth", DEFAULT_MINIMAX_DEPTH), "depth"),
            pruning=PruningMode.ON if pruning_on else PruningMode.OFF,
            n_adversaries=_as_int(
                value(args.adversaries, "adversaries", DEFAULT_ADVERSARIES), "adversaries"
            ),
            max_rounds=_as_int(
                value(args.max_rounds, "max_rounds", DEFAULT_MAX_ROUNDS), "max_rounds"
            ),
            adversary_timeout=_optional_float(
                args.adversary_timeout, "adversary_timeout", file_cfg
            ),
        )
        episodes = _as_int(value(args.episodes, "episodes", 10), "episodes")
        seed = _as_int(value(args.seed, "seed", 0), "seed")
        out_dir = Path(_as_str(value(args.out_dir, "out_dir", "data"), "out_dir"))
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    results = run_batch_episodes(
        n_episodes=episodes,
        out_dir=out_dir,
        config=config,
        base_seed=seed,
    )
    summary = {
        "mode": config.mover_mode.value,
        "depth": config.depth,
        "pruning": config.pruning.value,
        "adversaries": config.n_adversaries,
        **summarize_results(results),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
