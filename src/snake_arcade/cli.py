"""Command-line tools for the snake arcade game."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from snake_arcade.config import AppConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Snake arcade simulation and score tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument(
        "--storage", type=str, default=None,
        help="Score store path (overrides the config file).",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless games with the autopilot.",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=5_000)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--no-save", action="store_true",
        help="Do not record the resulting best score.",
    )

    # --- best-score ---
    best_p = sub.add_parser("best-score", help="Show the stored best score.")
    best_p.add_argument(
        "--clear", action="store_true", help="Remove the stored best score.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.load(args.config) if args.config else AppConfig()
    if args.storage:
        config = dataclasses.replace(config, storage_path=args.storage)
    return config


def _run_simulate(args: argparse.Namespace, config: AppConfig) -> int:
    from snake_arcade.simulate import simulate
    from snake_arcade.storage import BestScoreStore

    store = BestScoreStore(config.storage_path)
    seed = args.seed if args.seed is not None else config.seed
    try:
        result = simulate(
            games=args.games,
            max_ticks=args.max_ticks,
            seed=seed,
            best_score=store.load(),
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    if not args.no_save:
        store.save(result.best_score)
    print(result.summary())  # noqa: T201
    return 0


def _run_best_score(args: argparse.Namespace, config: AppConfig) -> int:
    from snake_arcade.storage import BestScoreStore

    store = BestScoreStore(config.storage_path)
    if args.clear:
        store.clear()
        print("Best score cleared.")  # noqa: T201
        return 0
    print(store.load())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = _load_config(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "best-score": _run_best_score,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
