"""Command-line entry point for Terminal Snake."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from terminal_snake.config import GameConfig
from terminal_snake.scores import ScoreStore

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-snake",
        description="Snake on a wraparound grid, played in the terminal.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log at DEBUG level.",
    )

    # --- play (no command) ---
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Starting tick interval in milliseconds.",
    )
    parser.add_argument(
        "--scores", type=str, default=None,
        help="Path to the high-score file.",
    )
    parser.add_argument("--seed", type=int, default=None)

    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- scores ---
    scores_p = sub.add_parser("scores", help="Show the stored high scores.")
    scores_p.add_argument(
        "--scores", type=str, default=None,
        help="Path to the high-score file.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = (
        GameConfig.load(args.config)
        if args.config else GameConfig()
    )

    overrides: dict = {}
    flag_map = {
        "grid_size": "grid_size",
        "tick_ms": "tick_ms",
        "scores": "high_score_path",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from terminal_snake.engine import GameState, GameStatus
    from terminal_snake.render import TerminalRenderer
    from terminal_snake.session import GameSession
    from terminal_snake.terminal import TerminalInput

    config = _load_config(args)
    store = ScoreStore(config.high_score_path, limit=config.high_score_limit)
    state = GameState(config, score_store=store)
    renderer = TerminalRenderer()

    with TerminalInput() as keys:
        asyncio.run(GameSession(state, renderer, keys).run())

    if state.record_error is not None:
        print(f"Warning: {state.record_error}", file=sys.stderr)  # noqa: T201
    if state.status == GameStatus.QUIT:
        logger.info("Session ended by player.")
    return 0


def _run_scores(args: argparse.Namespace) -> int:
    config = _load_config(args)
    store = ScoreStore(config.high_score_path, limit=config.high_score_limit)
    print("--- Top 10 High Scores ---")  # noqa: T201
    for score in store.top():
        print(score)  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``terminal-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    if args.log_file:
        logging.basicConfig(level=level, format=_LOG_FORMAT, filename=args.log_file)
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)

    if args.command is None:
        return _run_play(args)
    handlers = {
        "scores": _run_scores,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
