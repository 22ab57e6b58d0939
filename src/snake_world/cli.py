"""Headless command-line driver for the snake world."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from snake_world.config import WorldConfig
from snake_world.snake import Direction
from snake_world.world import WorldConfigError

logger = logging.getLogger(__name__)

_MOVE_CODES: dict[str, Direction | None] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    ".": None,
}


def _move_script(value: str) -> list[Direction | None]:
    moves = []
    for code in value.upper():
        if code not in _MOVE_CODES:
            raise argparse.ArgumentTypeError(
                f"invalid move {code!r}; use U, D, L, R or '.'",
            )
        moves.append(_MOVE_CODES[code])
    return moves


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-world",
        description="Run the snake world engine without a display.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play a scripted game and print the final state.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--spawn-index", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--moves", type=_move_script, default=None,
        help="One character per tick: U, D, L, R turn, '.' keeps heading.",
    )
    sim_p.add_argument(
        "--ticks", type=int, default=10,
        help="Number of ticks to play when no move script is given.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print or write a world config.")
    cfg_p.add_argument("--output", type=str, default=None)
    cfg_p.add_argument("--width", type=int, default=None)
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _config_from_args(args: argparse.Namespace) -> WorldConfig:
    config = (
        WorldConfig.load(args.config)
        if getattr(args, "config", None) else WorldConfig()
    )
    overrides = {}
    for name in ("width", "spawn_index", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    try:
        world = _config_from_args(args).build_world()
    except WorldConfigError as exc:
        logger.error("Invalid world configuration: %s", exc)
        return 2

    moves = args.moves if args.moves is not None else [None] * args.ticks
    world.start_game()
    for move in moves:
        if move is not None:
            world.change_direction(move)
        world.step()
        if world.status.is_terminal:
            break

    print(json.dumps(world.get_state(), indent=2))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    try:
        config = _config_from_args(args)
    except WorldConfigError as exc:
        logger.error("Invalid world configuration: %s", exc)
        return 2

    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-world`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
