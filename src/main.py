"""Entry point for the Orb Snake game."""

from __future__ import annotations

import argparse
import logging
import random

from orb_snake.config import LOG_LEVEL, WINDOW_HEIGHT, WINDOW_WIDTH
from orb_snake.engine import START_LENGTH
from orb_snake.game import OrbSnake
from orb_snake.geometry import Board


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Orb Snake")
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed orb placement for a repeatable run"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)
    if not Board(args.width, args.height).can_start(START_LENGTH):
        parser.error(f"window {args.width}x{args.height} is too small to play on")
    return args


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    game = OrbSnake((args.width, args.height), rng=rng)
    game.start()


if __name__ == "__main__":
    main()
