import argparse
import logging
import random
import sys

from .constants import (
    LEVELS, DEFAULT_LEVEL, MAX_ATTEMPTS_DEFAULT,
    ENTRANCE_CHARACTER, EXIT_CHARACTER, GOAL_CHARACTER,
)
from .generator import MazeGenerationError, generate_maze


def positive_int(value):
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def build_parser():
    parser = argparse.ArgumentParser(description="MyMaze CLI")
    parser.add_argument("--level", choices=sorted(LEVELS), default=DEFAULT_LEVEL, help="Level size preset")
    parser.add_argument("--width", type=int, default=None, help="Maze width (overrides --level, even values are bumped to odd)")
    parser.add_argument("--height", type=int, default=None, help="Maze height (overrides --level, even values are bumped to odd)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for maze generation (default: random each run)")
    parser.add_argument("--max-attempts", type=positive_int, default=MAX_ATTEMPTS_DEFAULT, help="Generation retries before giving up")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    width, height = LEVELS[args.level]
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    # Randomize seed if not provided, but print it so a maze can be reproduced
    seed = args.seed if args.seed is not None else random.randrange(1, 2**31)

    try:
        grid = generate_maze(width, height, seed=seed, max_attempts=args.max_attempts)
    except MazeGenerationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    marks = {
        grid.entrance: ENTRANCE_CHARACTER,
        grid.exit: EXIT_CHARACTER,
        grid.goal: GOAL_CHARACTER,
    }
    print(grid.render(marks))
    print(f"{grid.width}x{grid.height} seed={seed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
