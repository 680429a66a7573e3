#!/usr/bin/env python3
"""
mazey.py: Generate a random maze, solve it, and print it.

Usage:
  python3 mazey.py
  python3 mazey.py -w 40 -H 25 --ascii
  python3 mazey.py --no-solve --seed 1234
"""

import argparse
import random
import sys

import grid as _grid
from bar import CarveProgress
from grid import Grid
from maker import make_maze
from printer import charset_for, print_maze
from solver import solve

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 20


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate, solve and print a random maze.")
    ap.add_argument("-w", "--width", type=int, default=DEFAULT_WIDTH, help="Width of the maze in cells.")
    ap.add_argument("-H", "--height", type=int, default=DEFAULT_HEIGHT, help="Height of the maze in cells.")
    ap.add_argument("--ascii", action="store_true",
                    help="Draw with plain ASCII instead of unicode line drawing characters.")
    ap.add_argument("--no-solve", action="store_true",
                    help="Print the maze without the solution path.")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for the random generator, to reproduce a maze.")
    ap.add_argument("--progress", action="store_true",
                    help="Show a progress bar on stderr while carving.")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return ap


def main(argv=None) -> None:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.debug:
        _grid.DBG = True

    rng = random.Random(args.seed)
    bar = None
    hooks = {}
    if args.progress:
        bar = CarveProgress("Maze ", max=max(args.width * args.height, 1))
        hooks["on_visit"] = bar.cell_carved

    try:
        maze = make_maze(args.height, args.width, rng=rng, **hooks)
    except Grid.InvalidDimensions as e:
        ap.error(str(e))
    if bar:
        bar.carving_done()

    if not args.no_solve:
        solve(maze)

    print_maze(maze, charset_for(args.ascii), sys.stdout)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)
