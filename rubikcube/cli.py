"""Command-line entry points: a move demonstration and a solver example."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .core import Cube, print_coordinates, print_cube
from .search import SolveError, solve

EXAMPLE_SCRAMBLE = "BBURUDBFUFFFRRFUUFLULUFUDLRRDBBDBDBLUDDFLLRRBRLLLBRDDF"


def main(argv: Sequence[str] | None = None) -> int:
    """Show a solved cube, then the cube after U2 R."""
    parser = argparse.ArgumentParser(
        prog="rubikcube", description="Show cube state and coordinates around U2 R."
    )
    parser.parse_args(argv)
    cube = Cube()
    print_cube(cube)
    print_coordinates(cube)
    cube.move("u", 2)
    cube.move("r", 1)
    print_cube(cube)
    print_coordinates(cube)
    return 0


def example(argv: Sequence[str] | None = None) -> int:
    """Run the solver on a scramble and print the moves it finds."""
    parser = argparse.ArgumentParser(
        prog="rubikcube-example", description="Solve a cube given as facelets."
    )
    parser.add_argument("scramble", nargs="?", default=EXAMPLE_SCRAMBLE)
    parser.add_argument("--depth", type=int, default=0)
    args = parser.parse_args(argv)
    try:
        moves = solve(args.scramble, args.depth)
    except (SolveError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("Solution:", "[" + " ".join(str(m) for m in moves) + "]")
    return 0


if __name__ == "__main__":
    sys.exit(main())