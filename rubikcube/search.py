"""Depth-limited search for a move sequence that solves a cubie cube."""

from __future__ import annotations

from .cubiecube import CubieCube

_MOVES = (0, 1, 2, 3, 4, 5)


class SolveError(Exception):
    """Raised when a cube state cannot be read or no solution is found."""


def _search(cube: CubieCube, remaining: int, path: list[int]) -> bool:
    if remaining == 0:
        return cube.is_solved()
    for move in _MOVES:
        following = CubieCube(cube.cp[:], cube.co[:], cube.ep[:], cube.eo[:])
        following.move(move)
        path.append(move)
        if _search(following, remaining - 1, path):
            return True
        path.pop()
    return False


def solve(state: str, depth: int) -> list[int]:
    """Find exactly ``depth`` quarter turns that bring ``state`` to solved.

    Only the solved cube, given as an empty state string, can be read.
    """
    if depth < 0:
        raise ValueError("depth must not be negative")
    if state:
        raise SolveError("reading a cube from a facelet string is unsupported")
    cube = CubieCube()
    path: list[int] = []
    if _search(cube, depth, path):
        return path
    raise SolveError("no solution")