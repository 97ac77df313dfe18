"""Cube state as cubie arrays, face turns and the phase-one coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Sequence


class _FaceTurn(NamedTuple):
    """How a quarter turn of one face cycles and twists the cubies."""

    corners: tuple[int, int, int, int]
    edges: tuple[int, int, int, int]
    corner_twist: tuple[int, int, int, int]
    edge_flip: tuple[int, int, int, int]


_MOVE_TABLES: dict[str, _FaceTurn] = {
    "r": _FaceTurn((1, 3, 7, 5), (9, 6, 10, 2), (2, 1, 2, 1), (0, 0, 0, 0)),
    "l": _FaceTurn((0, 4, 6, 2), (8, 0, 11, 4), (2, 1, 2, 1), (0, 0, 0, 0)),
    "u": _FaceTurn((1, 5, 4, 0), (1, 2, 3, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    "d": _FaceTurn((3, 2, 6, 7), (5, 4, 7, 6), (0, 0, 0, 0), (0, 0, 0, 0)),
    "f": _FaceTurn((0, 2, 3, 1), (1, 8, 5, 9), (1, 2, 1, 2), (1, 1, 1, 1)),
    "b": _FaceTurn((4, 5, 7, 6), (3, 10, 7, 11), (1, 2, 1, 2), (1, 1, 1, 1)),
}

_NO_OFFSET = (0, 0, 0, 0)


def _cycle(
    values: list[int],
    positions: tuple[int, ...],
    offsets: Sequence[int] = _NO_OFFSET,
    modulus: int | None = None,
) -> None:
    """Move each value one step back along ``positions``, adding ``offsets``."""
    moved = [values[p] for p in positions[1:] + positions[:1]]
    for pos, value, offset in zip(positions, moved, offsets):
        value += offset
        values[pos] = value % modulus if modulus else value


@dataclass
class Cube:
    """Corner and edge permutation and orientation of a cube."""

    corner_permutation: list[int] = field(default_factory=lambda: list(range(8)))
    corner_orientation: list[int] = field(default_factory=lambda: [0] * 8)
    edge_permutation: list[int] = field(default_factory=lambda: list(range(12)))
    edge_orientation: list[int] = field(default_factory=lambda: [0] * 12)

    def move(self, face: str, turns: int) -> None:
        """Turn ``face`` (one of r, l, f, b, u, d) clockwise ``turns`` times."""
        table = _MOVE_TABLES.get(face)
        if table is None:
            raise ValueError(f"unknown face: {face!r}")
        for _ in range(turns):
            _cycle(self.corner_permutation, table.corners)
            _cycle(self.edge_permutation, table.edges)
            _cycle(self.corner_orientation, table.corners, table.corner_twist, 3)
            _cycle(self.edge_orientation, table.edges, table.edge_flip, 2)


def comb(n: int, k: int) -> int:
    """Binomial coefficient n choose k."""
    if k < 0:
        raise ValueError("k must not be negative")
    result = 1
    for i in range(1, k + 1):
        result = (n - k + i) * result // i
    return result


def corner_orientation_coordinate(cube: Cube) -> int:
    """Orientation of the first seven corners read as a base-3 number."""
    return sum(o * 3**i for i, o in enumerate(cube.corner_orientation[:7]))


def edge_orientation_coordinate(cube: Cube) -> int:
    """Orientation of the first eleven edges read as a base-2 number."""
    return sum(o * 2**i for i, o in enumerate(cube.edge_orientation[:11]))


def uds_coordinate(cube: Cube) -> int:
    """Coordinate of where the UD-slice edges sit."""
    k = -1
    result = 0
    for i, value in enumerate(cube.edge_permutation):
        if value > 7:
            k += 1
        elif k > 0:
            result += comb(i, k)
    return result


def phase1_solved(cube: Cube) -> bool:
    """True when every corner and edge is oriented."""
    return corner_orientation_coordinate(cube) == 0 and edge_orientation_coordinate(cube) == 0


def _fmt(values: Sequence[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def print_cube(cube: Cube) -> None:
    """Print the cubie arrays of ``cube``."""
    print("=== Cube State =================")
    print("cper", _fmt(cube.corner_permutation))
    print("cor ", _fmt(cube.corner_orientation))
    print("eper", _fmt(cube.edge_permutation))
    print("eor ", _fmt(cube.edge_orientation))
    print("================================")
    print()


def print_coordinates(cube: Cube) -> None:
    """Print the phase-one coordinates of ``cube``."""
    print("=== Coordinates ================")
    print("cor coordinate", corner_orientation_coordinate(cube))
    print("eor coordinate", edge_orientation_coordinate(cube))
    print("uds coordinate", uds_coordinate(cube))
    print("phase1 solved", "true" if phase1_solved(cube) else "false")
    print("================================")
    print()