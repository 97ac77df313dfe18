"""Cubie-level cube with multiplication, coordinates and face moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Corner(IntEnum):
    URF = 0
    UFL = 1
    ULB = 2
    UBR = 3
    DFR = 4
    DLF = 5
    DBL = 6
    DRB = 7


class Edge(IntEnum):
    UR = 0
    UF = 1
    UL = 2
    UB = 3
    DR = 4
    DF = 5
    DL = 6
    DB = 7
    FR = 8
    FL = 9
    BL = 10
    BR = 11


def cnk(n: int, k: int) -> int:
    """Binomial coefficient, zero when n < k."""
    if n < k:
        return 0
    if k > n // 2:
        k = n - k
    s = 1
    for i, j in zip(range(n, n - k, -1), range(1, k + 1)):
        s = s * i // j
    return s


def _rotate_left(arr: list[int], left: int, right: int) -> None:
    arr[left : right + 1] = arr[left + 1 : right + 1] + [arr[left]]


def _rotate_right(arr: list[int], left: int, right: int) -> None:
    arr[left : right + 1] = [arr[right]] + arr[left:right]


def _inversions_parity(values: list[int]) -> int:
    count = sum(
        1 for i, vi in enumerate(values) for vj in values[:i] if vj > vi
    )
    return count % 2


@dataclass
class CubieCube:
    """Corner/edge permutation (cp, ep) and orientation (co, eo)."""

    cp: list[int] = field(default_factory=lambda: [int(c) for c in Corner])
    co: list[int] = field(default_factory=lambda: [0] * 8)
    ep: list[int] = field(default_factory=lambda: [int(e) for e in Edge])
    eo: list[int] = field(default_factory=lambda: [0] * 12)

    def corner_multiply(self, other: CubieCube) -> None:
        """Replace the corners with this cube's corners followed by ``other``."""
        cp = [self.cp[p] for p in other.cp]
        co = [(self.co[p] + o) % 3 for p, o in zip(other.cp, other.co)]
        self.cp, self.co = cp, co

    def edge_multiply(self, other: CubieCube) -> None:
        """Replace the edges with this cube's edges followed by ``other``."""
        ep = [self.ep[p] for p in other.ep]
        eo = [(o + self.eo[e]) % 2 for o, e in zip(other.eo, ep)]
        self.ep, self.eo = ep, eo

    def multiply(self, other: CubieCube) -> None:
        self.corner_multiply(other)
        self.edge_multiply(other)

    @property
    def twist(self) -> int:
        """Corner orientation coordinate, 0 <= twist < 3**7."""
        ret = 0
        for o in self.co[:7]:
            ret = 3 * ret + o
        return ret

    @twist.setter
    def twist(self, value: int) -> None:
        parity = 0
        for i in range(6, -1, -1):
            value, self.co[i] = divmod(value, 3)
            parity += self.co[i]
        self.co[7] = (3 - parity % 3) % 3

    @property
    def flip(self) -> int:
        """Edge orientation coordinate, 0 <= flip < 2**11."""
        ret = 0
        for o in self.eo[:11]:
            ret = 2 * ret + o
        return ret

    @flip.setter
    def flip(self, value: int) -> None:
        parity = 0
        for i in range(10, -1, -1):
            value, self.eo[i] = divmod(value, 2)
            parity += self.eo[i]
        self.eo[11] = (2 - parity % 2) % 2

    def corner_parity(self) -> int:
        return _inversions_parity(self.cp)

    def edge_parity(self) -> int:
        return _inversions_parity(self.ep)

    @property
    def fr_to_br(self) -> int:
        """Position and order of the four UD-slice edges, 0 <= value < 11880."""
        a = 0
        x = 0
        edge4 = [0] * 4
        for j in range(11, -1, -1):
            if Edge.FR <= self.ep[j] <= Edge.BR:
                a += cnk(11 - j, x + 1)
                edge4[3 - x] = self.ep[j]
                x += 1
        b = 0
        for j in range(3, 0, -1):
            k = 0
            while edge4[j] != j + 8:
                _rotate_left(edge4, 0, j)
                k += 1
            b = (j + 1) * b + k
        return 24 * a + b

    @fr_to_br.setter
    def fr_to_br(self, idx: int) -> None:
        slice_edges = [int(Edge.FR), int(Edge.FL), int(Edge.BL), int(Edge.BR)]
        other_edges = [int(e) for e in Edge if e < Edge.FR]
        a, b = divmod(idx, 24)
        self.ep = [int(Edge.DB)] * 12
        for j in range(1, 4):
            b, k = divmod(b, j + 1)
            for _ in range(k):
                _rotate_right(slice_edges, 0, j)
        x = 3
        for j in range(12):
            c = cnk(11 - j, x + 1)
            if a - c >= 0:
                self.ep[j] = slice_edges[3 - x]
                a -= c
                x -= 1
        others = iter(other_edges)
        self.ep = [next(others) if e == Edge.DB else e for e in self.ep]

    def move(self, move: int) -> None:
        """Apply a clockwise quarter turn: 0=U, 1=R, 2=F, 3=D, 4=L, 5=B."""
        if not 0 <= move < len(_MOVE_CUBES):
            raise ValueError(f"unknown move: {move!r}")
        cp, co, ep, eo = _MOVE_CUBES[move]
        orig_cp, orig_co, orig_ep, orig_eo = self.cp, self.co, self.ep, self.eo
        self.cp = [orig_cp[i] for i in cp]
        self.co = [(orig_co[i] + o) % 3 for i, o in zip(cp, co)]
        self.ep = [orig_ep[i] for i in ep]
        self.eo = [(orig_eo[i] + o) % 2 for i, o in zip(ep, eo)]

    def is_solved(self) -> bool:
        return (
            self.cp == list(range(8))
            and not any(self.co)
            and self.ep == list(range(12))
            and not any(self.eo)
        )


_C = Corner
_E = Edge

_MOVE_CUBES: tuple[tuple[tuple[int, ...], ...], ...] = (
    (
        (_C.UBR, _C.URF, _C.UFL, _C.ULB, _C.DFR, _C.DLF, _C.DBL, _C.DRB),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (_E.UB, _E.UR, _E.UF, _E.UL, _E.DR, _E.DF, _E.DL, _E.DB, _E.FR, _E.FL, _E.BL, _E.BR),
        (0,) * 12,
    ),
    (
        (_C.DFR, _C.UFL, _C.ULB, _C.URF, _C.DRB, _C.DLF, _C.DBL, _C.UBR),
        (2, 0, 0, 1, 1, 0, 0, 2),
        (_E.FR, _E.UF, _E.UL, _E.UB, _E.BR, _E.DF, _E.DL, _E.DB, _E.DR, _E.FL, _E.BL, _E.UR),
        (0,) * 12,
    ),
    (
        (_C.UFL, _C.DLF, _C.ULB, _C.UBR, _C.URF, _C.DFR, _C.DBL, _C.DRB),
        (1, 2, 0, 0, 2, 1, 0, 0),
        (_E.UR, _E.FL, _E.UL, _E.UB, _E.DR, _E.FR, _E.DL, _E.DB, _E.UF, _E.DF, _E.BL, _E.BR),
        (0, 1, 0, 0, 0, 1, 0, 0, 1, 1, 0, 0),
    ),
    (
        (_C.URF, _C.UFL, _C.ULB, _C.UBR, _C.DLF, _C.DBL, _C.DRB, _C.DFR),
        (0, 0, 0, 0, 0, 0, 0, 0),
        (_E.UR, _E.UF, _E.UL, _E.UB, _E.DF, _E.DL, _E.DB, _E.DR, _E.FR, _E.FL, _E.BL, _E.BR),
        (0,) * 12,
    ),
    (
        (_C.URF, _C.ULB, _C.DBL, _C.UBR, _C.DFR, _C.UFL, _C.DLF, _C.DRB),
        (0, 1, 2, 0, 0, 2, 1, 0),
        (_E.UR, _E.UF, _E.BL, _E.UB, _E.DR, _E.DF, _E.FL, _E.DB, _E.FR, _E.UL, _E.DL, _E.BR),
        (0,) * 12,
    ),
    (
        (_C.URF, _C.UFL, _C.UBR, _C.DRB, _C.DFR, _C.DLF, _C.ULB, _C.DBL),
        (0, 0, 1, 2, 0, 0, 2, 1),
        (_E.UR, _E.UF, _E.UL, _E.BR, _E.DR, _E.DF, _E.DL, _E.BL, _E.FR, _E.FL, _E.UB, _E.DB),
        (0, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 1),
    ),
)