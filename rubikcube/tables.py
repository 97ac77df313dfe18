"""Phase-one pruning table indexed by corner, edge and UD-slice coordinates."""

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Union

from .core import (
    Cube,
    corner_orientation_coordinate,
    edge_orientation_coordinate,
    uds_coordinate,
)

logger = logging.getLogger(__name__)

CORNER_ORIENTATIONS = 2187
EDGE_ORIENTATIONS = 2048
UD_SLICES = 495

DEFAULT_FILENAME = "phase1.bin"

_MAGIC = b"PH1T"
_HEADER = struct.Struct("<4sIIII")
_ENTRY = struct.Struct("<IB")

PathLike = Union[str, Path]


class Phase1Table:
    """Byte values over [cor][eor][udslice]; unset cells read as zero."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[int, int] = {}

    @staticmethod
    def _index(cor: int, eor: int, udslice: int) -> int:
        if not 0 <= cor < CORNER_ORIENTATIONS:
            raise IndexError(f"corner orientation out of range: {cor}")
        if not 0 <= eor < EDGE_ORIENTATIONS:
            raise IndexError(f"edge orientation out of range: {eor}")
        if not 0 <= udslice < UD_SLICES:
            raise IndexError(f"UD-slice coordinate out of range: {udslice}")
        return (cor * EDGE_ORIENTATIONS + eor) * UD_SLICES + udslice

    def get(self, cor: int, eor: int, udslice: int) -> int:
        return self._cells.get(self._index(cor, eor, udslice), 0)

    def set(self, cor: int, eor: int, udslice: int, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError(f"value must fit in a byte: {value}")
        index = self._index(cor, eor, udslice)
        if value:
            self._cells[index] = value
        else:
            self._cells.pop(index, None)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Phase1Table):
            return NotImplemented
        return self._cells == other._cells

    def _to_bytes(self) -> bytes:
        header = _HEADER.pack(
            _MAGIC, CORNER_ORIENTATIONS, EDGE_ORIENTATIONS, UD_SLICES, len(self._cells)
        )
        body = b"".join(_ENTRY.pack(i, v) for i, v in sorted(self._cells.items()))
        return header + body

    @classmethod
    def _from_bytes(cls, data: bytes) -> Phase1Table:
        if len(data) < _HEADER.size:
            raise ValueError("table file is truncated")
        magic, cor, eor, uds, count = _HEADER.unpack_from(data)
        if magic != _MAGIC:
            raise ValueError("not a phase1 table file")
        if (cor, eor, uds) != (CORNER_ORIENTATIONS, EDGE_ORIENTATIONS, UD_SLICES):
            raise ValueError("table file has unexpected dimensions")
        if len(data) != _HEADER.size + count * _ENTRY.size:
            raise ValueError("table file has wrong length")
        size = CORNER_ORIENTATIONS * EDGE_ORIENTATIONS * UD_SLICES
        table = cls()
        for index, value in _ENTRY.iter_unpack(data[_HEADER.size:]):
            if index >= size:
                raise ValueError(f"table file holds an index out of range: {index}")
            if value:
                table._cells[index] = value
        return table


def save_phase1_table(filename: PathLike, table: Phase1Table) -> None:
    """Write ``table`` to ``filename``."""
    logger.info("Saving phase1 table")
    Path(filename).write_bytes(table._to_bytes())
    logger.info("Phase1 table saved")


def load_phase1_table(filename: PathLike) -> Phase1Table:
    """Read a table written by :func:`save_phase1_table`."""
    logger.info("Loading phase1 table")
    table = Phase1Table._from_bytes(Path(filename).read_bytes())
    logger.info("Loading phase1 table finished")
    return table


def init_phase1_table(save: bool, filename: PathLike = DEFAULT_FILENAME) -> Phase1Table:
    """Create an all-zero table, writing it to ``filename`` when ``save`` is true."""
    logger.info("Initializing phase1 table")
    table = Phase1Table()
    if save:
        save_phase1_table(filename, table)
    return table


def insert_phase1_table_item(cube: Cube, length: int, table: Phase1Table) -> None:
    """Record ``length`` at the coordinates of ``cube``."""
    table.set(
        corner_orientation_coordinate(cube),
        edge_orientation_coordinate(cube),
        uds_coordinate(cube),
        length,
    )