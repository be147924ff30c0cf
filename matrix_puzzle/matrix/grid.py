"""Cell values and the immutable square grid they live in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple, Union

from .errors import MalformedGridError

Coordinate = Tuple[int, int]
RawCell = Union[int, float, str]


class CellKind(Enum):
    NUMBER = "number"
    START = "S"
    DOUBLE = "D"
    WALL = "X"
    FREE = "F"


@dataclass(frozen=True)
class CellValue:
    """A tagged cell value; ``number`` is only meaningful for ``NUMBER`` cells."""

    kind: CellKind
    number: Union[int, float] = 0

    @classmethod
    def of(cls, number: Union[int, float]) -> "CellValue":
        return cls(CellKind.NUMBER, number)

    @property
    def score(self) -> Union[int, float]:
        """Points the cell adds on its own (doubling is handled by the scorer)."""

        if self.kind is CellKind.NUMBER:
            return self.number
        return 0

    def to_raw(self) -> RawCell:
        if self.kind is CellKind.NUMBER:
            return self.number
        return self.kind.value

    def __str__(self) -> str:
        return str(self.to_raw())


START = CellValue(CellKind.START)
DOUBLE = CellValue(CellKind.DOUBLE)
WALL = CellValue(CellKind.WALL)
FREE = CellValue(CellKind.FREE)

_MARKERS = {
    "S": START,
    "D": DOUBLE,
    "X": WALL,
    "F": FREE,
}


def parse_cell(raw: object) -> CellValue:
    """Convert a raw JSON-ish cell (number or marker letter) into a ``CellValue``."""

    if isinstance(raw, CellValue):
        return raw
    # bool is an int subclass but never a score
    if isinstance(raw, bool):
        raise MalformedGridError(f"Unsupported cell value: {raw!r}")
    if isinstance(raw, (int, float)):
        return CellValue.of(raw)
    if isinstance(raw, str):
        try:
            return _MARKERS[raw.strip().upper()]
        except KeyError as exc:
            raise MalformedGridError(f"Unknown cell marker: {raw!r}") from exc
    raise MalformedGridError(f"Unsupported cell value: {raw!r}")


class Grid:
    """Square, read-only grid addressed as ``value_at(x, y)`` with ``x`` the column."""

    def __init__(self, rows: Sequence[Sequence[object]]) -> None:
        if not rows:
            raise MalformedGridError("Grid must contain at least one row")
        size = len(rows)
        cells: List[Tuple[CellValue, ...]] = []
        for y, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                raise MalformedGridError(f"Row {y} is not a sequence of cells: {row!r}")
            if len(row) != size:
                raise MalformedGridError(
                    f"Grid must be square: row {y} has {len(row)} cells, expected {size}"
                )
            cells.append(tuple(parse_cell(raw) for raw in row))
        self._cells: Tuple[Tuple[CellValue, ...], ...] = tuple(cells)
        self._size = size
        self._start = self._locate_start()

    @classmethod
    def from_raw(cls, rows: Union["Grid", Sequence[Sequence[object]]]) -> "Grid":
        if isinstance(rows, Grid):
            return rows
        return cls(rows)

    @property
    def size(self) -> int:
        return self._size

    @property
    def start(self) -> Coordinate:
        return self._start

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def value_at(self, x: int, y: int) -> CellValue:
        if not self.contains(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self._size}x{self._size} grid")
        return self._cells[y][x]

    def rows(self) -> Iterator[Tuple[CellValue, ...]]:
        return iter(self._cells)

    def to_raw(self) -> List[List[RawCell]]:
        return [[cell.to_raw() for cell in row] for row in self._cells]

    def _locate_start(self) -> Coordinate:
        starts = [
            (x, y)
            for y, row in enumerate(self._cells)
            for x, cell in enumerate(row)
            if cell.kind is CellKind.START
        ]
        if not starts:
            raise MalformedGridError("Grid has no start cell")
        if len(starts) > 1:
            raise MalformedGridError(f"Grid has {len(starts)} start cells: {starts}")
        return starts[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, start={self._start})"


__all__ = [
    "CellKind",
    "CellValue",
    "Coordinate",
    "DOUBLE",
    "FREE",
    "Grid",
    "RawCell",
    "START",
    "WALL",
    "parse_cell",
]
