"""Random matrix puzzle generator.

Cells are drawn uniformly from 1..12; the top three draws become markers
(10 doubles the running total, 11 is a free cell, 12 is a wall). One random
cell is then overwritten with the start marker.
"""

from __future__ import annotations

import argparse
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from ..base import AbstractPuzzleGenerator, PathLike
from .grid import Grid, RawCell
from .scoring import Number
from .solver import MatrixSolver

MIN_SIZE = 3
ROW_LIMIT = 5
VALUE_RANGE = (1, 12)
MARKER_DRAWS = {10: "D", 11: "F", 12: "X"}


@dataclass
class MatrixPuzzleRecord:
    id: str
    grid: List[List[RawCell]]
    start: Tuple[int, int]
    moves_allowed: int
    best_score: Number
    best_route: List[Tuple[int, int]]

    @property
    def size(self) -> int:
        return len(self.grid)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "grid": self.grid,
            "size": self.size,
            "start": list(self.start),
            "moves_allowed": self.moves_allowed,
            "best_score": self.best_score,
            "best_route": [list(cell) for cell in self.best_route],
        }


class MatrixGenerator(AbstractPuzzleGenerator[MatrixPuzzleRecord]):
    """Generate random square grids and record their best route."""

    def __init__(
        self,
        output_dir: PathLike = "data/matrix",
        *,
        size: Optional[int] = None,
        moves: Optional[int] = None,
        seed: Optional[int] = None,
        max_iterations: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir)
        if size is not None and size < 1:
            raise ValueError("size must be at least 1")
        if moves is not None and moves < 0:
            raise ValueError("moves must be non-negative")
        self.size = size
        self.moves = moves
        self._rng = np.random.default_rng(seed)
        self._solver = MatrixSolver(max_iterations=max_iterations)

    def create_puzzle(
        self,
        *,
        puzzle_id: Optional[str] = None,
        size: Optional[int] = None,
    ) -> MatrixPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        grid_size = size or self.size or int(self._rng.integers(MIN_SIZE, ROW_LIMIT + 1))
        grid, start = self._random_grid(grid_size)
        moves_allowed = self.moves if self.moves is not None else grid_size + 1

        solution = self._solver.solve(Grid(grid), moves_allowed)

        return MatrixPuzzleRecord(
            id=puzzle_uuid,
            grid=grid,
            start=start,
            moves_allowed=moves_allowed,
            best_score=solution.best_score,
            best_route=solution.route_coordinates(),
        )

    def create_random_puzzle(self) -> MatrixPuzzleRecord:
        return self.create_puzzle()

    # ------------------------------------------------------------------

    def _random_grid(self, size: int) -> Tuple[List[List[RawCell]], Tuple[int, int]]:
        low, high = VALUE_RANGE
        draws = self._rng.integers(low, high + 1, size=(size, size))
        grid: List[List[RawCell]] = [
            [MARKER_DRAWS.get(value, value) for value in row]
            for row in draws.tolist()
        ]
        start_y, start_x = (int(v) for v in self._rng.integers(0, size, size=2))
        grid[start_y][start_x] = "S"
        return grid, (start_x, start_y)


__all__ = ["MatrixGenerator", "MatrixPuzzleRecord"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random matrix puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument("--output-dir", type=Path, default=Path("data/matrix"), help="Where to save metadata")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Grid side length (random between {MIN_SIZE} and {ROW_LIMIT} when omitted)",
    )
    parser.add_argument("--moves", type=int, default=None, help="Moves allowed (defaults to size + 1)")
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log solver progress to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    generator = MatrixGenerator(
        output_dir=args.output_dir,
        size=args.size,
        moves=args.moves,
        seed=args.seed,
        max_iterations=args.max_iterations,
    )
    metadata_path = generator.output_dir / "puzzles.json"
    records = generator.generate_dataset(args.count, metadata_path=metadata_path)
    print(f"Wrote {len(records)} puzzles to {metadata_path}")


if __name__ == "__main__":
    main()
