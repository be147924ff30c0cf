"""Matrix puzzle evaluator: score a proposed route against a stored puzzle."""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..base import AbstractPuzzleEvaluator
from .grid import Grid
from .scoring import Number, score_route
from .search import STILL, Route, Vector, is_reversal

Coordinate = Tuple[int, int]


@dataclass
class MatrixEvaluationResult:
    puzzle_id: str
    is_valid_route: bool
    score: Number
    best_score: Number
    is_optimal: bool
    message: str

    def to_dict(self) -> dict:
        return {
            "puzzle_id": self.puzzle_id,
            "is_valid_route": self.is_valid_route,
            "score": self.score,
            "best_score": self.best_score,
            "is_optimal": self.is_optimal,
            "message": self.message,
        }


class MatrixEvaluator(AbstractPuzzleEvaluator):
    """Check a candidate route against the search's movement rules, then score it.

    A legal candidate scoring above the recorded best raises ``ValueError``:
    the record no longer matches its grid.
    """

    required_fields = ("grid", "moves_allowed")

    def evaluate(
        self,
        puzzle_id: str,
        candidate: Sequence[Sequence[int]],
    ) -> MatrixEvaluationResult:
        record = self.get_record(puzzle_id)
        grid = Grid(record["grid"])
        moves_allowed = int(record["moves_allowed"])
        best_score = record.get("best_score", 0)
        cells: List[Coordinate] = [(int(x), int(y)) for x, y in candidate]

        problem = self._shape_problem(cells, grid, moves_allowed)
        if problem is not None:
            return MatrixEvaluationResult(
                puzzle_id=puzzle_id,
                is_valid_route=False,
                score=0,
                best_score=best_score,
                is_optimal=False,
                message=problem,
            )

        route = self._build_route(cells, grid)
        result = score_route(route)
        if result.valid and result.total > best_score:
            raise ValueError(
                f"Puzzle '{puzzle_id}' records best score {best_score}, "
                f"but a legal route scores {result.total}"
            )

        is_optimal = result.valid and best_score > 0 and result.total == best_score
        if not result.valid:
            message = "Route crosses a wall."
        elif is_optimal:
            message = "Route matches the best score."
        elif best_score <= 0:
            message = "Puzzle has no scoring route."
        else:
            message = f"Route scores {result.total}, best is {best_score}."

        return MatrixEvaluationResult(
            puzzle_id=puzzle_id,
            is_valid_route=result.valid,
            score=result.total,
            best_score=best_score,
            is_optimal=is_optimal,
            message=message,
        )

    # ------------------------------------------------------------------

    @staticmethod
    def _shape_problem(
        cells: Sequence[Coordinate],
        grid: Grid,
        moves_allowed: int,
    ) -> Optional[str]:
        if not cells:
            return "Route is empty."
        if cells[0] != grid.start:
            return f"Route must begin on the start cell {grid.start}."
        if len(cells) != moves_allowed + 1:
            return f"Route has {len(cells)} cells, expected {moves_allowed + 1}."
        for index, (x, y) in enumerate(cells):
            if not grid.contains(x, y):
                return f"Cell {index} ({x}, {y}) is outside the grid."
        previous: Vector = STILL
        for index, (prev, cell) in enumerate(zip(cells, cells[1:]), start=1):
            step = (cell[0] - prev[0], cell[1] - prev[1])
            if abs(step[0]) + abs(step[1]) != 1:
                return f"Step {index} from {prev} to {cell} is not a single orthogonal move."
            if is_reversal(previous, step):
                return f"Step {index} from {prev} to {cell} doubles straight back."
            previous = step
        return None

    @staticmethod
    def _build_route(cells: Sequence[Coordinate], grid: Grid) -> Route:
        route = Route.starting_at(*cells[0])
        for prev, cell in zip(cells, cells[1:]):
            route.extend((cell[0] - prev[0], cell[1] - prev[1]), grid)
        return route


__all__ = ["MatrixEvaluator", "MatrixEvaluationResult"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a route through a matrix puzzle")
    parser.add_argument("metadata", type=Path, help="Path to matrix puzzles metadata JSON")
    parser.add_argument("puzzle_id", type=str, help="Identifier of the puzzle to evaluate")
    parser.add_argument("candidate", type=Path, help="JSON file with the route as [[x, y], ...]")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    evaluator = MatrixEvaluator(args.metadata)
    candidate = json.loads(args.candidate.read_text(encoding="utf-8"))
    result = evaluator.evaluate(args.puzzle_id, candidate)
    print(json.dumps(result.to_dict(), indent=2))


if __name__ == "__main__":
    main()
