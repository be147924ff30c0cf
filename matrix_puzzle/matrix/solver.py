"""Solve a matrix puzzle: enumerate every route, then keep the best one."""

from __future__ import annotations

import argparse
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .grid import Grid
from .scoring import Number, select_best
from .search import Route, SearchContext, search

logger = logging.getLogger(__name__)


@dataclass
class MatrixSolution:
    best_route: Optional[Route]
    best_score: Number
    finished_routes: int
    grid_size: int
    moves_allowed: int
    move_budget: int
    elapsed_ms: float

    @property
    def found(self) -> bool:
        return self.best_route is not None

    def route_coordinates(self) -> List[Tuple[int, int]]:
        if self.best_route is None:
            return []
        return self.best_route.coordinates()

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "best_score": self.best_score,
            "best_route": [point.to_dict() for point in self.best_route.points] if self.best_route else None,
            "finished_routes": self.finished_routes,
            "grid_size": self.grid_size,
            "moves_allowed": self.moves_allowed,
            "move_budget": self.move_budget,
            "elapsed_ms": self.elapsed_ms,
        }


class MatrixSolver:
    """Brute-force solver for scored-grid route puzzles.

    ``max_iterations`` caps the number of worklist steps; ``None`` lets the
    search run to completion however large the grid is.
    """

    def __init__(self, *, max_iterations: Optional[int] = None) -> None:
        if max_iterations is not None and max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        self.max_iterations = max_iterations

    def solve(
        self,
        grid: Union[Grid, Sequence[Sequence[object]]],
        moves_allowed: int,
    ) -> MatrixSolution:
        grid = Grid.from_raw(grid)
        context = SearchContext(
            grid=grid,
            moves_allowed=moves_allowed,
            max_iterations=self.max_iterations,
        )

        started = time.perf_counter()
        finished = search(context)
        best = select_best(finished)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        if best.found:
            logger.info(
                "Best score %s over %d routes on a %dx%d grid (%.2f ms)",
                best.score,
                len(finished),
                grid.size,
                grid.size,
                elapsed_ms,
            )
        else:
            logger.info("No valid route among %d finished routes", len(finished))

        return MatrixSolution(
            best_route=best.route,
            best_score=best.score,
            finished_routes=len(finished),
            grid_size=grid.size,
            moves_allowed=moves_allowed,
            move_budget=context.move_budget,
            elapsed_ms=elapsed_ms,
        )


def solve(
    grid: Union[Grid, Sequence[Sequence[object]]],
    moves_allowed: int,
    *,
    max_iterations: Optional[int] = None,
) -> MatrixSolution:
    return MatrixSolver(max_iterations=max_iterations).solve(grid, moves_allowed)


def load_puzzle(path: Path) -> Tuple[list, Optional[int]]:
    """Read a grid from JSON: either a bare list of rows or ``{"grid", "moves_allowed"}``."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, list):
        return payload, None
    if isinstance(payload, dict) and "grid" in payload:
        moves = payload.get("moves_allowed")
        return payload["grid"], int(moves) if moves is not None else None
    raise ValueError(f"Unrecognised puzzle file layout: {path}")


__all__ = ["MatrixSolver", "MatrixSolution", "load_puzzle", "solve"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the best-scoring route through a matrix puzzle")
    parser.add_argument("grid", type=Path, help="JSON file holding the grid rows")
    parser.add_argument(
        "--moves",
        type=int,
        default=None,
        help="Moves allowed (overrides moves_allowed stored in the file)",
    )
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log search progress to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    grid, stored_moves = load_puzzle(args.grid)
    moves = args.moves if args.moves is not None else stored_moves
    if moves is None:
        raise SystemExit("Moves allowed must be given with --moves or stored in the grid file")
    solution = MatrixSolver(max_iterations=args.max_iterations).solve(grid, moves)
    print(json.dumps(solution.to_dict(), indent=2))


if __name__ == "__main__":
    main()
