"""Exhaustive route enumeration over a matrix grid.

Routes start at the grid's start cell and grow one orthogonal step at a time.
Left, down and up moves branch off a copy of the route; a right move extends
the route itself. A route that cannot move right is dropped, so every surviving
route keeps making rightward progress while detouring vertically or backwards.

The route's movement vector forbids undoing the previous step: no left straight
after a right, no down straight after an up, and so on.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Tuple

from .errors import SearchBudgetExceeded
from .grid import FREE, START, CellValue, Grid

logger = logging.getLogger(__name__)

Vector = Tuple[int, int]

LEFT: Vector = (-1, 0)
DOWN: Vector = (0, 1)
UP: Vector = (0, -1)
RIGHT: Vector = (1, 0)
STILL: Vector = (0, 0)


@dataclass(frozen=True)
class RoutePoint:
    x: int
    y: int
    value: CellValue

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "value": self.value.to_raw()}


@dataclass
class Route:
    """Visited points in order plus the direction of the latest step."""

    points: List[RoutePoint]
    vector: Vector = STILL

    @classmethod
    def starting_at(cls, x: int, y: int) -> "Route":
        return cls(points=[RoutePoint(x, y, START)])

    @property
    def head(self) -> RoutePoint:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)

    def visits(self, x: int, y: int) -> bool:
        return any(point.x == x and point.y == y for point in self.points)

    def resolve_value(self, x: int, y: int, grid: Grid) -> CellValue:
        """Value of ``(x, y)`` for this route: ``FREE`` when already stepped on."""

        if self.visits(x, y):
            return FREE
        return grid.value_at(x, y)

    def extend(self, vector: Vector, grid: Grid) -> None:
        dx, dy = vector
        x, y = self.head.x + dx, self.head.y + dy
        value = self.resolve_value(x, y, grid)
        self.vector = vector
        self.points.append(RoutePoint(x, y, value))

    def branch(self, vector: Vector, grid: Grid) -> "Route":
        child = Route(points=list(self.points), vector=self.vector)
        child.extend(vector, grid)
        return child

    def coordinates(self) -> List[Tuple[int, int]]:
        return [(point.x, point.y) for point in self.points]

    def to_dict(self) -> dict:
        return {
            "vector": list(self.vector),
            "points": [point.to_dict() for point in self.points],
        }


@dataclass(frozen=True)
class SearchContext:
    """Everything a search needs; ``move_budget`` counts the start cell too."""

    grid: Grid
    moves_allowed: int
    max_iterations: Optional[int] = None
    move_budget: int = field(init=False)

    def __post_init__(self) -> None:
        # bool is an int subclass but never a move count
        if not isinstance(self.moves_allowed, int) or isinstance(self.moves_allowed, bool):
            raise TypeError(f"moves_allowed must be an integer, got {self.moves_allowed!r}")
        if self.moves_allowed < 0:
            raise ValueError("moves_allowed must be non-negative")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        object.__setattr__(self, "move_budget", self.moves_allowed + 1)


def is_reversal(previous: Vector, step: Vector) -> bool:
    """True when ``step`` undoes ``previous``, the only move a vector forbids."""

    return previous != STILL and step == (-previous[0], -previous[1])


def _branch_moves(route: Route, size: int) -> List[Vector]:
    head = route.head
    moves: List[Vector] = []
    if head.x > 0 and not is_reversal(route.vector, LEFT):
        moves.append(LEFT)
    if head.y < size - 1 and not is_reversal(route.vector, DOWN):
        moves.append(DOWN)
    if head.y > 0 and not is_reversal(route.vector, UP):
        moves.append(UP)
    return moves


def _can_move_right(route: Route, size: int) -> bool:
    return route.head.x < size - 1 and not is_reversal(route.vector, RIGHT)


def search(context: SearchContext) -> List[Route]:
    """Run the worklist until every route has finished or been dropped.

    The route at the head of the worklist is worked on until it finishes or
    dead-ends; branches queue up behind it. That ordering decides which of
    several equally scored routes is found first.
    """

    grid = context.grid
    size = grid.size
    open_routes: Deque[Route] = deque([Route.starting_at(*grid.start)])
    finished: List[Route] = []
    iterations = 0

    while open_routes:
        iterations += 1
        if context.max_iterations is not None and iterations > context.max_iterations:
            raise SearchBudgetExceeded(context.max_iterations, len(open_routes))

        route = open_routes[0]
        if len(route) == context.move_budget:
            finished.append(open_routes.popleft())
            continue

        for vector in _branch_moves(route, size):
            open_routes.append(route.branch(vector, grid))

        if _can_move_right(route, size):
            route.extend(RIGHT, grid)
        else:
            open_routes.popleft()

    logger.debug(
        "Enumerated %d finished routes in %d iterations (budget=%d points)",
        len(finished),
        iterations,
        context.move_budget,
    )
    return finished


def enumerate_routes(
    grid: Grid,
    moves_allowed: int,
    *,
    max_iterations: Optional[int] = None,
) -> List[Route]:
    """Return every route of ``moves_allowed + 1`` points, in discovery order."""

    context = SearchContext(grid=grid, moves_allowed=moves_allowed, max_iterations=max_iterations)
    return search(context)


__all__ = [
    "DOWN",
    "LEFT",
    "RIGHT",
    "Route",
    "RoutePoint",
    "STILL",
    "SearchContext",
    "UP",
    "Vector",
    "enumerate_routes",
    "is_reversal",
    "search",
]
