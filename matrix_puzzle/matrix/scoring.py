"""Route scoring and best-route selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from .grid import CellKind
from .search import Route, RoutePoint

Number = Union[int, float]


@dataclass(frozen=True)
class RouteScore:
    total: Number
    valid: bool


@dataclass(frozen=True)
class BestRoute:
    route: Optional[Route]
    score: Number

    @property
    def found(self) -> bool:
        return self.route is not None


def score_route(route: Union[Route, Sequence[RoutePoint]]) -> RouteScore:
    """Walk the points in order.

    Numbers add themselves, a double adds the running total again and a wall
    marks the route invalid. The walk always runs to the last point, walls
    included.
    """

    points = route.points if isinstance(route, Route) else route
    total: Number = 0
    valid = True
    for point in points:
        kind = point.value.kind
        if kind is CellKind.DOUBLE:
            point_value = total
        elif kind is CellKind.WALL:
            valid = False
            point_value = 0
        elif kind in (CellKind.NUMBER, CellKind.START, CellKind.FREE):
            point_value = point.value.score
        else:  # pragma: no cover
            raise ValueError(f"Unhandled cell kind: {kind}")
        total += point_value
    return RouteScore(total=total, valid=valid)


def select_best(finished_routes: Iterable[Route]) -> BestRoute:
    """Pick the valid route with the strictly highest positive score.

    Ties keep whichever route came first; a route scoring zero or less never
    beats the empty result.
    """

    best_route: Optional[Route] = None
    best_score: Number = 0
    for route in finished_routes:
        result = score_route(route)
        if result.valid and result.total > best_score:
            best_route = route
            best_score = result.total
    return BestRoute(route=best_route, score=best_score)


__all__ = ["BestRoute", "RouteScore", "score_route", "select_best"]
