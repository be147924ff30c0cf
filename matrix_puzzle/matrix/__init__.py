"""Matrix route puzzle: grid model, route search, scoring, generation and evaluation."""

__all__ = [
    "BestRoute",
    "CellKind",
    "CellValue",
    "Grid",
    "MalformedGridError",
    "MatrixEvaluationResult",
    "MatrixEvaluator",
    "MatrixGenerator",
    "MatrixPuzzleRecord",
    "MatrixSolution",
    "MatrixSolver",
    "Route",
    "RoutePoint",
    "RouteScore",
    "SearchBudgetExceeded",
    "SearchContext",
    "enumerate_routes",
    "parse_cell",
    "score_route",
    "select_best",
    "solve",
]

from .errors import MalformedGridError, SearchBudgetExceeded
from .grid import CellKind, CellValue, Grid, parse_cell
from .search import Route, RoutePoint, SearchContext, enumerate_routes
from .scoring import BestRoute, RouteScore, score_route, select_best
from .solver import MatrixSolution, MatrixSolver, solve
from .generator import MatrixGenerator, MatrixPuzzleRecord
from .evaluator import MatrixEvaluator, MatrixEvaluationResult
