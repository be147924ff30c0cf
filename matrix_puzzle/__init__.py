"""Scored-grid route puzzle toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
    "Grid",
    "MalformedGridError",
    "SearchBudgetExceeded",
    "MatrixSolver",
    "MatrixSolution",
    "MatrixGenerator",
    "MatrixPuzzleRecord",
    "MatrixEvaluator",
    "MatrixEvaluationResult",
]

from .base import AbstractPuzzleGenerator, AbstractPuzzleEvaluator
from .matrix import (
    Grid,
    MalformedGridError,
    SearchBudgetExceeded,
    MatrixSolver,
    MatrixSolution,
    MatrixGenerator,
    MatrixPuzzleRecord,
    MatrixEvaluator,
    MatrixEvaluationResult,
)
