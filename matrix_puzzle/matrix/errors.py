"""Errors raised by the matrix puzzle solver."""


class MalformedGridError(ValueError):
    """The grid is empty, not square, has an unknown cell, or lacks a single start."""


class SearchBudgetExceeded(RuntimeError):
    """Route enumeration ran past its configured iteration cap."""

    def __init__(self, limit: int, open_routes: int) -> None:
        super().__init__(
            f"Route search exceeded {limit} iterations with {open_routes} routes still open"
        )
        self.limit = limit
        self.open_routes = open_routes


__all__ = ["MalformedGridError", "SearchBudgetExceeded"]
