import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from matrix_puzzle.matrix import MalformedGridError, MatrixSolver, SearchBudgetExceeded, solve
from matrix_puzzle.matrix.solver import load_puzzle, main

SAMPLE_GRID = [
    [1, 1, 1],
    [1, "D", 1],
    ["S", 1, 1],
]


class MatrixSolverTests(unittest.TestCase):
    def test_sample_grid_solution(self) -> None:
        solution = MatrixSolver().solve(SAMPLE_GRID, 3)
        self.assertTrue(solution.found)
        self.assertEqual(solution.best_score, 3)
        self.assertEqual(solution.route_coordinates(), [(0, 2), (0, 1), (1, 1), (2, 1)])
        self.assertEqual(solution.finished_routes, 8)
        self.assertEqual(solution.grid_size, 3)
        self.assertEqual(solution.move_budget, 4)
        self.assertGreaterEqual(solution.elapsed_ms, 0.0)

    def test_solving_is_deterministic(self) -> None:
        grid = [
            [3, "D", 1, 7],
            [2, 5, "X", 1],
            ["S", 1, "D", 4],
            [6, "F", 2, 9],
        ]
        first = solve(grid, 5)
        second = solve(grid, 5)
        self.assertEqual(first.best_score, second.best_score)
        self.assertEqual(first.route_coordinates(), second.route_coordinates())
        self.assertEqual(first.finished_routes, second.finished_routes)

    def test_double_after_points_pays_off(self) -> None:
        solution = solve([["S", 5, "D"], [0, 0, 0], [0, 0, 0]], 2)
        self.assertEqual(solution.best_score, 10)
        self.assertEqual(solution.route_coordinates(), [(0, 0), (1, 0), (2, 0)])

    def test_no_route_is_reported_not_raised(self) -> None:
        solution = solve([["S", "X"], ["X", 1]], 1)
        self.assertFalse(solution.found)
        self.assertEqual(solution.best_score, 0)
        self.assertEqual(solution.route_coordinates(), [])
        payload = solution.to_dict()
        self.assertIsNone(payload["best_route"])
        self.assertFalse(payload["found"])

    def test_malformed_grid_raises(self) -> None:
        with self.assertRaises(MalformedGridError):
            solve([[1, 2], [3, 4]], 2)

    def test_iteration_cap_is_forwarded(self) -> None:
        with self.assertRaises(SearchBudgetExceeded):
            MatrixSolver(max_iterations=2).solve(SAMPLE_GRID, 3)

    def test_rejects_non_positive_iteration_cap(self) -> None:
        with self.assertRaises(ValueError):
            MatrixSolver(max_iterations=0)

    def test_to_dict_lists_resolved_points(self) -> None:
        payload = solve(SAMPLE_GRID, 3).to_dict()
        self.assertEqual(
            payload["best_route"],
            [
                {"x": 0, "y": 2, "value": "S"},
                {"x": 0, "y": 1, "value": 1},
                {"x": 1, "y": 1, "value": "D"},
                {"x": 2, "y": 1, "value": 1},
            ],
        )


class SolverCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_load_puzzle_accepts_both_layouts(self) -> None:
        bare = self.root / "bare.json"
        bare.write_text(json.dumps(SAMPLE_GRID), encoding="utf-8")
        wrapped = self.root / "wrapped.json"
        wrapped.write_text(json.dumps({"grid": SAMPLE_GRID, "moves_allowed": 3}), encoding="utf-8")

        self.assertEqual(load_puzzle(bare), (SAMPLE_GRID, None))
        self.assertEqual(load_puzzle(wrapped), (SAMPLE_GRID, 3))

    def test_main_prints_solution_json(self) -> None:
        path = self.root / "grid.json"
        path.write_text(json.dumps({"grid": SAMPLE_GRID, "moves_allowed": 3}), encoding="utf-8")
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main([str(path)])
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["best_score"], 3)
        self.assertEqual(payload["move_budget"], 4)

    def test_main_requires_moves(self) -> None:
        path = self.root / "grid.json"
        path.write_text(json.dumps(SAMPLE_GRID), encoding="utf-8")
        with self.assertRaises(SystemExit):
            main([str(path)])


if __name__ == "__main__":
    unittest.main()
