import unittest

from matrix_puzzle.matrix import CellKind, CellValue, Grid, MalformedGridError, parse_cell


class ParseCellTests(unittest.TestCase):
    def test_numbers_become_number_cells(self) -> None:
        self.assertEqual(parse_cell(7), CellValue.of(7))
        self.assertEqual(parse_cell(2.5).score, 2.5)

    def test_markers_are_case_insensitive(self) -> None:
        self.assertIs(parse_cell("s").kind, CellKind.START)
        self.assertIs(parse_cell("D").kind, CellKind.DOUBLE)
        self.assertIs(parse_cell("x").kind, CellKind.WALL)
        self.assertIs(parse_cell("F").kind, CellKind.FREE)

    def test_markers_score_nothing_on_their_own(self) -> None:
        for raw in ("S", "D", "X", "F"):
            self.assertEqual(parse_cell(raw).score, 0)

    def test_rejects_unknown_values(self) -> None:
        for raw in ("Q", True, None, [1]):
            with self.assertRaises(MalformedGridError):
                parse_cell(raw)


class GridTests(unittest.TestCase):
    def test_exposes_size_values_and_start(self) -> None:
        grid = Grid([[1, "S"], ["d", 4]])
        self.assertEqual(grid.size, 2)
        self.assertEqual(grid.start, (1, 0))
        self.assertEqual(grid.value_at(0, 1).kind, CellKind.DOUBLE)
        self.assertEqual(grid.value_at(1, 1), CellValue.of(4))
        self.assertEqual(grid.to_raw(), [[1, "S"], ["D", 4]])

    def test_value_outside_grid_raises(self) -> None:
        grid = Grid([["S"]])
        with self.assertRaises(IndexError):
            grid.value_at(1, 0)

    def test_copy_of_rows_is_not_shared(self) -> None:
        rows = [["S", 1], [2, 3]]
        grid = Grid(rows)
        rows[1][1] = "X"
        self.assertEqual(grid.value_at(1, 1), CellValue.of(3))

    def test_empty_grid_is_malformed(self) -> None:
        with self.assertRaises(MalformedGridError):
            Grid([])

    def test_non_square_grid_is_malformed(self) -> None:
        with self.assertRaises(MalformedGridError):
            Grid([["S", 1, 2], [1, 2, 3]])
        with self.assertRaises(MalformedGridError):
            Grid([["S", 1], [1]])

    def test_grid_without_start_is_malformed(self) -> None:
        with self.assertRaises(MalformedGridError):
            Grid([[1, 2], [3, 4]])

    def test_grid_with_two_starts_is_malformed(self) -> None:
        with self.assertRaises(MalformedGridError):
            Grid([["S", 2], [3, "s"]])

    def test_from_raw_passes_grids_through(self) -> None:
        grid = Grid([["S"]])
        self.assertIs(Grid.from_raw(grid), grid)
        self.assertEqual(Grid.from_raw([["S"]]), grid)


if __name__ == "__main__":
    unittest.main()
