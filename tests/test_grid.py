import unittest
import sys
import os

# Add project root to path so we can import maze_carver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid, Cell, Direction

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        cols, rows = 10, 7
        grid = Grid(cols, rows)
        self.assertEqual(grid.cells.shape, (rows, cols), f"Grid shape mismatch, got {grid.cells.shape}")
        self.assertEqual(grid.count(Cell.WALL), cols * rows)
        self.assertEqual(grid.count(Cell.EMPTY), 0)

    def test_rejects_degenerate_sizes(self):
        for cols, rows in [(0, 5), (5, 0), (-3, 5), (1, 1), (2, 2), (2, 10)]:
            with self.assertRaises(ValueError):
                Grid(cols, rows)

    def test_rejects_non_integer_sizes(self):
        with self.assertRaises(ValueError):
            Grid(5.0, 5)
        with self.assertRaises(ValueError):
            Grid(True, 5)

    def test_get_set(self):
        grid = Grid(5, 4)
        grid.set(2, 3, Cell.EMPTY)
        self.assertEqual(grid.get(2, 3), Cell.EMPTY)
        # row/col order: (3, 2) is a different cell
        self.assertEqual(grid.get(3, 2), Cell.WALL)

    def test_bounds_checked(self):
        grid = Grid(5, 4)
        with self.assertRaises(IndexError):
            grid.get(-1, 0)
        with self.assertRaises(IndexError):
            grid.get(4, 0)
        with self.assertRaises(IndexError):
            grid.set(0, 5, Cell.EMPTY)

    def test_out_of_bounds_ring(self):
        grid = Grid(7, 5)
        # The outer ring is never carvable
        self.assertTrue(grid.is_out_of_bounds((0, 2)))
        self.assertTrue(grid.is_out_of_bounds((6, 2)))
        self.assertTrue(grid.is_out_of_bounds((3, 0)))
        self.assertTrue(grid.is_out_of_bounds((3, 4)))
        self.assertTrue(grid.is_out_of_bounds((-1, 2)))
        self.assertTrue(grid.is_out_of_bounds((3, 9)))

        self.assertFalse(grid.is_out_of_bounds((1, 1)))
        self.assertFalse(grid.is_out_of_bounds((5, 3)))

    def test_direction_step(self):
        self.assertEqual(Direction.NORTH.step((3, 3), 2), (3, 1))
        self.assertEqual(Direction.SOUTH.step((3, 3), 2), (3, 5))
        self.assertEqual(Direction.EAST.step((3, 3), 1), (4, 3))
        self.assertEqual(Direction.WEST.step((3, 3), 1), (2, 3))

    def test_carve(self):
        grid = Grid(5, 5)
        grid.carve((1, 1), Direction.EAST)
        self.assertTrue(grid.is_empty((1, 1)))
        self.assertTrue(grid.is_empty((2, 1)))
        self.assertFalse(grid.is_empty((3, 1)))
        self.assertEqual(grid.count(Cell.EMPTY), 2)

    def test_open_neighbors(self):
        grid = Grid(5, 5)
        grid.carve((1, 1), Direction.EAST)
        grid.carve((1, 1), Direction.SOUTH)
        self.assertEqual(sorted(grid.get_open_neighbors(1, 1)), [(1, 2), (2, 1)])
        self.assertEqual(list(grid.get_open_neighbors(3, 3)), [])

    def test_to_text(self):
        grid = Grid(4, 3)
        grid.set(1, 1, Cell.EMPTY)
        grid.set(1, 2, Cell.EMPTY)
        self.assertEqual(grid.to_text(), "####\n#  #\n####")
        self.assertEqual(str(grid), grid.to_text())
        self.assertEqual(grid.to_text(wall="X", empty="."), "XXXX\nX..X\nXXXX")

if __name__ == '__main__':
    unittest.main()
