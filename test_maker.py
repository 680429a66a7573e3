import random
import unittest
from typing import List

from directions import ALL_DIRECTIONS, Direction, opposite
from grid import Cell, Grid
from maker import make_maze


class ScriptedRandom:
    """A random source that returns canned randrange values and never shuffles."""
    def __init__(self, values: List[int]):
        self.values = list(values)

    def randrange(self, stop: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} out of range({stop})"
        return value

    def shuffle(self, items: list) -> None:
        pass


def count_reachable(grid: Grid, start: Cell) -> int:
    seen = {start}
    stack = [start]
    while stack:
        for neighbor in grid.neighbors(stack.pop()):
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)
    return len(seen)


class TestMakeMaze(unittest.TestCase):

    SIZES = [(1, 1), (1, 7), (6, 1), (2, 2), (5, 8), (12, 9)]

    def _mazes(self):
        for rows, cols in self.SIZES:
            for seed in range(5):
                yield make_maze(rows, cols, rng=random.Random(seed))

    def test_is_spanning_tree(self):
        """Every cell is connected and there are exactly rows*cols - 1 passages."""
        for grid in self._mazes():
            cells = grid.rows * grid.cols
            self.assertEqual(grid.passage_count(), cells - 1, f"{grid} is not a tree")
            self.assertEqual(count_reachable(grid, Cell(0, 0)), cells, f"{grid} is not connected")

    def test_every_cell_visited(self):
        for grid in self._mazes():
            self.assertTrue(all(grid.is_visited(c) for c in grid.all_cells()))

    def test_doors_are_reciprocal(self):
        """canGo(cell, d) matches canGo(move(cell, d), opposite(d)) inside the grid."""
        for grid in self._mazes():
            for cell in grid.all_cells():
                for d in ALL_DIRECTIONS:
                    neighbor = grid.move(cell, d)
                    if grid.in_grid(neighbor):
                        self.assertEqual(grid.can_go(cell, d), grid.can_go(neighbor, opposite(d)))

    def test_one_entrance_and_one_exit(self):
        """Exactly one left-edge door and one right-edge door."""
        for grid in self._mazes():
            left = [c for c in grid.col(0) if grid.can_go(c, Direction.LEFT)]
            right = [c for c in grid.col(grid.cols - 1) if grid.can_go(c, Direction.RIGHT)]
            self.assertEqual(len(left), 1)
            self.assertEqual(len(right), 1)
            self.assertEqual(grid.entrance(), left[0])
            self.assertEqual(grid.exit(), right[0])

    def test_no_doors_leave_top_or_bottom(self):
        for grid in self._mazes():
            for cell in grid.row(0):
                self.assertFalse(grid.can_go(cell, Direction.UP))
            for cell in grid.row(grid.rows - 1):
                self.assertFalse(grid.can_go(cell, Direction.DOWN))

    def test_same_seed_same_maze(self):
        """The random source fully determines the maze."""
        a = make_maze(7, 9, rng=random.Random(42))
        b = make_maze(7, 9, rng=random.Random(42))
        self.assertEqual([a.doors_of(c) for c in a.all_cells()], [b.doors_of(c) for c in b.all_cells()])

    def test_rejects_bad_dimensions(self):
        with self.assertRaises(Grid.InvalidDimensions):
            make_maze(0, 5, rng=random.Random(1))
        with self.assertRaises(Grid.InvalidDimensions):
            make_maze(5, -2, rng=random.Random(1))

    def test_large_maze_does_not_recurse(self):
        """Carving a long corridor does not hit the recursion limit."""
        grid = make_maze(1, 5000, rng=random.Random(3))
        self.assertEqual(grid.passage_count(), 4999)

    def test_on_visit_called_once_per_cell(self):
        visits = []
        make_maze(4, 6, rng=random.Random(9), on_visit=visits.append)
        self.assertEqual(len(visits), 24)
        self.assertEqual(len(set(visits)), 24)

    def test_one_by_one(self):
        """A single cell has only the entrance and exit doors."""
        grid = make_maze(1, 1, rng=ScriptedRandom([0, 0, 0, 0]))
        self.assertEqual(grid.doors_of(Cell(0, 0)), 4 | 8)
        self.assertEqual(grid.passage_count(), 0)
        self.assertEqual(grid.entrance(), Cell(0, 0))
        self.assertEqual(grid.exit(), Cell(0, 0))

    def test_two_by_two_scripted(self):
        """
        Start at (0, 0) with no shuffling: the carver goes down, right, then up.
        Entrance on row 1, exit on row 0.
        """
        grid = make_maze(2, 2, rng=ScriptedRandom([0, 0, 1, 0]))
        self.assertEqual(grid.doors_of(Cell(0, 0)), 2)            # down
        self.assertEqual(grid.doors_of(Cell(0, 1)), 2 | 8)        # down, exit
        self.assertEqual(grid.doors_of(Cell(1, 0)), 1 | 4 | 8)    # up, entrance, right
        self.assertEqual(grid.doors_of(Cell(1, 1)), 1 | 4)        # up, left


if __name__ == '__main__':
    unittest.main()
