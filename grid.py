"""
grid.py: The rectangular maze grid.

The Grid owns all per-cell state: a numpy array of door bitmasks and two
bitsets, one used while carving (visited) and one used for the solution
overlay (on_path). A Cell is only a (row, col) position; every question about
a cell is asked of the Grid it belongs to.

Coordinates outside the grid are never stored. Reading them reports no open
door and no mark, writing them does nothing.
"""
from __future__ import annotations
import sys
from typing import Generator, NamedTuple

import numpy as np
from bitarray import bitarray

from directions import ALL_DIRECTIONS, Direction, opposite, to_door_mask, to_dy_dx

# --- Debug Logging ---
DBG = False
def d_print(*args, **kwargs):
    if not DBG:
        return
    print("[MAZE DBG]", *args, **kwargs, file=sys.stderr)


class Cell(NamedTuple):
    """A position in a grid. Not gated by bounds; see Grid.in_grid."""
    row: int
    col: int


# Returned by lookups that find nothing
NO_CELL = Cell(-1, -1)

CellSequence = Generator[Cell, None, None]


class Grid:
    """
    A rows x cols maze. Doors are stored per cell as a bitmask, and opening
    a door always opens the matching door on the other side of the wall.
    """

    class InvalidDimensions(ValueError):
        """Rows or columns were not positive"""
        def __init__(self, rows: int, cols: int):
            super().__init__(f"Maze dimensions must be positive, got {rows}x{cols}")
            self.rows = rows
            self.cols = cols

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise self.InvalidDimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self._doors = np.zeros((rows, cols), dtype=np.uint8)
        self._visited = bitarray(rows * cols)
        self._visited.setall(0)
        self._on_path = bitarray(rows * cols)
        self._on_path.setall(0)

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def _index(self, cell: Cell) -> int:
        return cell.row * self.cols + cell.col

    def in_grid(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    # --- Doors ---

    def doors_of(self, cell: Cell) -> int:
        """Raw door bitmask of a cell, 0 outside the grid."""
        if not self.in_grid(cell):
            return 0
        return int(self._doors[cell.row, cell.col])

    def can_go(self, cell: Cell, d: Direction) -> bool:
        """Is there an open door from cell in direction d?"""
        if d == Direction.NONE or not self.in_grid(cell):
            return False
        return (self.doors_of(cell) & to_door_mask(d)) != 0

    def open_door(self, cell: Cell, d: Direction) -> None:
        """
        Open the door in direction d, and the opposite door of the neighbor
        if that neighbor is inside the grid.
        """
        if d == Direction.NONE or not self.in_grid(cell):
            return
        self._doors[cell.row, cell.col] |= to_door_mask(d)

        neighbor = self.move(cell, d)
        if self.in_grid(neighbor):
            self._doors[neighbor.row, neighbor.col] |= to_door_mask(opposite(d))

    def move(self, cell: Cell, d: Direction) -> Cell:
        """
        The cell one step from this one in direction d. Does NOT look at doors.
        A cell that is already outside the grid does not move.
        """
        if not self.in_grid(cell):
            return cell
        d_row, d_col = to_dy_dx(d)
        return Cell(cell.row + d_row, cell.col + d_col)

    def neighbors(self, cell: Cell) -> CellSequence:
        """Cells reachable from this one through a single open door."""
        for d in ALL_DIRECTIONS:
            if self.can_go(cell, d):
                neighbor = self.move(cell, d)
                if self.in_grid(neighbor):
                    yield neighbor

    def passage_count(self) -> int:
        """Number of open doors between two cells of the grid."""
        down = np.count_nonzero(self._doors[:-1, :] & to_door_mask(Direction.DOWN))
        right = np.count_nonzero(self._doors[:, :-1] & to_door_mask(Direction.RIGHT))
        return int(down + right)

    # --- Entrance and exit ---

    def is_entrance(self, cell: Cell) -> bool:
        return cell.col == 0 and self.can_go(cell, Direction.LEFT)

    def is_exit(self, cell: Cell) -> bool:
        return cell.col == self.cols - 1 and self.can_go(cell, Direction.RIGHT)

    def entrance(self) -> Cell:
        for cell in self.col(0):
            if self.can_go(cell, Direction.LEFT):
                return cell
        return NO_CELL

    def exit(self) -> Cell:
        for cell in self.col(self.cols - 1):
            if self.can_go(cell, Direction.RIGHT):
                return cell
        return NO_CELL

    # --- Marks ---

    def is_visited(self, cell: Cell) -> bool:
        return self.in_grid(cell) and bool(self._visited[self._index(cell)])

    def set_visited(self, cell: Cell, visited: bool = True) -> None:
        if self.in_grid(cell):
            self._visited[self._index(cell)] = visited

    def clear_visited(self) -> None:
        self._visited.setall(0)

    def is_on_path(self, cell: Cell) -> bool:
        return self.in_grid(cell) and bool(self._on_path[self._index(cell)])

    def set_on_path(self, cell: Cell, on_path: bool = True) -> None:
        if self.in_grid(cell):
            self._on_path[self._index(cell)] = on_path

    def clear_path(self) -> None:
        self._on_path.setall(0)

    def path_length(self) -> int:
        return self._on_path.count(1)

    # --- Traversal ---
    # Each call builds a new generator, so iterating again starts over.

    def row(self, row: int) -> CellSequence:
        """Cells of one row, left to right."""
        return (Cell(row, col) for col in range(self.cols))

    def col(self, col: int) -> CellSequence:
        """Cells of one column, top to bottom."""
        return (Cell(row, col) for row in range(self.rows))

    def all_cells(self) -> CellSequence:
        """Every cell, top-left to bottom-right in row-major order."""
        return (Cell(row, col) for row in range(self.rows) for col in range(self.cols))

    def all_rows(self) -> Generator[CellSequence, None, None]:
        return (self.row(row) for row in range(self.rows))

    def all_cols(self) -> Generator[CellSequence, None, None]:
        return (self.col(col) for col in range(self.cols))
