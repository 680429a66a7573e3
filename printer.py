"""
printer.py: Text rendering of a maze, with or without the solution path.

Each row of cells is drawn as two lines: a separator carrying the top walls,
then the cells themselves with their side walls. A bottom border closes the
maze, so a grid with R rows becomes 2*R + 1 lines.

Wall junctions are drawn with one of sixteen corner glyphs. The index is a
4-bit code of which arms of the junction are walls:

    bit 0: up    bit 1: right    bit 2: down    bit 3: left
"""
from __future__ import annotations
import io
from dataclasses import dataclass
from typing import TextIO, Tuple

from directions import Direction
from grid import Cell, Grid
from solver import is_solution_cell

UP_ARM = 0x1
RIGHT_ARM = 0x2
DOWN_ARM = 0x4
LEFT_ARM = 0x8

VERTICAL_BAR = 5        # corners[5] is a wall with only up and down arms
HORIZONTAL_BAR = 10     # corners[10] is a wall with only left and right arms
VERTICAL_PATH = 5       # solution_chars[5] joins a path running up and down
HORIZONTAL_PATH = 10    # solution_chars[10] joins a path running left and right


@dataclass(frozen=True)
class CharSet:
    """The characters used to draw a maze"""
    corners: Tuple[str, ...]          # 16 single characters, indexed by wall arms
    solution_chars: Tuple[str, ...]   # 16 three-character cell contents, indexed by path arms

    @property
    def horizontal_bar(self) -> str:
        return self.corners[HORIZONTAL_BAR] * 3

    @property
    def path_joint(self) -> str:
        """Drawn in a doorway between two solution cells on the same row."""
        return self.solution_chars[HORIZONTAL_PATH][1]


UNICODE_CHARSET = CharSet(
    corners=(
        ' ', '╹', '╺', '┗', '╻', '┃', '┏', '┣',
        '╸', '┛', '━', '┻', '┓', '┫', '┳', '╋',
    ),
    solution_chars=(
        "   ", "   ", "   ", " ╰┄",
        "   ", " ┆ ", " ╭┄", "   ",
        "   ", "┄╯ ", "┄┄┄", "   ",
        "┄╮ ", "   ", "   ", "   ",
    ),
)

ASCII_CHARSET = CharSet(
    corners=(
        ' ', '+', '+', '+',
        '+', '|', '+', '+',
        '+', '+', '-', '+',
        '+', '+', '+', '+',
    ),
    solution_chars=(
        "   ", "   ", "   ", " XX",
        "   ", " X ", " XX", "   ",
        "   ", "XX ", "XXX", "   ",
        "XX ", "   ", "   ", "   ",
    ),
)


def charset_for(ascii: bool) -> CharSet:
    return ASCII_CHARSET if ascii else UNICODE_CHARSET


class Printer:
    """Writes one maze to a text stream using a given CharSet."""

    def __init__(self, grid: Grid, charset: CharSet, out: TextIO):
        self.grid = grid
        self.charset = charset
        self.out = out

    def print(self) -> None:
        for row in range(self.grid.rows):
            self._print_row_separator(row)
            self._print_row(row)
        self._print_maze_bottom()

    def _solved_pair(self, cell: Cell, d: Direction) -> bool:
        """Both cell and its neighbor in direction d are on the solution path."""
        return is_solution_cell(self.grid, cell) and is_solution_cell(self.grid, self.grid.move(cell, d))

    def _corner_char(self, cell: Cell) -> str:
        """The junction at the top-left corner of cell."""
        grid = self.grid
        up_cell = grid.move(cell, Direction.UP)
        left_cell = grid.move(cell, Direction.LEFT)

        index = 0
        if not grid.can_go(up_cell, Direction.LEFT):
            index |= UP_ARM
        if not grid.can_go(cell, Direction.UP):
            index |= RIGHT_ARM
        if not (grid.is_entrance(cell) or grid.can_go(cell, Direction.LEFT)):
            index |= DOWN_ARM
        if not grid.can_go(left_cell, Direction.UP):
            index |= LEFT_ARM

        if cell.row == 0:
            index &= ~UP_ARM
        if cell.col == 0:
            index &= ~LEFT_ARM
        return self.charset.corners[index]

    def _row_separator_end(self, cell: Cell) -> str:
        """The junction at the top-right corner of the last cell in a row."""
        grid = self.grid
        up_cell = grid.move(cell, Direction.UP)

        index = 0
        if not (grid.in_grid(up_cell) and grid.is_exit(up_cell)):
            index |= UP_ARM
        if not grid.is_exit(cell):
            index |= DOWN_ARM
        if not grid.can_go(cell, Direction.UP):
            index |= LEFT_ARM

        if cell.row == 0:
            index &= ~UP_ARM
        return self.charset.corners[index]

    def _print_row_separator(self, row: int) -> None:
        parts = []
        for cell in self.grid.row(row):
            parts.append(self._corner_char(cell))
            if self.grid.can_go(cell, Direction.UP):
                if self._solved_pair(cell, Direction.UP):
                    parts.append(self.charset.solution_chars[VERTICAL_PATH])
                else:
                    parts.append("   ")
            else:
                parts.append(self.charset.horizontal_bar)
        parts.append(self._row_separator_end(Cell(row, self.grid.cols - 1)))
        self.out.write("".join(parts) + "\n")

    def _cell_contents(self, cell: Cell) -> str:
        grid = self.grid
        if not is_solution_cell(grid, cell):
            return "   "

        index = 0
        if grid.can_go(cell, Direction.UP) and self._solved_pair(cell, Direction.UP):
            index |= UP_ARM
        if grid.is_exit(cell) or grid.can_go(cell, Direction.RIGHT) and self._solved_pair(cell, Direction.RIGHT):
            index |= RIGHT_ARM
        if grid.can_go(cell, Direction.DOWN) and self._solved_pair(cell, Direction.DOWN):
            index |= DOWN_ARM
        if grid.is_entrance(cell) or grid.can_go(cell, Direction.LEFT) and self._solved_pair(cell, Direction.LEFT):
            index |= LEFT_ARM
        return self.charset.solution_chars[index]

    def _left_wall(self, cell: Cell) -> str:
        grid = self.grid
        if grid.is_entrance(cell):
            return self.charset.path_joint if is_solution_cell(grid, cell) else " "
        if grid.can_go(cell, Direction.LEFT):
            return self.charset.path_joint if self._solved_pair(cell, Direction.LEFT) else " "
        return self.charset.corners[VERTICAL_BAR]

    def _print_row(self, row: int) -> None:
        parts = []
        for cell in self.grid.row(row):
            parts.append(self._left_wall(cell))
            parts.append(self._cell_contents(cell))

        last_cell = Cell(row, self.grid.cols - 1)
        if self.grid.is_exit(last_cell):
            parts.append(self.charset.path_joint if is_solution_cell(self.grid, last_cell) else " ")
        else:
            parts.append(self.charset.corners[VERTICAL_BAR])
        self.out.write("".join(parts) + "\n")

    def _print_maze_bottom(self) -> None:
        last_row = self.grid.rows - 1
        parts = []
        for cell in self.grid.row(last_row):
            index = LEFT_ARM | RIGHT_ARM
            if not self.grid.can_go(cell, Direction.LEFT):
                index |= UP_ARM
            if cell.col == 0:
                index &= ~LEFT_ARM
            parts.append(self.charset.corners[index])
            parts.append(self.charset.horizontal_bar)

        index = LEFT_ARM
        if not self.grid.can_go(Cell(last_row, self.grid.cols - 1), Direction.RIGHT):
            index |= UP_ARM
        parts.append(self.charset.corners[index])
        self.out.write("".join(parts) + "\n")


def print_maze(grid: Grid, charset: CharSet, out: TextIO) -> None:
    """Write the maze to out. Solution cells, if any are marked, are drawn as a path."""
    Printer(grid, charset, out).print()


def render(grid: Grid, charset: CharSet) -> str:
    """Same as print_maze, but return the text."""
    buffer = io.StringIO()
    print_maze(grid, charset, buffer)
    return buffer.getvalue()
