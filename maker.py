from __future__ import annotations

import random
from typing import Callable, List, Optional, Tuple

from directions import ALL_DIRECTIONS, Direction
from grid import Cell, Grid, d_print


def _available_neighbors(grid: Grid, cell: Cell) -> List[Tuple[Cell, Direction]]:
    """In-bounds neighbors of a cell with the direction leading to each, walls ignored."""
    neighbors = []
    for d in ALL_DIRECTIONS:
        neighbor = grid.move(cell, d)
        if grid.in_grid(neighbor):
            neighbors.append((neighbor, d))
    return neighbors


def _open_cells(grid: Grid, start: Cell, rng: random.Random, on_visit: Callable[[Cell], None]) -> None:
    """
    Randomized depth-first carving from start.

    Each stack frame holds a cell and the neighbors it has not tried yet, in
    the random order drawn when the cell was entered. A cell is carved into
    as soon as it is found unvisited, so the tree grows depth first.
    """
    def enter(cell: Cell):
        grid.set_visited(cell)
        on_visit(cell)
        neighbors = _available_neighbors(grid, cell)
        rng.shuffle(neighbors)
        return cell, iter(neighbors)

    stack = [enter(start)]
    while stack:
        cell, pending = stack[-1]
        for neighbor, d in pending:
            if not grid.is_visited(neighbor):
                grid.open_door(cell, d)
                stack.append(enter(neighbor))
                break
        else:
            stack.pop()


def make_maze(
            rows: int,
            cols: int,
            rng: Optional[random.Random] = None,
            on_visit: Callable[[Cell], None] = lambda _ : None,
        ) -> Grid:
    """
    Generate a perfect maze: every cell is reachable from every other by
    exactly one path. One entrance is opened on the left edge and one exit
    on the right edge, each on its own random row.

    :param rng: Anything with randrange() and shuffle(). Defaults to a fresh random.Random.
    :param on_visit: Called once for every cell as the carver reaches it.
    """
    grid = Grid(rows, cols)
    if rng is None:
        rng = random.Random()

    start = Cell(rng.randrange(rows), rng.randrange(cols))
    d_print(f"Carving {rows}x{cols} maze from {start}")
    _open_cells(grid, start, rng, on_visit)

    entrance_row = rng.randrange(rows)
    exit_row = rng.randrange(rows)
    grid.open_door(Cell(entrance_row, 0), Direction.LEFT)
    grid.open_door(Cell(exit_row, cols - 1), Direction.RIGHT)
    d_print(f"Entrance at row {entrance_row}, exit at row {exit_row}, {grid.passage_count()} passages")
    return grid
