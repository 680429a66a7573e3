from __future__ import annotations

from typing import Dict, List, Optional

from grid import NO_CELL, Cell, Grid, d_print


def is_solution_cell(grid: Grid, cell: Cell) -> bool:
    """Is this cell on the marked path from entrance to exit?"""
    return grid.is_on_path(cell)


def _find_path(grid: Grid, start: Cell, goal: Cell) -> List[Cell]:
    """Depth-first search through open doors. Empty if goal is unreachable."""
    parents: Dict[Cell, Optional[Cell]] = {start: None}
    stack = [start]
    while stack:
        cell = stack.pop()
        if cell == goal:
            path = []
            step: Optional[Cell] = cell
            while step is not None:
                path.append(step)
                step = parents[step]
            path.reverse()
            return path
        for neighbor in grid.neighbors(cell):
            if neighbor not in parents:
                parents[neighbor] = cell
                stack.append(neighbor)
    return []


def solve(grid: Grid) -> List[Cell]:
    """
    Mark every cell on the path from the entrance to the exit and return the
    path, entrance first. Any previous solution is cleared first. If there is
    no entrance, no exit, or no way between them, nothing is marked.
    """
    grid.clear_path()
    entrance, exit_cell = grid.entrance(), grid.exit()
    if entrance == NO_CELL or exit_cell == NO_CELL:
        d_print("No entrance or exit, nothing to solve")
        return []

    path = _find_path(grid, entrance, exit_cell)
    for cell in path:
        grid.set_on_path(cell)
    d_print(f"Solved {entrance} -> {exit_cell}: {len(path)} cells")
    return path
