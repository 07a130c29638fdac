"""Checking the solver's entries against the generated solution."""

from __future__ import annotations

from typing import List, Tuple

from .grid import CrosswordGrid


def is_solved(grid: CrosswordGrid) -> bool:
    """True when every non-blocked cell holds its solution letter."""

    for cell in grid.iter_cells():
        if cell.blocked:
            continue
        if cell.value.upper() != cell.solution.upper():
            return False
    return True


def wrong_cells(grid: CrosswordGrid) -> List[Tuple[int, int]]:
    """Coordinates of non-blocked cells whose entry disagrees with the solution."""

    return [
        (cell.row, cell.col)
        for cell in grid.iter_cells()
        if not cell.blocked and cell.value.upper() != cell.solution.upper()
    ]


def reveal(grid: CrosswordGrid) -> CrosswordGrid:
    """Copy every solution letter into the solver's entry. Idempotent."""

    for cell in grid.iter_cells():
        if not cell.blocked:
            cell.value = cell.solution
    return grid
