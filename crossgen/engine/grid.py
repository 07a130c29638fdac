"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterator, List

from ..core.constants import DEFAULT_GRID_SIZE
from ..core.exceptions import ConfigurationError
from ..core.models import Cell


class CrosswordGrid:
    """A square matrix of cells.

    Grids are treated as values by the search: every placement attempt works
    on :meth:`clone`, so sibling branches never observe each other's writes.
    """

    def __init__(self, size: int = DEFAULT_GRID_SIZE) -> None:
        if size <= 0:
            raise ConfigurationError(f"Grid size must be positive, got {size}")
        self.size = size
        self.cells: List[List[Cell]] = [
            [Cell(row=r, col=c) for c in range(size)] for r in range(size)
        ]

    def clone(self) -> "CrosswordGrid":
        other = CrosswordGrid.__new__(CrosswordGrid)
        other.size = self.size
        other.cells = [[cell.copy() for cell in row] for row in self.cells]
        return other

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    @property
    def letter_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.solution)

    @property
    def blocked_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.blocked)

    # ------------------------------------------------------------------
    # Solver input
    # ------------------------------------------------------------------
    def set_value(self, row: int, col: int, letter: str) -> None:
        """Record the solver's entry for a cell; blocked cells ignore input."""

        cell = self.cells[row][col]
        if cell.blocked:
            return
        cell.value = (letter or "")[:1].upper()

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self, include_solution: bool = True) -> List[List[dict]]:
        serialized: List[List[dict]] = []
        for row in self.cells:
            serialized_row: List[dict] = []
            for cell in row:
                entry = {
                    "row": cell.row,
                    "col": cell.col,
                    "blocked": cell.blocked,
                    "value": cell.value,
                    "clue_number": cell.clue_number,
                }
                if include_solution:
                    entry["solution"] = cell.solution
                serialized_row.append(entry)
            serialized.append(serialized_row)
        return serialized
