"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..core.models import Cell
    from ..engine.generator import CrosswordResult
    from ..engine.grid import CrosswordGrid


BLOCKED_SYMBOL = "#"
EMPTY_SYMBOL = "."


def cell_symbol(cell: Cell, show_solution: bool = True) -> str:
    if cell.blocked:
        return BLOCKED_SYMBOL
    letter = cell.solution if show_solution else cell.value
    return letter or EMPTY_SYMBOL


def format_grid(grid: CrosswordGrid, show_solution: bool = True) -> str:
    width = grid.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(width):
        row_cells = [cell_symbol(grid.cell(r, c), show_solution) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(result: CrosswordResult) -> str:
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value.upper())
        for clue in result.clues:
            if clue.direction == direction:
                lines.append(f"  {clue.number:>3}. {clue.text} ({clue.length})")
    return "\n".join(lines)


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid, clue list and stats for a generated crossword."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)
    print(file=stream)
    print(format_clues(result), file=stream)

    total_cells = grid.size * grid.size
    letters = grid.letter_count
    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.size} x {grid.size} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letters} ({letters / total_cells * 100:.0f}%)", file=stream)
    print(f"  Blocked:       {grid.blocked_count}", file=stream)

    lengths = [clue.length for clue in result.clues]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {result.placed_count}/{result.word_count}", file=stream)
    if lengths:
        dist = " ".join(f"{l}:{c}" for l, c in sorted(Counter(lengths).items()))
        print(f"  Distribution:  {dist}", file=stream)
    if result.timed_out:
        print("  Search stopped at its deadline", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
