"""Feasibility checks and placement writes for a single word."""

from __future__ import annotations

from typing import List

from ..core.constants import Direction
from ..core.models import Clue
from .grid import CrosswordGrid


def can_place(word: str, row: int, col: int, direction: Direction, grid: CrosswordGrid) -> bool:
    """Return whether ``word`` may occupy the span starting at ``(row, col)``.

    The span must leave at least one trailing cell inside the grid: that cell
    becomes the blocked separator written by :func:`place`.

    Besides the bounds and letter rules, the separator cell must not already
    hold a letter from a crossing word, so blocking it never hides a letter.
    """

    word = word.upper()
    length = len(word)
    if direction == Direction.ACROSS and col + length >= grid.size:
        return False
    if direction == Direction.DOWN and row + length >= grid.size:
        return False

    dr, dc = direction.step
    for index, letter in enumerate(word):
        cell = grid.cell(row + dr * index, col + dc * index)
        if cell.blocked:
            return False
        if cell.solution and cell.solution != letter:
            return False

    # The separator cell is always in bounds here and must not hide a letter.
    if grid.cell(row + dr * length, col + dc * length).solution:
        return False
    return True


def place(
    word: str,
    clue_text: str,
    row: int,
    col: int,
    direction: Direction,
    clue_number: int,
    grid: CrosswordGrid,
    clues: List[Clue],
) -> None:
    """Write ``word`` into ``grid`` and append its clue to ``clues``.

    Both arguments are mutated in place; callers pass clones.
    """

    word = word.upper()
    dr, dc = direction.step
    for index, letter in enumerate(word):
        cell = grid.cell(row + dr * index, col + dc * index)
        cell.solution = letter
        if index == 0:
            cell.clue_number = clue_number

    end_row = row + dr * len(word)
    end_col = col + dc * len(word)
    if grid.contains(end_row, end_col):
        grid.cell(end_row, end_col).blocked = True

    clues.append(
        Clue(
            direction=direction,
            number=clue_number,
            text=clue_text,
            start_row=row,
            start_col=col,
            answer=word,
        )
    )
