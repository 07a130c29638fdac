"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import Direction


@dataclass
class Cell:
    """Represents a grid cell with its solution and the solver's entry."""

    row: int
    col: int
    value: str = ""
    solution: str = ""
    blocked: bool = False
    clue_number: Optional[int] = None

    def copy(self) -> "Cell":
        return Cell(
            row=self.row,
            col=self.col,
            value=self.value,
            solution=self.solution,
            blocked=self.blocked,
            clue_number=self.clue_number,
        )


@dataclass
class Clue:
    """A numbered clue pointing at the start cell of a placed word."""

    direction: Direction
    number: int
    text: str
    start_row: int
    start_col: int
    answer: str = ""

    @property
    def length(self) -> int:
        return len(self.answer)

    def cells(self):
        dr, dc = self.direction.step
        return [(self.start_row + dr * i, self.start_col + dc * i) for i in range(self.length)]


@dataclass(frozen=True)
class WordEntry:
    """A normalized word bank entry."""

    word: str
    clue: str = ""
