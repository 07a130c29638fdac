"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Clue
from .grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over the final grid and its clues."""

    def validate(self, grid: CrosswordGrid, clues: Sequence[Clue]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(grid, clues)
            self._check_answers_match_grid(grid, clues)
            self._check_blocked_cells_empty(grid)
            self._check_letters_valid(grid)
            self._check_letters_covered(grid, clues)
            self._check_clue_numbers(clues)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, grid: CrosswordGrid, clues: Sequence[Clue]) -> None:
        for clue in clues:
            start = clue.start_col if clue.direction == Direction.ACROSS else clue.start_row
            if start < 0 or start + clue.length >= grid.size:
                raise ValidationError(
                    f"Clue {clue.number} {clue.direction.value} at "
                    f"({clue.start_row},{clue.start_col}) leaves no separator before the edge"
                )

    def _check_answers_match_grid(self, grid: CrosswordGrid, clues: Sequence[Clue]) -> None:
        for clue in clues:
            written = "".join(grid.cell(r, c).solution for r, c in clue.cells())
            if written != clue.answer:
                raise ValidationError(
                    f"Clue {clue.number} expects '{clue.answer}' but grid holds '{written}'"
                )
            start = grid.cell(clue.start_row, clue.start_col)
            if start.clue_number is None:
                raise ValidationError(f"Start cell of clue {clue.number} carries no number")

    def _check_blocked_cells_empty(self, grid: CrosswordGrid) -> None:
        for cell in grid.iter_cells():
            if cell.blocked and cell.solution:
                raise ValidationError(
                    f"Blocked cell ({cell.row},{cell.col}) holds letter '{cell.solution}'"
                )

    def _check_letters_valid(self, grid: CrosswordGrid) -> None:
        for cell in grid.iter_cells():
            letter = cell.solution
            if letter and (len(letter) != 1 or not ("A" <= letter <= "Z")):
                raise ValidationError(f"Invalid letter '{letter}' at ({cell.row},{cell.col})")

    def _check_letters_covered(self, grid: CrosswordGrid, clues: Sequence[Clue]) -> None:
        covered: Set[Tuple[int, int]] = set()
        for clue in clues:
            covered.update(clue.cells())
        for cell in grid.iter_cells():
            if cell.solution and (cell.row, cell.col) not in covered:
                raise ValidationError(f"Letter at ({cell.row},{cell.col}) belongs to no clue")

    def _check_clue_numbers(self, clues: Sequence[Clue]) -> None:
        for expected, clue in enumerate(clues, start=1):
            if clue.number != expected:
                raise ValidationError(
                    f"Clue numbers out of sequence: expected {expected}, found {clue.number}"
                )
