"""Shared constants and enumerations for the crossword generator."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 13


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)


# Start cells are tried in this order for every (row, col).
DIRECTION_ORDER: Tuple[Direction, ...] = (Direction.ACROSS, Direction.DOWN)
