"""Main crossword generator orchestration.

The generator places words with an exhaustive backtracking search:

  1. The word bank is shuffled and then sorted longest first.
  2. Each word in turn is tried at every start cell in row-major order,
     across before down. Every feasible placement is written into a clone of
     the current grid and the search recurses on the next word.
  3. A single :class:`BestResult` accumulator remembers the grid that placed
     the most words. The search stops early only once every word is placed.

When a word has no feasible placement the branch ends there and later words
are not attempted (unless ``allow_skip`` is enabled). The number of branches
is bounded by ``(size * size * 2) ** len(words)``; there is no other pruning,
so callers with large banks should set ``timeout_seconds``.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from ..core.constants import DEFAULT_GRID_SIZE, DIRECTION_ORDER
from ..core.exceptions import ConfigurationError, SearchTimeout
from ..core.models import Clue, WordEntry
from ..data.word_bank import RawEntry, WordBank
from ..io.clues import ClueGenerator, TemplateClueGenerator, fill_missing_clues
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .placement import can_place, place
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    words: Sequence[RawEntry]
    size: int = DEFAULT_GRID_SIZE
    seed: Optional[int] = None
    allow_skip: bool = False
    timeout_seconds: Optional[float] = None

    def validate(self) -> None:
        if self.size <= 0:
            raise ConfigurationError(f"Grid size must be positive, got {self.size}")
        if self.timeout_seconds is not None and self.timeout_seconds < 0:
            raise ConfigurationError(
                f"Timeout must be non-negative, got {self.timeout_seconds}"
            )

    def to_word_bank(self) -> WordBank:
        if isinstance(self.words, WordBank):
            return self.words
        return WordBank(self.words)


@dataclass
class CrosswordResult:
    grid: CrosswordGrid
    clues: List[Clue]
    placed_count: int
    word_count: int
    seed: Optional[int] = None
    timed_out: bool = False
    validation_messages: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator:
        # Allows ``grid, clues, placed = generate(...)``.
        return iter((self.grid, self.clues, self.placed_count))

    @property
    def complete(self) -> bool:
        return self.placed_count == self.word_count


@dataclass
class BestResult:
    """Best (most words placed) grid seen during one search."""

    grid: CrosswordGrid
    clues: List[Clue] = field(default_factory=list)
    count: int = 0

    def offer(self, grid: CrosswordGrid, clues: List[Clue]) -> bool:
        # Branch grids are never written after they are offered, so no copy.
        if len(clues) <= self.count:
            return False
        self.grid = grid
        self.clues = clues
        self.count = len(clues)
        LOGGER.debug("New best: %s words placed", self.count)
        return True


class BacktrackingSearch:
    """Depth-first placement search over an ordered list of entries."""

    def __init__(
        self,
        entries: Sequence[WordEntry],
        size: int,
        allow_skip: bool = False,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self.entries = list(entries)
        self.size = size
        self.allow_skip = allow_skip
        self.deadline = (
            time.monotonic() + timeout_seconds if timeout_seconds is not None else None
        )
        self.best = BestResult(grid=CrosswordGrid(size))
        self.branches = 0

    def run(self) -> BestResult:
        """Search from an empty grid.

        Raises :class:`SearchTimeout` when the deadline passes; :attr:`best`
        still holds the best result found up to that point.
        """

        self._explore(0, 1, CrosswordGrid(self.size), [])
        return self.best

    def _explore(
        self,
        index: int,
        clue_number: int,
        grid: CrosswordGrid,
        clues: List[Clue],
    ) -> bool:
        """Return True once every entry has been placed somewhere in the tree."""

        total = len(self.entries)
        if index >= total:
            self.best.offer(grid, clues)
            return self.best.count == total

        self._check_deadline()
        entry = self.entries[index]
        placed_any = False
        for row in range(self.size):
            for col in range(self.size):
                for direction in DIRECTION_ORDER:
                    if not can_place(entry.word, row, col, direction, grid):
                        continue
                    placed_any = True
                    self.branches += 1
                    branch_grid = grid.clone()
                    branch_clues = list(clues)
                    place(
                        entry.word,
                        entry.clue,
                        row,
                        col,
                        direction,
                        clue_number,
                        branch_grid,
                        branch_clues,
                    )
                    if self._explore(index + 1, clue_number + 1, branch_grid, branch_clues):
                        return True

        if not placed_any and self.allow_skip:
            LOGGER.debug("Skipping unplaceable word %s", entry.word)
            return self._explore(index + 1, clue_number, grid, clues)

        # Without skipping, an unplaceable word ends this branch.
        self.best.offer(grid, clues)
        return False

    def _check_deadline(self) -> None:
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise SearchTimeout(f"Search exceeded its deadline after {self.branches} branches")


class CrosswordGenerator:
    """High-level orchestrator: ordering, search, validation, clue filling."""

    def __init__(
        self,
        config: GeneratorConfig,
        clue_generator: Optional[ClueGenerator] = None,
    ) -> None:
        self.config = config
        self.rng = random.Random(config.seed)
        self.clue_generator = clue_generator or TemplateClueGenerator()
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> CrosswordResult:
        self.config.validate()
        bank = self.config.to_word_bank()
        if not len(bank):
            LOGGER.warning("Word bank is empty; returning a blank grid")

        order = bank.attempt_order(self.rng)
        LOGGER.info(
            "Placing %s words on a %sx%s grid (allow_skip=%s)",
            len(order),
            self.config.size,
            self.config.size,
            self.config.allow_skip,
        )

        search = BacktrackingSearch(
            order,
            self.config.size,
            allow_skip=self.config.allow_skip,
            timeout_seconds=self.config.timeout_seconds,
        )
        timed_out = False
        start = time.monotonic()
        try:
            search.run()
        except SearchTimeout as exc:
            timed_out = True
            LOGGER.warning("%s; keeping best result so far", exc)
        best = search.best

        validation = self.validator.validate(best.grid, best.clues)
        if not validation.ok:
            LOGGER.warning("Generated grid failed validation: %s", validation.messages)

        filled = fill_missing_clues(best.clues, self.clue_generator, TemplateClueGenerator())
        if filled:
            LOGGER.info("Generated %s missing clue texts", filled)

        LOGGER.info(
            "Placed %s/%s words in %.2fs (%s branches)",
            best.count,
            len(order),
            time.monotonic() - start,
            search.branches,
        )
        return CrosswordResult(
            grid=best.grid,
            clues=best.clues,
            placed_count=best.count,
            word_count=len(order),
            seed=self.config.seed,
            timed_out=timed_out,
            validation_messages=validation.messages,
        )


def generate(
    word_bank: Sequence[RawEntry],
    grid_size: int = DEFAULT_GRID_SIZE,
    *,
    seed: Optional[int] = None,
    allow_skip: bool = False,
    timeout_seconds: Optional[float] = None,
    clue_generator: Optional[ClueGenerator] = None,
) -> CrosswordResult:
    """Generate a crossword from ``(word, clue)`` pairs or ``WORD:Clue`` strings."""

    config = GeneratorConfig(
        words=word_bank,
        size=grid_size,
        seed=seed,
        allow_skip=allow_skip,
        timeout_seconds=timeout_seconds,
    )
    return CrosswordGenerator(config, clue_generator=clue_generator).generate()
