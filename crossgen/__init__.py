"""Backtracking crossword generator.

This package exposes the public API surface via:

- ``crossgen.engine.generator.generate``: places a word bank onto a square grid.
- ``crossgen.engine.generator.CrosswordGenerator``: the configurable orchestrator.
- ``crossgen.engine.verifier`` helpers: checking and revealing the solution.
"""

from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig, generate
from .engine.verifier import is_solved, reveal, wrong_cells
from .data.word_bank import WordBank

__all__ = [
    "CrosswordGenerator",
    "CrosswordResult",
    "GeneratorConfig",
    "WordBank",
    "generate",
    "is_solved",
    "reveal",
    "wrong_cells",
]

__version__ = "0.1.0"
