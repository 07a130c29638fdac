"""CLI entrypoint for the backtracking crossword generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from crossgen.core.constants import DEFAULT_GRID_SIZE
from crossgen.core.exceptions import CrosswordError
from crossgen.data.word_bank import parse_words_file
from crossgen.engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from crossgen.engine.verifier import reveal
from crossgen.io.clues import GeminiClueGenerator, TemplateClueGenerator
from crossgen.utils.logger import configure_logging
from crossgen.utils.pretty import print_crossword_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place a bank of words onto a square crossword grid",
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid width and height in cells"
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Word bank entries (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--allow-skip",
        action="store_true",
        help="Continue with the next word when one cannot be placed",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Stop searching after this many seconds and keep the best grid so far",
    )
    parser.add_argument(
        "--clues",
        choices=["template", "gemini"],
        default="template",
        help="Writer for entries that have no clue text",
    )
    parser.add_argument("--reveal", action="store_true", help="Fill the solution into the grid")
    parser.add_argument(
        "--pretty", action="store_true", help="Print a text grid and stats instead of JSON"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR; default $CROSSGEN_LOG_LEVEL or INFO)",
    )
    return parser


def build_payload(result: CrosswordResult) -> Dict[str, Any]:
    return {
        "size": result.grid.size,
        "seed": result.seed,
        "placed_count": result.placed_count,
        "word_count": result.word_count,
        "timed_out": result.timed_out,
        "grid": result.grid.to_jsonable(),
        "clues": [
            {
                "number": clue.number,
                "direction": clue.direction.value,
                "text": clue.text,
                "start": [clue.start_row, clue.start_col],
                "length": clue.length,
            }
            for clue in result.clues
        ],
        "validation": result.validation_messages,
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not args.words and not args.words_file:
        parser.error("provide --words and/or --words-file")

    entries: List[str] = []
    if args.words:
        entries.extend(args.words)
    try:
        if args.words_file:
            entries.extend(parse_words_file(args.words_file))

        config = GeneratorConfig(
            words=entries,
            size=args.size,
            seed=args.seed,
            allow_skip=args.allow_skip,
            timeout_seconds=args.timeout,
        )
        clue_generator = GeminiClueGenerator() if args.clues == "gemini" else TemplateClueGenerator()
        result = CrosswordGenerator(config, clue_generator=clue_generator).generate()
    except CrosswordError as exc:
        logging.getLogger("crossgen").error("%s", exc)
        return 2

    if args.reveal:
        reveal(result.grid)

    if args.pretty:
        print_crossword_stats(result)
        return 0

    print(json.dumps(build_payload(result), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
