"""Word bank loading and attempt ordering."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from ..core.exceptions import ConfigurationError, WordBankLoadError
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

RawEntry = Union[str, Tuple[str, str], WordEntry]


def parse_entry(item: RawEntry) -> WordEntry:
    """Build a normalized entry from ``WORD``, ``WORD:Clue`` or a pair."""

    if isinstance(item, WordEntry):
        word, clue = item.word, item.clue
    elif isinstance(item, str):
        word, _, clue = item.partition(":")
    else:
        word, clue = item
    cleaned = clean_word(word)
    if not cleaned:
        raise ConfigurationError(f"Word bank entry {item!r} has no letters")
    return WordEntry(cleaned, (clue or "").strip())


def parse_words_file(path: Union[Path, str]) -> List[str]:
    """Read entries from a file, one per line. Blank lines and # comments are skipped."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise WordBankLoadError(f"Unable to read words file {path}: {exc}") from exc
    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


class WordBank:
    """Holds the candidate entries of one puzzle."""

    def __init__(self, entries: Iterable[RawEntry] = ()) -> None:
        self.entries: List[WordEntry] = [parse_entry(item) for item in entries]

    @classmethod
    def from_file(cls, path: Union[Path, str]) -> "WordBank":
        bank = cls(parse_words_file(path))
        LOGGER.info("Loaded %s entries from %s", len(bank), path)
        return bank

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self.entries)

    def attempt_order(self, rng: random.Random) -> List[WordEntry]:
        """Shuffle, then stable-sort longest first.

        Longer words are harder to place; the shuffle only decides the order
        among words of equal length.
        """

        shuffled: Sequence[WordEntry] = list(self.entries)
        rng.shuffle(shuffled)
        return sorted(shuffled, key=lambda entry: len(entry.word), reverse=True)
