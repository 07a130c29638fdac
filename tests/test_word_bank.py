import random
import tempfile
import unittest
from pathlib import Path

from crossgen.core.exceptions import ConfigurationError, WordBankLoadError
from crossgen.core.models import WordEntry
from crossgen.data.normalization import clean_word
from crossgen.data.word_bank import WordBank, parse_entry, parse_words_file


class NormalizationTests(unittest.TestCase):
    def test_clean_word_folds_accents_and_drops_non_letters(self) -> None:
        self.assertEqual(clean_word("café"), "CAFE")
        self.assertEqual(clean_word("zon-js"), "ZONJS")
        self.assertEqual(clean_word("ăâîșț"), "AAIST")
        self.assertEqual(clean_word("R2-D2"), "RD")
        self.assertEqual(clean_word(""), "")


class ParseEntryTests(unittest.TestCase):
    def test_plain_word_has_empty_clue(self) -> None:
        self.assertEqual(parse_entry("html"), WordEntry("HTML", ""))

    def test_clue_format_splits_word_and_clue(self) -> None:
        entry = parse_entry("ROUTER: Navigation system ")
        self.assertEqual(entry, WordEntry("ROUTER", "Navigation system"))

    def test_pair_is_accepted(self) -> None:
        self.assertEqual(parse_entry(("pipe", "Transforms values")), WordEntry("PIPE", "Transforms values"))

    def test_entry_without_letters_is_rejected(self) -> None:
        for raw in ("", "   ", "42:answer", ("", "clue")):
            with self.subTest(raw=raw):
                with self.assertRaises(ConfigurationError):
                    parse_entry(raw)


class AttemptOrderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bank = WordBank(["CSS", "HTML", "PIPE", "ANGULAR", "INPUT", "OUTPUT", "ROUTER", "MODULE"])

    def test_longest_words_come_first(self) -> None:
        order = self.bank.attempt_order(random.Random(3))
        lengths = [len(entry.word) for entry in order]
        self.assertEqual(lengths, sorted(lengths, reverse=True))
        self.assertEqual(sorted(e.word for e in order), sorted(e.word for e in self.bank))

    def test_shuffle_decides_order_within_a_length(self) -> None:
        expected = list(self.bank.entries)
        random.Random(9).shuffle(expected)
        expected.sort(key=lambda entry: len(entry.word), reverse=True)
        self.assertEqual(self.bank.attempt_order(random.Random(9)), expected)

    def test_attempt_order_leaves_bank_untouched(self) -> None:
        before = list(self.bank.entries)
        self.bank.attempt_order(random.Random(1))
        self.assertEqual(self.bank.entries, before)


class WordsFileTests(unittest.TestCase):
    def test_comments_and_blank_lines_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# angular words\n\nHTML:Markup language\n  CSS  \n", encoding="utf-8")
            self.assertEqual(parse_words_file(path), ["HTML:Markup language", "CSS"])
            bank = WordBank.from_file(path)
            self.assertEqual([e.word for e in bank], ["HTML", "CSS"])
            self.assertEqual(len(bank), 2)

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(WordBankLoadError):
                parse_words_file(Path(tmpdir) / "missing.txt")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
