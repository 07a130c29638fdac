import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from crossgen.engine.generator import generate
from crossgen.utils.pretty import format_grid, print_crossword_stats
from main import main


class CliTests(unittest.TestCase):
    def test_json_payload(self) -> None:
        stream = io.StringIO()
        with redirect_stdout(stream):
            code = main(["--words", "CAT:feline", "CAR:vehicle", "--size", "5", "--seed", "1",
                         "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        payload = json.loads(stream.getvalue())
        self.assertEqual(payload["placed_count"], 2)
        self.assertEqual(payload["word_count"], 2)
        self.assertEqual([clue["number"] for clue in payload["clues"]], [1, 2])
        self.assertEqual(len(payload["grid"]), 5)
        self.assertEqual(payload["validation"], [])

    def test_words_file_and_reveal(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# demo\nHTML:Markup language\n", encoding="utf-8")
            stream = io.StringIO()
            with redirect_stdout(stream):
                code = main(["--words-file", str(path), "--size", "6", "--reveal",
                             "--log-level", "WARNING"])
        self.assertEqual(code, 0)
        payload = json.loads(stream.getvalue())
        row = payload["grid"][0]
        self.assertEqual("".join(cell["value"] for cell in row[:4]), "HTML")

    def test_invalid_size_exits_with_error_code(self) -> None:
        code = main(["--words", "CAT", "--size", "0", "--log-level", "CRITICAL"])
        self.assertEqual(code, 2)

    def test_missing_words_is_a_usage_error(self) -> None:
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main(["--size", "5"])


class PrettyTests(unittest.TestCase):
    def test_format_grid_marks_blocked_cells(self) -> None:
        result = generate([("CAT", "feline")], 5, seed=0)
        rendered = format_grid(result.grid)
        self.assertIn(" C  A  T  #", rendered)
        blank = format_grid(result.grid, show_solution=False)
        self.assertNotIn("C", blank.splitlines()[2])

    def test_stats_report_counts(self) -> None:
        result = generate([("CAT", "feline"), ("HELLO", "greeting")], 5, seed=0)
        stream = io.StringIO()
        print_crossword_stats(result, stream=stream)
        text = stream.getvalue()
        self.assertIn("Placed:        0/2", text)
        self.assertIn("Seed: 0", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
