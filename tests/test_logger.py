import logging
import os
import unittest
from unittest.mock import patch

from crossgen.utils.logger import configure_logging, get_logger, resolve_level


class LoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(logging.INFO)

    def test_resolve_level_accepts_names_and_ints(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        self.assertEqual(resolve_level("nonsense"), logging.INFO)

    def test_environment_sets_default_level(self) -> None:
        with patch.dict(os.environ, {"CROSSGEN_LOG_LEVEL": "WARNING"}):
            configure_logging()
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_get_logger_is_namespaced(self) -> None:
        self.assertEqual(get_logger().name, "crossgen")
        self.assertEqual(get_logger("crossgen.engine").name, "crossgen.engine")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
