import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from opcalc_pkg import logging_config


class TestLoggingConfig(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
        self.saved_handlers = list(self.logger.handlers)
        self.saved_level = self.logger.level
        self.saved_propagate = self.logger.propagate

    def tearDown(self):
        for handler in self.logger.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.logger.handlers = self.saved_handlers
        self.logger.setLevel(self.saved_level)
        self.logger.propagate = self.saved_propagate

    def test_setup_is_idempotent(self):
        with patch.object(logging_config, "_configured", False):
            first = logging_config.setup_logging("INFO")
            count = len(first.handlers)
            second = logging_config.setup_logging("DEBUG")
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), count)
        self.assertEqual(second.level, logging.DEBUG)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "opcalc.log")
            with patch.object(logging_config, "_configured", False):
                logger = logging_config.setup_logging("INFO", log_file=path)
            logging_config.get_logger("session").info("cleared")
            for handler in logger.handlers:
                handler.flush()
                if handler not in self.saved_handlers:
                    handler.close()
            self.logger.handlers = list(self.saved_handlers)
            with open(path, encoding="utf-8") as fh:
                self.assertIn("opcalc_pkg.session: cleared", fh.read())

    def test_get_logger_is_package_child(self):
        self.assertEqual(logging_config.get_logger("cli").name, "opcalc_pkg.cli")

    def test_set_level(self):
        logging_config.set_level(logging.ERROR)
        self.assertEqual(self.logger.level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
