import unittest
from io import StringIO
from unittest.mock import patch

from opcalc_pkg.cli import main_entry
from opcalc_pkg.config import VERSION


class TestMainEntry(unittest.TestCase):
    def test_version(self):
        with patch("sys.stdout", new_callable=StringIO) as mock_stdout:
            code = main_entry(["--version"])
        self.assertEqual(code, 0)
        self.assertEqual(mock_stdout.getvalue().strip(), VERSION)

    def test_interactive_session(self):
        with patch("builtins.input", side_effect=["+", "40 2", "", "exit"]), patch(
            "sys.stdout", new_callable=StringIO
        ) as mock_stdout, patch("opcalc_pkg.logging_config.setup_logging") as mock_setup:
            code = main_entry(["--log-level", "ERROR"])
        output = mock_stdout.getvalue()
        self.assertEqual(code, 0)
        self.assertIn(f"opcalc v{VERSION}", output)
        self.assertIn("Result: 42", output)
        mock_setup.assert_called_once_with(level="ERROR", log_file=None)

    def test_read_failure_exit_code(self):
        with patch("builtins.input", side_effect=[OSError("closed")]), patch(
            "sys.stdout", new_callable=StringIO
        ), patch("opcalc_pkg.logging_config.setup_logging"):
            self.assertEqual(main_entry([]), 1)

    def test_invalid_log_level(self):
        with patch("sys.stderr", new_callable=StringIO):
            with self.assertRaises(SystemExit):
                main_entry(["--log-level", "LOUD"])


if __name__ == "__main__":
    unittest.main()
