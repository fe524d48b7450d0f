import os
import tempfile
import unittest
from unittest.mock import patch

from opcalc_pkg.export import export_history_to_file
from opcalc_pkg.types import ExportIOError


class TestExportHistory(unittest.TestCase):
    def test_writes_content(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "history.txt")
            path = export_history_to_file("1 + 2 = 3\n", target)
            self.assertEqual(str(path), target)
            with open(target, encoding="utf-8") as fh:
                self.assertEqual(fh.read(), "1 + 2 = 3\n")

    def test_overwrites_existing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "history.txt")
            export_history_to_file("old\n", target)
            export_history_to_file("new\n", target)
            with open(target, encoding="utf-8") as fh:
                self.assertEqual(fh.read(), "new\n")

    def test_blank_path_uses_default(self):
        with tempfile.TemporaryDirectory() as tmp:
            default = os.path.join(tmp, "default.txt")
            with patch("opcalc_pkg.export.DEFAULT_EXPORT_FILENAME", default):
                path = export_history_to_file("x = 1\n", "  ")
            self.assertEqual(str(path), default)
            self.assertTrue(os.path.exists(default))

    def test_unwritable_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "missing", "history.txt")
            with self.assertRaises(ExportIOError) as cm:
                export_history_to_file("x\n", target)
            self.assertIsInstance(cm.exception.__cause__, OSError)
            self.assertTrue(cm.exception.display().startswith("Export error: could not write"))

    def test_invalid_path_characters(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "bad\x00name.txt")
            with self.assertRaises(ExportIOError) as cm:
                export_history_to_file("x\n", target)
            self.assertIsInstance(cm.exception.__cause__, ValueError)
            self.assertIn("embedded null byte", cm.exception.display())
            self.assertTrue(cm.exception.display().startswith("Export error: could not write"))


if __name__ == "__main__":
    unittest.main()
