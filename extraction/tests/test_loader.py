"""
Unit tests for loader.py
"""

import tempfile
import unittest
from pathlib import Path

from extraction.loader import ForestLoadError, load_bytes, load_file


class TestLoadBytes(unittest.TestCase):
    """Test parsing TypeDoc JSON payloads."""

    def test_valid_project(self):
        project = load_bytes(b'{"name": "demo", "children": [{"id": 1, "name": "f"}]}')
        self.assertEqual(project["name"], "demo")
        self.assertEqual(len(project["children"]), 1)

    def test_accepts_text(self):
        self.assertEqual(load_bytes('{"name": "demo"}')["name"], "demo")

    def test_project_without_children(self):
        self.assertNotIn("children", load_bytes(b"{}"))

    def test_invalid_json(self):
        with self.assertRaises(ForestLoadError):
            load_bytes(b"{not json")

    def test_non_object_root(self):
        with self.assertRaises(ForestLoadError):
            load_bytes(b"[1, 2, 3]")

    def test_children_must_be_list(self):
        with self.assertRaises(ForestLoadError):
            load_bytes(b'{"children": {"id": 1}}')


class TestLoadFile(unittest.TestCase):
    def test_load_fixture(self):
        project = load_file(str(Path(__file__).parent / "fixtures" / "sample_project.json"))
        self.assertEqual(project["name"], "geometry-kit")

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ForestLoadError):
                load_file(str(Path(tmpdir) / "missing.json"))

    def test_corrupt_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "docs.json"
            path.write_text("{", encoding="utf-8")
            with self.assertRaises(ForestLoadError):
                load_file(str(path))


if __name__ == "__main__":
    unittest.main()
