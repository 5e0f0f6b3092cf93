"""Tests for run artifact writers."""

import json
import tempfile
import unittest
from pathlib import Path

from core.run_artifacts import write_artifacts, write_json_artifact, write_run_report


class TestRunArtifacts(unittest.TestCase):
    def test_write_run_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_run_report(
                report={"status": "success", "value": 1},
                run_id="run-123",
                output_dir=tmpdir,
            )
            self.assertTrue(Path(path).is_file())
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
            self.assertEqual(payload["run_id"], "run-123")
            self.assertEqual(payload["status"], "success")
            self.assertEqual(payload["value"], 1)
            self.assertIn("timestamp_utc", payload)

    def test_write_json_artifact_pretty(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_json_artifact({"name": "Größe"}, tmpdir, "out.json")
            text = Path(path).read_text(encoding="utf-8")
            self.assertIn("\n", text)
            self.assertIn("Größe", text)
            self.assertEqual(json.loads(text), {"name": "Größe"})

    def test_write_json_artifact_compact_creates_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "nested" / "dir"
            path = write_json_artifact([1, 2], str(target), "list.json", pretty=False)
            self.assertEqual(Path(path).read_text(encoding="utf-8"), "[1, 2]")

    def test_write_artifacts_keeps_order(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = write_artifacts({"b.json": {}, "a.json": []}, tmpdir)
            self.assertEqual(list(paths), ["b.json", "a.json"])
            for path in paths.values():
                self.assertTrue(Path(path).is_file())


if __name__ == "__main__":
    unittest.main()
