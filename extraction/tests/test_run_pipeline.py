"""
End-to-end tests for the run_pipeline command-line entry point.
"""

import json
import tempfile
import unittest
from pathlib import Path

from run_pipeline import main, parse_args

FIXTURE = Path(__file__).parent / "fixtures" / "sample_project.json"


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = parse_args(["docs.json"])
        self.assertEqual(args.input, "docs.json")
        self.assertIsNone(args.output_dir)
        self.assertFalse(args.compact)
        self.assertIsNone(args.config)

    def test_options(self):
        args = parse_args(["docs.json", "-o", "out", "--compact", "--log-level", "DEBUG"])
        self.assertEqual(args.output_dir, "out")
        self.assertTrue(args.compact)
        self.assertEqual(args.log_level, "DEBUG")


class TestMain(unittest.TestCase):
    """Test exit codes and written outputs."""

    def test_successful_run(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            out = Path(tmpdir) / "out"
            exit_code = main([
                str(FIXTURE),
                "-o", str(out),
                "--compact",
                "--report-dir", str(Path(tmpdir) / "reports"),
            ])

            self.assertEqual(exit_code, 0)
            index_text = (out / "search-index.json").read_text(encoding="utf-8")
            self.assertNotIn("\n", index_text)
            self.assertEqual(json.loads(index_text)["path:VERSION"], "10")
            self.assertEqual(len(list((Path(tmpdir) / "reports").glob("*.json"))), 1)

    def test_missing_input_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main([
                str(Path(tmpdir) / "missing.json"),
                "-o", str(Path(tmpdir) / "out"),
                "--report-dir", str(Path(tmpdir) / "reports"),
            ])
            self.assertEqual(exit_code, 1)
            self.assertFalse((Path(tmpdir) / "out").exists())

    def test_invalid_log_level(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main([str(FIXTURE), "-o", tmpdir, "--log-level", "LOUD"])
            self.assertEqual(exit_code, 1)


if __name__ == "__main__":
    unittest.main()
