"""Tests for structured logging context helpers."""

import logging
import unittest

from core.structured_logging import (
    _ExtractionContextFilter,
    get_current_node,
    get_run_id,
    node_scope,
    phase_scope,
    set_run_id,
)


class TestStructuredLogging(unittest.TestCase):
    def _record(self) -> logging.LogRecord:
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        _ExtractionContextFilter().filter(record)
        return record

    def test_set_run_id_explicit(self) -> None:
        self.assertEqual(set_run_id("run-42"), "run-42")
        self.assertEqual(get_run_id(), "run-42")

    def test_set_run_id_generates(self) -> None:
        run_id = set_run_id()
        self.assertTrue(run_id)
        self.assertNotEqual(run_id, "-")
        self.assertEqual(get_run_id(), run_id)

    def test_phase_scope_restores(self) -> None:
        with phase_scope("extract"):
            self.assertEqual(self._record().phase, "extract")
            with phase_scope("index"):
                self.assertEqual(self._record().phase, "index")
            self.assertEqual(self._record().phase, "extract")
        self.assertEqual(self._record().phase, "-")

    def test_node_scope(self) -> None:
        self.assertEqual(get_current_node(), "-")
        with node_scope("shapes.Circle"):
            self.assertEqual(get_current_node(), "shapes.Circle")
            self.assertEqual(self._record().node, "shapes.Circle")
        self.assertEqual(get_current_node(), "-")

    def test_scope_restored_after_error(self) -> None:
        with self.assertRaises(RuntimeError):
            with node_scope("broken"):
                raise RuntimeError("fail")
        self.assertEqual(get_current_node(), "-")


if __name__ == "__main__":
    unittest.main()
