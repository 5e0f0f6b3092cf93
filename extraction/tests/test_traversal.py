"""
Unit tests for traversal.py

Tests pre-order walking, path qualification, module attribution and
per-node fault isolation.
"""

import unittest

from extraction.declarations import extract_record
from extraction.traversal import NodeFailure, try_extract_record, walk_forest


def node(node_id, name, kind=64, children=None):
    result = {"id": node_id, "name": name, "kind": kind}
    if children is not None:
        result["children"] = children
    return result


class TestTryExtractRecord(unittest.TestCase):
    """Test the single-node result wrapper."""

    def test_success(self):
        outcome = try_extract_record(node(1, "f"))
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.record.full_path, "f")
        self.assertIsNone(outcome.error)

    def test_failure_is_captured(self):
        outcome = try_extract_record({"name": "broken"})
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.node_name, "broken")
        self.assertTrue(outcome.error.startswith("DeclarationError:"))

    def test_unexpected_exception_is_captured(self):
        def exploding(*args, **kwargs):
            raise KeyError("boom")

        outcome = try_extract_record(node(1, "f"), extractor=exploding)
        self.assertFalse(outcome.ok)
        self.assertIn("KeyError", outcome.error)


class TestWalkForest(unittest.TestCase):
    """Test forest traversal."""

    def test_pre_order_and_paths(self):
        forest = [
            node(1, "ns", kind=4, children=[
                node(2, "Widget", kind=128, children=[node(3, "render", kind=2048)]),
                node(4, "helper"),
            ]),
            node(5, "root"),
        ]
        result = walk_forest(forest)

        self.assertEqual(
            [r.full_path for r in result.records],
            ["ns", "ns.Widget", "ns.Widget.render", "ns.helper", "root"],
        )
        self.assertEqual(result.nodes_visited, 5)
        self.assertEqual(result.failures, [])

    def test_ancestor_prefix(self):
        result = walk_forest([node(1, "bar")], ancestor_path="foo")
        self.assertEqual(result.records[0].full_path, "foo.bar")

    def test_parent_and_module_attribution(self):
        forest = [
            node(1, "ns", kind=4, children=[
                node(2, "Widget", kind=128, children=[node(3, "render", kind=2048)]),
            ]),
        ]
        records = walk_forest(forest).records
        render = records[2]

        self.assertEqual(render.hierarchy.parent_id, "2")
        self.assertEqual(render.hierarchy.parent_name, "Widget")
        self.assertEqual(render.hierarchy.parent_kind, "Class")
        self.assertEqual(render.hierarchy.module_id, "1")
        self.assertEqual(render.hierarchy.module_name, "ns")
        self.assertIsNone(records[0].hierarchy.parent_id)
        self.assertEqual(records[0].hierarchy.children_ids, ["2"])

    def test_failing_sibling_is_skipped(self):
        forest = [node(1, "first"), {"name": "middle", "kind": 64}, node(3, "last")]
        result = walk_forest(forest)

        self.assertEqual([r.name for r in result.records], ["first", "last"])
        self.assertEqual(len(result.failures), 1)
        self.assertEqual(result.failures[0].node_name, "middle")

    def test_failing_node_skips_subtree(self):
        def picky(n, ancestor_path, parent=None, module=None):
            if n["name"] == "bad":
                raise ValueError("cannot handle")
            return extract_record(n, ancestor_path, parent=parent, module=module)

        forest = [
            node(1, "bad", children=[node(2, "hidden")]),
            node(3, "good", children=[node(4, "child")]),
        ]
        result = walk_forest(forest, extractor=picky)

        self.assertEqual([r.full_path for r in result.records], ["good", "good.child"])
        self.assertEqual(result.nodes_visited, 3)
        self.assertEqual(
            result.failures[0].to_dict(),
            {"nodeName": "bad", "ancestorPath": "", "error": "ValueError: cannot handle"},
        )

    def test_nameless_namespace_keeps_children(self):
        forest = [{"id": 1, "kind": 4, "children": [node(2, "inner")]}]
        result = walk_forest(forest)

        self.assertEqual([r.full_path for r in result.records], ["", "inner"])
        self.assertEqual(result.records[1].hierarchy.module_id, "1")
        self.assertEqual(result.failures, [])

    def test_failure_logs_warning(self):
        with self.assertLogs("extraction.traversal", level="WARNING") as captured:
            walk_forest([{"name": "orphan", "kind": 64}])
        self.assertIn("Failed to extract documentation for orphan", captured.output[0])

    def test_empty_forest(self):
        result = walk_forest(None)
        self.assertEqual(result.records, [])
        self.assertEqual(result.nodes_visited, 0)

    def test_failure_record_type(self):
        def failing(*args, **kwargs):
            raise RuntimeError("unreadable")

        result = walk_forest([{"id": 9}], extractor=failing)
        self.assertIsInstance(result.failures[0], NodeFailure)
        self.assertEqual(result.failures[0].node_name, "<id 9>")


if __name__ == "__main__":
    unittest.main()
