"""
Unit tests for search_index.py
"""

import unittest

from extraction.declarations import extract_record
from extraction.search_index import build_search_index


class TestBuildSearchIndex(unittest.TestCase):
    def setUp(self):
        self.records = [
            extract_record(
                {"id": 1, "name": "Parser", "kind": 128, "comment": {"summary": [{"kind": "text", "text": "Parses input"}]}}
            ),
            extract_record({"id": 2, "name": "parse", "kind": 2048}, "Parser"),
        ]

    def test_id_entries(self):
        index = build_search_index(self.records)
        self.assertEqual(index["id:1"], {"name": "Parser", "kind": "Class", "fullPath": "Parser"})
        self.assertEqual(index["id:2"]["fullPath"], "Parser.parse")

    def test_path_entries(self):
        index = build_search_index(self.records)
        self.assertEqual(index["path:Parser"], "1")
        self.assertEqual(index["path:Parser.parse"], "2")

    def test_tokens_are_lowercased_and_keep_repeats(self):
        index = build_search_index(self.records)
        # "Parser" appears as name and full path of record 1
        self.assertEqual(index["token:parser"], ["1", "1"])
        self.assertEqual(index["token:parser.parse"], ["2"])
        self.assertEqual(index["token:input"], ["1"])

    def test_empty(self):
        self.assertEqual(build_search_index([]), {})


if __name__ == "__main__":
    unittest.main()
