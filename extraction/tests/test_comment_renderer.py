"""
Unit tests for comment_renderer.py
"""

import unittest

from extraction.comment_renderer import (
    detect_language,
    extract_author_list,
    extract_fenced_code_blocks,
    looks_like_code,
    render_inline_tag,
    render_parts,
)


class TestRenderParts(unittest.TestCase):
    """Test comment part list rendering."""

    def test_empty_input(self):
        self.assertEqual(render_parts(None), "")
        self.assertEqual(render_parts([]), "")

    def test_text_and_code(self):
        parts = [
            {"kind": "text", "text": "Call "},
            {"kind": "code", "text": "run()"},
            {"kind": "text", "text": " first."},
        ]
        self.assertEqual(render_parts(parts), "Call `run()` first.")

    def test_code_span_is_wrapped(self):
        self.assertEqual(render_parts([{"kind": "code-span", "text": "x"}]), "`x`")

    def test_link_with_target(self):
        parts = [{"kind": "inline-tag", "tag": "@link", "text": "Foo", "target": 42}]
        self.assertEqual(render_parts(parts), "[Foo](42)")

    def test_link_without_text_or_target(self):
        parts = [{"kind": "inline-tag", "tag": "@linkcode", "name": "Bar"}]
        self.assertEqual(render_parts(parts), "[Bar](Bar)")

    def test_link_with_structured_target_uses_name(self):
        tag = {"tag": "@link", "name": "Baz", "target": {"sourceFileName": "a.ts"}}
        self.assertEqual(render_inline_tag(tag), "[Baz](Baz)")

    def test_linkplain(self):
        self.assertEqual(render_inline_tag({"tag": "@linkplain", "text": "docs"}), "docs")

    def test_tutorial(self):
        self.assertEqual(render_inline_tag({"tag": "@tutorial", "name": "getting-started"}), "[Tutorial: getting-started]")

    def test_other_inline_tag(self):
        self.assertEqual(render_inline_tag({"tag": "@inheritDoc", "text": "parent docs"}), "parent docs")
        self.assertEqual(render_inline_tag({"tag": "@label"}), "")

    def test_unknown_parts_are_dropped(self):
        parts = [{"kind": "text", "text": "a"}, {"kind": "mystery", "text": "b"}, "junk", {"kind": "text", "text": "c"}]
        self.assertEqual(render_parts(parts), "ac")


class TestAuthors(unittest.TestCase):
    def test_collects_author_tags_in_order(self):
        comment = {
            "blockTags": [
                {"tag": "@author", "content": [{"kind": "text", "text": "Ada"}]},
                {"tag": "@since", "content": [{"kind": "text", "text": "1.0"}]},
                {"tag": "@author", "content": [{"kind": "text", "text": "Grace"}]},
            ]
        }
        self.assertEqual(extract_author_list(comment), ["Ada", "Grace"])

    def test_no_comment(self):
        self.assertEqual(extract_author_list(None), [])
        self.assertEqual(extract_author_list({}), [])


class TestFencedCodeBlocks(unittest.TestCase):
    """Test fenced code block extraction."""

    def test_blocks_in_order(self):
        text = "Intro\n```ts\nconst a = 1;\n```\nmiddle\n```\nlet b = 2;\n```"
        self.assertEqual(extract_fenced_code_blocks(text), ["const a = 1;", "let b = 2;"])

    def test_unsupported_language_is_ignored(self):
        self.assertEqual(extract_fenced_code_blocks("```python\nx = 1\n```"), [])

    def test_repeated_calls_are_independent(self):
        text = "```js\nfoo();\n```"
        first = extract_fenced_code_blocks(text)
        second = extract_fenced_code_blocks(text)
        self.assertEqual(first, ["foo();"])
        self.assertEqual(second, ["foo();"])
        self.assertIsNot(first, second)

    def test_empty_text(self):
        self.assertEqual(extract_fenced_code_blocks(""), [])


class TestClassification(unittest.TestCase):
    """Test code detection and language guessing."""

    def test_looks_like_code(self):
        self.assertTrue(looks_like_code("const x = 1;"))
        self.assertTrue(looks_like_code("items.map(i => i.id)"))
        self.assertFalse(looks_like_code("Just a sentence."))
        self.assertFalse(looks_like_code(""))

    def test_detect_language_code(self):
        self.assertEqual(detect_language("async function load() {}"), "typescript")

    def test_detect_language_markup(self):
        self.assertEqual(detect_language("<!-- a comment -->"), "html")

    def test_detect_language_tag_marker(self):
        self.assertEqual(detect_language("@Component"), "typescript")

    def test_detect_language_plain(self):
        self.assertEqual(detect_language("Hello world"), "text")
        self.assertEqual(detect_language(""), "text")


if __name__ == "__main__":
    unittest.main()
