"""
Comment rendering for TypeDoc comment blocks.

Turns comment part lists (text, inline code and inline tags) into
markdown-ish plain text, and provides the heuristics used to classify
``@example`` content.
"""

import re
from typing import Any, List, Mapping, Optional

from extraction.config import (
    AUTHOR_TAG,
    CODE_KEYWORDS,
    CODE_LANGUAGE,
    CODE_PARTS,
    FENCE_LANGUAGES,
    INLINE_TAG_PART,
    LINK_TAGS,
    LINKPLAIN_TAG,
    MARKUP_LANGUAGE,
    MARKUP_MARKER,
    PLAIN_LANGUAGE,
    TAG_MARKER,
    TEXT_PART,
    TUTORIAL_INLINE_TAG,
)

_FENCED_BLOCK_RE = re.compile(
    r"```(?:" + "|".join(FENCE_LANGUAGES) + r")?\n([\s\S]*?)```"
)
_CODE_HINT_RE = re.compile(
    r"```|function |const |let |var |\{|\}|\(\)|=>|async|await|import|export"
)


def render_parts(parts: Optional[List[Any]]) -> str:
    """Render a comment part list to text.

    Args:
        parts: Comment parts as produced by TypeDoc, or None.

    Returns:
        Concatenated text. Inline code is wrapped in backticks and inline
        tags are rendered as markdown links or plain labels. Parts of an
        unknown kind contribute nothing.
    """
    if not parts or not isinstance(parts, list):
        return ""
    return "".join(_render_part(part) for part in parts)


def _render_part(part: Any) -> str:
    if not isinstance(part, Mapping):
        return ""

    kind = part.get("kind")
    if kind == TEXT_PART:
        return str(part.get("text") or "")
    if kind in CODE_PARTS:
        return f"`{part.get('text') or ''}`"
    if kind == INLINE_TAG_PART:
        return render_inline_tag(part)
    return ""


def render_inline_tag(tag: Mapping[str, Any]) -> str:
    """Render one inline tag (``{@link ...}``, ``{@tutorial ...}``, ...)."""
    tag_name = tag.get("tag")
    text = tag.get("text")
    name = tag.get("name")

    if tag_name in LINK_TAGS:
        target = tag.get("target")
        # Cross-reference ids are passed through as-is
        if not isinstance(target, (str, int)) or isinstance(target, bool) or target == "":
            target = name
        return f"[{text or name}]({target})"
    if tag_name == LINKPLAIN_TAG:
        return str(text or name or "")
    if tag_name == TUTORIAL_INLINE_TAG:
        return f"[Tutorial: {name}]"
    return str(text or name or "")


def extract_author_list(comment: Optional[Mapping[str, Any]]) -> List[str]:
    """Collect the rendered ``@author`` block tags of a comment."""
    if not comment:
        return []
    return [
        render_parts(tag.get("content"))
        for tag in comment.get("blockTags") or []
        if isinstance(tag, Mapping) and tag.get("tag") == AUTHOR_TAG
    ]


def extract_fenced_code_blocks(text: str) -> List[str]:
    """Return the trimmed body of every fenced code block in ``text``.

    Blocks are returned in order of appearance. Only fences without a
    language hint or with a JavaScript/TypeScript hint are recognised.
    """
    if not text:
        return []
    return [match.group(1).strip() for match in _FENCED_BLOCK_RE.finditer(text)]


def looks_like_code(text: str) -> bool:
    """Coarse check whether ``text`` contains source code."""
    return bool(text) and _CODE_HINT_RE.search(text) is not None


def detect_language(text: str) -> str:
    """Guess a language tag for an example.

    Code keywords win over markup, which wins over a bare ``@`` marker.
    Anything else is plain text.
    """
    if not text:
        return PLAIN_LANGUAGE
    if any(keyword in text for keyword in CODE_KEYWORDS):
        return CODE_LANGUAGE
    if MARKUP_MARKER in text:
        return MARKUP_LANGUAGE
    if TAG_MARKER in text:
        return CODE_LANGUAGE
    return PLAIN_LANGUAGE
