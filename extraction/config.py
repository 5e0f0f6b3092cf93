"""
Configuration constants for TypeDoc declaration extraction.

Defines the comment tag names, heuristics, token limits and TypeDoc
reflection kinds used while building extracted records.
"""

from typing import Dict, Set, Tuple

# Rendered when a type expression is absent
ANY_TYPE: str = "any"

# Fallback for unrecognized type expressions and unresolved references
UNKNOWN: str = "unknown"

# Source filename used when a declaration carries no source entry
UNKNOWN_SOURCE_FILE: str = "unknown"

# Separator between ancestor path and declaration name
PATH_SEPARATOR: str = "."

# Comment part kinds
TEXT_PART: str = "text"
CODE_PARTS: Set[str] = {"code", "code-span"}
INLINE_TAG_PART: str = "inline-tag"

# Inline tags
LINK_TAGS: Set[str] = {"@link", "@linkcode"}
LINKPLAIN_TAG: str = "@linkplain"
TUTORIAL_INLINE_TAG: str = "@tutorial"

# Block tags with a dedicated bucket in the categorized tags
AUTHOR_TAG: str = "@author"
EXAMPLE_TAG: str = "@example"
TUTORIAL_TAGS: Set[str] = {"@tutorial", "@tutorials"}
SEE_TAG: str = "@see"
THROWS_TAGS: Set[str] = {"@throws", "@throw"}
RETURNS_TAGS: Set[str] = {"@returns", "@return"}
PARAM_TAG: str = "@param"
TYPE_PARAM_TAGS: Set[str] = {"@typeParam", "@template"}

# Block tags whose content contributes search tokens
SEARCHABLE_BLOCK_TAGS: Set[str] = {"@example", "@tutorial"}

# Documentation sections that may be given as comment fields or block tags
DOC_SECTION_TAGS: Dict[str, str] = {
    "remarks": "@remarks",
    "deprecated": "@deprecated",
    "license": "@license",
    "copyright": "@copyright",
    "since": "@since",
}

# Search token limits
SUMMARY_TOKEN_LIMIT: int = 10
TAG_TOKEN_LIMIT: int = 5

# Language hints recognised on fenced code blocks
FENCE_LANGUAGES: Tuple[str, ...] = ("typescript", "ts", "javascript", "js", "tsx", "jsx")

# Language tags returned by the example classifier
CODE_LANGUAGE: str = "typescript"
MARKUP_LANGUAGE: str = "html"
PLAIN_LANGUAGE: str = "text"

# Substrings that mark an example as source code, checked in this order
CODE_KEYWORDS: Tuple[str, ...] = ("async", "=>", "function", "interface", "type", "class")
MARKUP_MARKER: str = "<!--"
TAG_MARKER: str = "@"

# Synthetic signature names and kinds
GETTER: str = "getter"
SETTER: str = "setter"
ACCESSOR_KINDS: Dict[str, str] = {
    GETTER: "GetSignature",
    SETTER: "SetSignature",
}
INDEX_SIGNATURE_NAME: str = "__index"
VOID_TYPE: str = "void"

# Modifier flags copied from a declaration's ``flags`` mapping
MODIFIER_FLAGS: Tuple[str, ...] = (
    "isAbstract",
    "isAsync",
    "isConst",
    "isReadonly",
    "isOptional",
    "isStatic",
    "isPrivate",
    "isProtected",
    "isPublic",
    "isExternal",
)

# TypeDoc ReflectionKind values (bit flags) -> kind name
REFLECTION_KINDS: Dict[int, str] = {
    1: "Project",
    2: "Module",
    4: "Namespace",
    8: "Enum",
    16: "EnumMember",
    32: "Variable",
    64: "Function",
    128: "Class",
    256: "Interface",
    512: "Constructor",
    1024: "Property",
    2048: "Method",
    4096: "CallSignature",
    8192: "IndexSignature",
    16384: "ConstructorSignature",
    32768: "Parameter",
    65536: "TypeLiteral",
    131072: "TypeParameter",
    262144: "Accessor",
    524288: "GetSignature",
    1048576: "SetSignature",
    2097152: "TypeAlias",
    4194304: "Reference",
    8388608: "Document",
}

# Kinds that own the declarations nested below them
MODULE_KINDS: Set[str] = {"Module", "Namespace"}

# Output artifact filenames
FULL_RECORDS_FILE: str = "extracted-docs.json"
COMPACT_RECORDS_FILE: str = "rag-index.json"
SEARCH_INDEX_FILE: str = "search-index.json"
SUMMARY_FILE: str = "extraction-metadata.json"
