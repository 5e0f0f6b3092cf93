"""
Data models for extracted TypeDoc declarations.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class DeclarationError(ValueError):
    """Raised when a declaration node lacks the fields that identify it."""


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# Artifact keys that do not follow the camelCase rule
_KEY_OVERRIDES: Dict[str, str] = {
    "example_code_blocks": "examples_md",
    "raw": "rawJSON",
}


def _serialize_fields(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    # Field names become camelCase keys; unset optional fields are omitted.
    # Keys of plain dict values (e.g. custom tag names) are left untouched.
    return {
        _KEY_OVERRIDES.get(key) or _camel_case(key): value
        for key, value in items
        if value is not None
    }


@dataclass
class TypeDefinition:
    """A rendered type alongside the expression it was rendered from."""

    type: str
    type_raw: Any = None


@dataclass
class TypeParameterDetail:
    name: str
    constraint: Optional[TypeDefinition] = None
    default: Optional[TypeDefinition] = None
    description: Optional[str] = None


@dataclass
class ParameterDetail:
    name: str
    kind: Any
    type: TypeDefinition
    description: Optional[str] = None
    is_optional: bool = False
    is_rest: bool = False
    default_value: Optional[str] = None


@dataclass
class ReturnTypeDetail:
    type: str
    type_raw: Any = None
    description: Optional[str] = None


@dataclass
class ReferenceDetail:
    """An inheritance cross-reference, kept exactly as the producer gave it."""

    name: str
    id: Optional[str] = None


@dataclass
class SignatureDocumentation:
    summary: Optional[str] = None
    description: Optional[str] = None


@dataclass
class SignatureDetail:
    """One rendered call, accessor or index signature of a declaration."""

    name: str
    kind: Any
    signature: str
    parameters: List[ParameterDetail]
    return_type: ReturnTypeDetail
    documentation: SignatureDocumentation = field(default_factory=SignatureDocumentation)
    type_parameters: Optional[List[TypeParameterDetail]] = None
    overwrites: Optional[ReferenceDetail] = None
    inherited_from: Optional[ReferenceDetail] = None
    implementation_of: Optional[ReferenceDetail] = None


@dataclass
class DeprecationDetail:
    is_deprecated: bool = False
    message: Optional[str] = None


@dataclass
class DocumentationDetail:
    summary: str = ""
    description: str = ""
    remarks: Optional[str] = None
    deprecated: DeprecationDetail = field(default_factory=DeprecationDetail)
    license: Optional[str] = None
    copyright: Optional[str] = None
    author: List[str] = field(default_factory=list)
    since: Optional[str] = None


@dataclass
class TypeInformation:
    type: Optional[str] = None
    type_raw: Any = None
    type_parameters: List[TypeParameterDetail] = field(default_factory=list)
    extended_types: Optional[List[str]] = None
    implemented_types: Optional[List[str]] = None


@dataclass
class ExampleDetail:
    text: str
    is_code: bool
    language: Optional[str] = None


@dataclass
class ReturnTagDetail:
    description: str
    type: Optional[str] = None
    type_raw: Any = None


@dataclass
class ParamTagDetail:
    param_name: Optional[str]
    description: str
    type: Optional[str] = None
    type_raw: Any = None


@dataclass
class TypeParamTagDetail:
    param_name: Optional[str]
    description: str


@dataclass
class TagsDetail:
    """Block tags of a comment, partitioned by tag name.

    ``custom_tags`` is an open mapping from the literal tag name to the
    rendered content of every occurrence, for tags without a bucket of
    their own.
    """

    examples: List[ExampleDetail] = field(default_factory=list)
    example_code_blocks: List[str] = field(default_factory=list)
    tutorials: List[str] = field(default_factory=list)
    see_tags: List[str] = field(default_factory=list)
    throws_tags: List[str] = field(default_factory=list)
    returns_tags: List[ReturnTagDetail] = field(default_factory=list)
    param_tags: List[ParamTagDetail] = field(default_factory=list)
    typeparam_tags: List[TypeParamTagDetail] = field(default_factory=list)
    custom_tags: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class HierarchyDetail:
    parent_id: Optional[str] = None
    parent_name: Optional[str] = None
    parent_kind: Optional[str] = None
    children_ids: Optional[List[str]] = None
    module_id: Optional[str] = None
    module_name: Optional[str] = None


@dataclass
class SourceInfo:
    """Source location of a declaration.

    ``line_end`` carries the producer's second numeric position (its
    character offset), not necessarily a true end line.
    """

    filename: str
    line_start: Optional[int] = None
    line_end: Optional[int] = None
    url: Optional[str] = None


@dataclass
class ModifiersDetail:
    is_abstract: Optional[bool] = None
    is_async: Optional[bool] = None
    is_const: Optional[bool] = None
    is_readonly: Optional[bool] = None
    is_optional: Optional[bool] = None
    is_static: Optional[bool] = None
    is_private: Optional[bool] = None
    is_protected: Optional[bool] = None
    is_public: Optional[bool] = None
    is_external: Optional[bool] = None


@dataclass
class ExtractedRecord:
    """Normalized documentation record for a single declaration.

    Attributes:
        id: Declaration id as a string.
        name: Declaration name.
        kind: Declaration kind name (e.g. Class, Method).
        full_path: Dotted path from the outermost declaration to this one.
        documentation: Rendered comment sections.
        types: Rendered own type, type parameters and heritage.
        signatures: Overloads, then getter/setter, then index signatures.
        parameters: Value parameters declared directly on the node.
        tags: Categorized block tags.
        hierarchy: Parent, children and owning module references.
        source: Source location.
        modifiers: Declaration flags.
        default_value: Default value text, if any.
        search_tokens: Tokens used to build the keyword index.
        raw: The original declaration node.
    """

    id: str
    name: str
    kind: str
    full_path: str
    documentation: DocumentationDetail
    types: TypeInformation
    signatures: List[SignatureDetail]
    parameters: List[ParameterDetail]
    tags: TagsDetail
    hierarchy: HierarchyDetail
    source: SourceInfo
    modifiers: ModifiersDetail
    default_value: Optional[str] = None
    search_tokens: List[str] = field(default_factory=list)
    raw: Any = None

    def to_dict(self, include_raw: bool = True) -> Dict[str, Any]:
        """Convert the record to a dictionary suitable for JSON serialization.

        Args:
            include_raw: Keep the original declaration node under ``rawJSON``.
                The compact form used for the RAG index drops it.

        Returns:
            Dictionary with camelCase keys and unset optional fields omitted.
        """
        payload = asdict(self, dict_factory=_serialize_fields)
        if not include_raw:
            payload.pop(_KEY_OVERRIDES["raw"], None)
        return payload
