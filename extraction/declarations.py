"""
Per-declaration record extraction.

This module turns one TypeDoc declaration node into an ExtractedRecord:
rendered documentation, types, signatures, parameters, categorized tags,
hierarchy, source location, modifiers and search tokens.
"""

import logging
from typing import Any, List, Mapping, Optional

from extraction.comment_renderer import (
    detect_language,
    extract_author_list,
    extract_fenced_code_blocks,
    looks_like_code,
    render_parts,
)
from extraction.config import (
    DOC_SECTION_TAGS,
    EXAMPLE_TAG,
    GETTER,
    INDEX_SIGNATURE_NAME,
    MODIFIER_FLAGS,
    PARAM_TAG,
    PATH_SEPARATOR,
    REFLECTION_KINDS,
    RETURNS_TAGS,
    SEARCHABLE_BLOCK_TAGS,
    SEE_TAG,
    SETTER,
    SUMMARY_TOKEN_LIMIT,
    TAG_TOKEN_LIMIT,
    THROWS_TAGS,
    TUTORIAL_TAGS,
    TYPE_PARAM_TAGS,
    UNKNOWN_SOURCE_FILE,
    VOID_TYPE,
)
from extraction.models import (
    DeclarationError,
    DeprecationDetail,
    DocumentationDetail,
    ExampleDetail,
    ExtractedRecord,
    HierarchyDetail,
    ModifiersDetail,
    ParamTagDetail,
    ReferenceDetail,
    ReturnTagDetail,
    ReturnTypeDetail,
    SignatureDetail,
    SignatureDocumentation,
    SourceInfo,
    TagsDetail,
    TypeInformation,
    TypeParamTagDetail,
)
from extraction.signatures import (
    build_accessor_signature,
    build_index_signature_string,
    build_signature,
    comment_summary,
    extract_parameters,
    extract_type_parameters,
)
from extraction.type_renderer import render_type

logger = logging.getLogger(__name__)


def build_full_path(ancestor_path: Optional[str], name: str) -> str:
    """Qualify a declaration name with its ancestor path.

    Example:
        >>> build_full_path("foo", "bar")
        'foo.bar'
        >>> build_full_path("", "root")
        'root'
    """
    if ancestor_path:
        return f"{ancestor_path}{PATH_SEPARATOR}{name}"
    return name


def kind_name(kind: Any) -> str:
    """Readable name for a declaration kind.

    Numeric TypeDoc reflection kinds map to their names; strings pass
    through; unknown values render as text.
    """
    if isinstance(kind, int) and not isinstance(kind, bool):
        return REFLECTION_KINDS.get(kind, str(kind))
    if kind is None:
        return ""
    return str(kind)


def _comment(node: Mapping[str, Any]) -> Mapping[str, Any]:
    return node.get("comment") or {}


def _block_tags(comment: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    return [tag for tag in comment.get("blockTags") or [] if isinstance(tag, Mapping)]


def _section(comment: Mapping[str, Any], section: str) -> Optional[str]:
    """Render a documentation section given as a field or as its block tag."""
    if comment.get(section):
        return render_parts(comment[section])
    tag_name = DOC_SECTION_TAGS.get(section)
    for tag in _block_tags(comment):
        if tag.get("tag") == tag_name:
            return render_parts(tag.get("content"))
    return None


def extract_documentation(node: Mapping[str, Any]) -> DocumentationDetail:
    """Render the comment sections of a declaration."""
    comment = _comment(node)
    flags = node.get("flags") or {}
    deprecation_message = _section(comment, "deprecated")

    return DocumentationDetail(
        summary=render_parts(comment.get("summary")),
        description=render_parts(comment.get("description")),
        remarks=_section(comment, "remarks"),
        deprecated=DeprecationDetail(
            is_deprecated=bool(flags.get("isDeprecated")) or deprecation_message is not None,
            message=deprecation_message,
        ),
        license=_section(comment, "license"),
        copyright=_section(comment, "copyright"),
        author=extract_author_list(comment),
        since=_section(comment, "since"),
    )


def _render_each(types: Optional[List[Any]]) -> Optional[List[str]]:
    if types is None:
        return None
    return [render_type(t) for t in types]


def extract_type_information(node: Mapping[str, Any]) -> TypeInformation:
    """Render a declaration's own type, type parameters and heritage."""
    own_type = node.get("type")
    return TypeInformation(
        type=render_type(own_type) if own_type else None,
        type_raw=own_type,
        type_parameters=extract_type_parameters(node.get("typeParameters")),
        extended_types=_render_each(node.get("extendedTypes")),
        implemented_types=_render_each(node.get("implementedTypes")),
    )


def _reference(ref: Any) -> Optional[ReferenceDetail]:
    if not isinstance(ref, Mapping):
        return None
    ref_id = ref.get("id", ref.get("target"))
    return ReferenceDetail(
        name=ref.get("name") or "unknown",
        id=str(ref_id) if isinstance(ref_id, (str, int)) else None,
    )


def _call_signature(node: Mapping[str, Any], signature: Mapping[str, Any]) -> SignatureDetail:
    sig_type = signature.get("type")
    summary = comment_summary(signature)
    description = _comment(signature).get("description")
    return SignatureDetail(
        name=signature.get("name"),
        kind=signature.get("kind"),
        signature=build_signature(str(node.get("name") or ""), signature),
        type_parameters=extract_type_parameters(signature.get("typeParameters")),
        parameters=extract_parameters(signature),
        return_type=ReturnTypeDetail(
            type=render_type(sig_type) if sig_type else VOID_TYPE,
            type_raw=sig_type,
            description=summary,
        ),
        overwrites=_reference(signature.get("overwrites")),
        inherited_from=_reference(signature.get("inheritedFrom")),
        implementation_of=_reference(signature.get("implementationOf")),
        documentation=SignatureDocumentation(
            summary=summary,
            description=render_parts(description) if description else None,
        ),
    )


def _index_signature(index_signature: Mapping[str, Any]) -> SignatureDetail:
    return SignatureDetail(
        name=INDEX_SIGNATURE_NAME,
        kind=index_signature.get("kind"),
        signature=build_index_signature_string(index_signature),
        parameters=extract_parameters(index_signature),
        return_type=ReturnTypeDetail(
            type=render_type(index_signature.get("type")),
            type_raw=index_signature.get("type"),
        ),
        documentation=SignatureDocumentation(summary=comment_summary(index_signature)),
    )


def extract_signatures(node: Mapping[str, Any]) -> List[SignatureDetail]:
    """Collect overloads, then getter/setter, then index signatures."""
    signatures = [_call_signature(node, sig) for sig in node.get("signatures") or []]

    if node.get("getSignature"):
        signatures.append(build_accessor_signature(node["getSignature"], GETTER))
    if node.get("setSignature"):
        signatures.append(build_accessor_signature(node["setSignature"], SETTER))

    signatures.extend(_index_signature(sig) for sig in node.get("indexSignatures") or [])
    return signatures


def _typed_tag_type(tag: Mapping[str, Any]) -> Optional[str]:
    expr = tag.get("typeExpression")
    return render_type(expr) if expr else None


def categorize_tags(comment: Mapping[str, Any]) -> TagsDetail:
    """Partition a comment's block tags by tag name.

    Tags without a dedicated bucket are grouped under their literal name
    in ``custom_tags``.
    """
    tags = TagsDetail()

    for tag in _block_tags(comment):
        tag_name = tag.get("tag")
        text = render_parts(tag.get("content"))

        if tag_name == EXAMPLE_TAG:
            tags.examples.append(
                ExampleDetail(text=text, is_code=looks_like_code(text), language=detect_language(text))
            )
            tags.example_code_blocks.extend(extract_fenced_code_blocks(text))
        elif tag_name in TUTORIAL_TAGS:
            tags.tutorials.append(text)
        elif tag_name == SEE_TAG:
            tags.see_tags.append(text)
        elif tag_name in THROWS_TAGS:
            tags.throws_tags.append(text)
        elif tag_name in RETURNS_TAGS:
            tags.returns_tags.append(
                ReturnTagDetail(
                    description=text,
                    type=_typed_tag_type(tag),
                    type_raw=tag.get("typeExpression"),
                )
            )
        elif tag_name == PARAM_TAG:
            tags.param_tags.append(
                ParamTagDetail(
                    param_name=tag.get("name"),
                    description=text,
                    type=_typed_tag_type(tag),
                    type_raw=tag.get("typeExpression"),
                )
            )
        elif tag_name in TYPE_PARAM_TAGS:
            tags.typeparam_tags.append(TypeParamTagDetail(param_name=tag.get("name"), description=text))
        else:
            tags.custom_tags.setdefault(str(tag_name), []).append(text)

    return tags


def _identity(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        value = value.get("id")
    return str(value) if value is not None else None


def extract_hierarchy(
    node: Mapping[str, Any],
    parent: Optional[Mapping[str, Any]] = None,
    module: Optional[Mapping[str, Any]] = None,
) -> HierarchyDetail:
    """Describe where a declaration sits in the declaration tree.

    Args:
        node: The declaration node.
        parent: The enclosing declaration, when known from the walk.
        module: The nearest enclosing module or namespace declaration.

    Returns:
        HierarchyDetail. Without an enclosing declaration only the node's
        own ``parent`` reference is reported; its name and kind are left
        unresolved.
    """
    detail = HierarchyDetail()

    if parent is not None:
        detail.parent_id = _identity(parent)
        detail.parent_name = parent.get("name")
        detail.parent_kind = kind_name(parent.get("kind"))
    elif node.get("parent") is not None:
        detail.parent_id = _identity(node["parent"])

    children = node.get("children")
    if children is not None:
        detail.children_ids = [_identity(child) for child in children]

    own_module = node.get("module")
    if isinstance(own_module, Mapping):
        detail.module_id = _identity(own_module)
        detail.module_name = own_module.get("name")
    elif module is not None:
        detail.module_id = _identity(module)
        detail.module_name = module.get("name")

    return detail


def extract_source_info(node: Mapping[str, Any]) -> SourceInfo:
    """Read the first source location of a declaration."""
    sources = node.get("sources") or []
    source = sources[0] if sources and isinstance(sources[0], Mapping) else {}
    return SourceInfo(
        filename=source.get("fileName") or UNKNOWN_SOURCE_FILE,
        line_start=source.get("line"),
        # The producer only gives a character offset as second position
        line_end=source.get("character"),
        url=source.get("url"),
    )


def extract_modifiers(node: Mapping[str, Any]) -> ModifiersDetail:
    """Copy modifier flags; unset flags stay None."""
    flags = node.get("flags") or {}
    return ModifiersDetail(
        **{
            _snake_flag(flag): flags[flag]
            for flag in MODIFIER_FLAGS
            if flags.get(flag) is not None
        }
    )


def _snake_flag(flag: str) -> str:
    # isReadonly -> is_readonly
    return "is_" + flag[2:].lower()


def derive_search_tokens(
    name: str,
    full_path: str,
    kind: str,
    summary: str,
    comment: Mapping[str, Any],
) -> List[str]:
    """Derive keyword tokens for the search index.

    Order: name, full path, kind, the first summary words, then the first
    words of every searchable block tag. Empty tokens are dropped; there
    is no deduplication or case folding.
    """
    tokens = [name, full_path, kind]
    tokens.extend(summary.split()[:SUMMARY_TOKEN_LIMIT])

    for tag in _block_tags(comment):
        if tag.get("tag") in SEARCHABLE_BLOCK_TAGS:
            tokens.extend(render_parts(tag.get("content")).split()[:TAG_TOKEN_LIMIT])

    return [token for token in tokens if token]


def extract_record(
    node: Mapping[str, Any],
    ancestor_path: Optional[str] = None,
    parent: Optional[Mapping[str, Any]] = None,
    module: Optional[Mapping[str, Any]] = None,
) -> ExtractedRecord:
    """Extract the full record for one declaration node.

    Args:
        node: The declaration node.
        ancestor_path: Full path of the enclosing declaration, if any.
        parent: The enclosing declaration node, if any.
        module: The nearest enclosing module/namespace node, if any.

    Returns:
        The ExtractedRecord for ``node``. Children are not visited. A
        node without a name is extracted with an empty name.

    Raises:
        DeclarationError: If the node is not an object or has no ``id``.
    """
    if not isinstance(node, Mapping):
        raise DeclarationError(f"Declaration node must be an object, got {type(node).__name__}")
    if node.get("id") is None:
        raise DeclarationError(f"Declaration {node.get('name')!r} has no id")

    name = str(node.get("name") or "")
    full_path = build_full_path(ancestor_path, name)
    kind = kind_name(node.get("kind"))
    documentation = extract_documentation(node)
    comment = _comment(node)

    record = ExtractedRecord(
        id=str(node["id"]),
        name=name,
        kind=kind,
        full_path=full_path,
        documentation=documentation,
        types=extract_type_information(node),
        signatures=extract_signatures(node),
        parameters=extract_parameters(node),
        tags=categorize_tags(comment),
        hierarchy=extract_hierarchy(node, parent=parent, module=module),
        source=extract_source_info(node),
        modifiers=extract_modifiers(node),
        default_value=node.get("defaultValue"),
        search_tokens=derive_search_tokens(name, full_path, kind, documentation.summary, comment),
        raw=node,
    )

    logger.debug("Extracted %s %s (id=%s)", kind, full_path, record.id)
    return record
