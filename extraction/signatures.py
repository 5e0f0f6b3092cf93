"""
Signature string construction for callables, accessors and index signatures.

Combines rendered types with parameter and type parameter lists into the
TypeScript-style signatures stored on extracted records.
"""

from typing import Any, List, Mapping, Optional

from extraction.comment_renderer import render_parts
from extraction.config import (
    ACCESSOR_KINDS,
    ANY_TYPE,
    GETTER,
    VOID_TYPE,
)
from extraction.models import (
    ParameterDetail,
    ReturnTypeDetail,
    SignatureDetail,
    SignatureDocumentation,
    TypeDefinition,
    TypeParameterDetail,
)
from extraction.type_renderer import render_type


def _flags(node: Mapping[str, Any]) -> Mapping[str, Any]:
    return node.get("flags") or {}


def comment_summary(node: Mapping[str, Any]) -> Optional[str]:
    """Rendered summary of a node's comment, or None if it has none."""
    comment = node.get("comment") or {}
    if not comment.get("summary"):
        return None
    return render_parts(comment["summary"])


def build_type_parameter_clause(type_parameters: Optional[List[Mapping[str, Any]]]) -> str:
    """Render a type parameter list as ``<T extends C = D, U>``.

    Returns an empty string when there are no type parameters.
    """
    if not type_parameters:
        return ""

    rendered = []
    for type_param in type_parameters:
        text = str(type_param.get("name"))
        if type_param.get("type"):
            text += f" extends {render_type(type_param['type'])}"
        if type_param.get("default"):
            text += f" = {render_type(type_param['default'])}"
        rendered.append(text)
    return f"<{', '.join(rendered)}>"


def build_parameter_clause(parameters: Optional[List[Mapping[str, Any]]]) -> str:
    """Render a parameter list as ``...rest: T[], opt?: U = default``.

    The rest marker, optional marker and default value appear only when
    set, in that order.
    """
    if not parameters:
        return ""

    rendered = []
    for param in parameters:
        flags = _flags(param)
        text = "..." if flags.get("isRest") else ""
        text += str(param.get("name"))
        if flags.get("isOptional"):
            text += "?"
        text += f": {render_type(param.get('type'))}"
        if param.get("defaultValue"):
            text += f" = {param['defaultValue']}"
        rendered.append(text)
    return ", ".join(rendered)


def build_signature(declaration_name: str, signature: Mapping[str, Any]) -> str:
    """Build ``name<T>(params): ReturnType`` for one call signature.

    Example:
        >>> build_signature("f", {"parameters": [{"name": "x", "type": {"type": "intrinsic", "name": "number"}}],
        ...                       "type": {"type": "intrinsic", "name": "void"}})
        'f(x: number): void'
    """
    type_params = build_type_parameter_clause(signature.get("typeParameters"))
    params = build_parameter_clause(signature.get("parameters"))
    return_type = render_type(signature.get("type"))
    return f"{declaration_name}{type_params}({params}): {return_type}"


def build_index_signature_string(index_signature: Mapping[str, Any]) -> str:
    """Build ``[key: K]: V`` for an index signature."""
    params = ", ".join(
        f"{param.get('name')}: {render_type(param.get('type'))}"
        for param in index_signature.get("parameters") or []
    )
    return f"[{params}]: {render_type(index_signature.get('type'))}"


def extract_parameters(owner: Mapping[str, Any]) -> List[ParameterDetail]:
    """Extract the value parameters declared on a node or signature."""
    parameters = []
    for param in owner.get("parameters") or []:
        flags = _flags(param)
        param_type = param.get("type")
        parameters.append(
            ParameterDetail(
                name=param.get("name"),
                kind=param.get("kind"),
                type=TypeDefinition(
                    type=render_type(param_type) if param_type else ANY_TYPE,
                    type_raw=param_type,
                ),
                description=comment_summary(param),
                is_optional=bool(flags.get("isOptional", False)),
                is_rest=bool(flags.get("isRest", False)),
                default_value=param.get("defaultValue"),
            )
        )
    return parameters


def extract_type_parameters(
    type_parameters: Optional[List[Mapping[str, Any]]],
) -> List[TypeParameterDetail]:
    """Extract type parameters with their constraints and defaults."""
    details = []
    for type_param in type_parameters or []:
        constraint = type_param.get("type")
        default = type_param.get("default")
        details.append(
            TypeParameterDetail(
                name=type_param.get("name"),
                constraint=TypeDefinition(render_type(constraint), constraint) if constraint else None,
                default=TypeDefinition(render_type(default), default) if default else None,
                description=comment_summary(type_param),
            )
        )
    return details


def build_accessor_signature(accessor: Mapping[str, Any], kind: str) -> SignatureDetail:
    """Synthesize a signature record for a getter or setter.

    Args:
        accessor: The ``getSignature`` or ``setSignature`` node.
        kind: ``"getter"`` or ``"setter"``.

    Returns:
        A SignatureDetail named after the accessor kind. Getters render as
        ``get property(): T`` without parameters; setters render as
        ``set property(value: T): void`` and carry their own parameters.

    Raises:
        ValueError: If ``kind`` is not an accessor kind.
    """
    if kind not in ACCESSOR_KINDS:
        raise ValueError(f"Unknown accessor kind: {kind}")

    value_type = render_type(accessor.get("type"))
    if kind == GETTER:
        signature = f"get property(): {value_type}"
        parameters: List[ParameterDetail] = []
        return_type = value_type
    else:
        signature = f"set property(value: {value_type}): {VOID_TYPE}"
        parameters = extract_parameters(accessor)
        return_type = VOID_TYPE

    return SignatureDetail(
        name=kind,
        kind=ACCESSOR_KINDS[kind],
        signature=signature,
        parameters=parameters,
        return_type=ReturnTypeDetail(type=return_type, type_raw=accessor.get("type")),
        documentation=SignatureDocumentation(summary=comment_summary(accessor)),
    )

