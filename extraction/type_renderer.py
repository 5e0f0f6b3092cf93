"""
Rendering of TypeDoc type expressions into TypeScript-like strings.

Every type expression is a mapping tagged by its ``type`` key. Each tag
has exactly one renderer in ``_RENDERERS``; anything else falls through
to ``_render_fallback``. Rendering is total: malformed payloads degrade
to ``"any"``/``"unknown"`` fragments instead of raising.
"""

import json
import logging
import math
import re
from decimal import Decimal
from typing import Any, Callable, Dict, Mapping

from extraction.config import ANY_TYPE, UNKNOWN

logger = logging.getLogger(__name__)

_EXPONENT_ZEROS_RE = re.compile(r"e([+-])0+(\d)")


def render_type(expr: Any) -> str:
    """Render a type expression to its canonical string form.

    Args:
        expr: A type expression mapping, a pre-rendered string, or None.

    Returns:
        The rendered type. ``None`` renders as ``"any"``.

    Example:
        >>> render_type({"type": "array", "elementType": {"type": "intrinsic", "name": "string"}})
        'string[]'
    """
    if expr is None:
        return ANY_TYPE
    if isinstance(expr, str):
        return expr
    if not isinstance(expr, Mapping):
        logger.debug("Cannot render non-mapping type expression %r", expr)
        return UNKNOWN

    tag = expr.get("type")
    renderer = _RENDERERS.get(tag, _render_fallback) if isinstance(tag, str) else _render_fallback
    return renderer(expr)


def _join(types: Any, separator: str) -> str:
    if not isinstance(types, list):
        return ""
    return separator.join(render_type(t) for t in types)


def _render_intrinsic(expr: Mapping[str, Any]) -> str:
    return str(expr.get("name") or ANY_TYPE)


def _render_reference(expr: Mapping[str, Any]) -> str:
    result = str(expr.get("name") or UNKNOWN)
    arguments = expr.get("typeArguments")
    if arguments:
        result += f"<{_join(arguments, ', ')}>"
    return result


def _render_array(expr: Mapping[str, Any]) -> str:
    return f"{render_type(expr.get('elementType'))}[]"


def _render_union(expr: Mapping[str, Any]) -> str:
    return _join(expr.get("types"), " | ")


def _render_intersection(expr: Mapping[str, Any]) -> str:
    return _join(expr.get("types"), " & ")


def render_literal(value: Any) -> str:
    """Render a literal type value.

    Strings are double-quoted, ``None`` is ``null``, booleans and numbers
    use their JavaScript text form and big integers (``{"negative",
    "value"}`` mappings) render as ``-123n``. Anything else is dumped as
    compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _render_number(value)
    if isinstance(value, Mapping) and "negative" in value and "value" in value:
        sign = "-" if value["negative"] else ""
        return f"{sign}{value['value']}n"
    return json.dumps(value, separators=(",", ":"), default=str)


def _render_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    # JavaScript only switches to exponent form below 1e-6
    if abs(value) >= 1e-6:
        return format(Decimal(text), "f")
    return _EXPONENT_ZEROS_RE.sub(r"e\1\2", text)


def _render_literal(expr: Mapping[str, Any]) -> str:
    # A literal without a value key is the ``undefined`` literal
    if "value" not in expr:
        return "undefined"
    return render_literal(expr["value"])


def _render_tuple(expr: Mapping[str, Any]) -> str:
    return f"[{_join(expr.get('elements'), ', ')}]"


def _render_named_tuple_member(expr: Mapping[str, Any]) -> str:
    name = expr.get("name") or UNKNOWN
    return f"{name}: {render_type(expr.get('element'))}"


def _render_reflection(expr: Mapping[str, Any]) -> str:
    declaration = expr.get("declaration")
    if not isinstance(declaration, Mapping):
        return "{...}"

    children = declaration.get("children")
    if isinstance(children, list):
        members = "; ".join(
            f"{child.get('name')}: {render_type(child.get('type'))}"
            for child in children
            if isinstance(child, Mapping)
        )
        return f"{{ {members} }}"

    signatures = declaration.get("signatures")
    if signatures and isinstance(signatures, list):
        # Only the first overload is rendered for function shapes
        signature = signatures[0]
        if not isinstance(signature, Mapping):
            return "{...}"
        parameters = signature.get("parameters")
        params = ", ".join(
            f"{param.get('name')}: {render_type(param.get('type'))}"
            for param in (parameters if isinstance(parameters, list) else [])
            if isinstance(param, Mapping)
        )
        return f"({params}) => {render_type(signature.get('type'))}"

    return "{...}"


def _render_optional(expr: Mapping[str, Any]) -> str:
    return f"{render_type(expr.get('elementType'))} | undefined"


def _render_rest(expr: Mapping[str, Any]) -> str:
    return f"...{render_type(expr.get('elementType'))}"


def _render_conditional(expr: Mapping[str, Any]) -> str:
    check = render_type(expr.get("checkType"))
    extends = render_type(expr.get("extendsType"))
    true_type = render_type(expr.get("trueType"))
    false_type = render_type(expr.get("falseType"))
    return f"{check} extends {extends} ? {true_type} : {false_type}"


def _render_inferred(expr: Mapping[str, Any]) -> str:
    result = f"infer {expr.get('name') or UNKNOWN}"
    if expr.get("constraint"):
        result += f" extends {render_type(expr['constraint'])}"
    return result


def _render_indexed_access(expr: Mapping[str, Any]) -> str:
    return f"{render_type(expr.get('objectType'))}[{render_type(expr.get('indexType'))}]"


def _render_mapped(expr: Mapping[str, Any]) -> str:
    result = "{ "
    if expr.get("readonlyModifier"):
        result += f"{expr['readonlyModifier']} "
    result += f"[{expr.get('parameter')} in {render_type(expr.get('parameterType'))}]"
    if expr.get("optionalModifier"):
        result += f"{expr['optionalModifier']}"
    result += f": {render_type(expr.get('templateType'))}"
    if expr.get("nameType"):
        result += f" as {render_type(expr['nameType'])}"
    return result + " }"


def _render_type_operator(expr: Mapping[str, Any]) -> str:
    return f"{expr.get('operator')} {render_type(expr.get('target'))}"


def _render_query(expr: Mapping[str, Any]) -> str:
    return f"typeof {render_type(expr.get('queryType'))}"


def _render_template_literal(expr: Mapping[str, Any]) -> str:
    result = "`" + str(expr.get("head") or "")
    tail = expr.get("tail")
    for entry in tail if isinstance(tail, list) else []:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            continue
        tail_type, tail_text = entry
        result += "${" + render_type(tail_type) + "}" + str(tail_text or "")
    return result + "`"


def _render_predicate(expr: Mapping[str, Any]) -> str:
    result = str(expr.get("name") or UNKNOWN)
    if expr.get("asserts"):
        result = f"asserts {result}"
    if expr.get("targetType"):
        result += f" is {render_type(expr['targetType'])}"
    return result


def _render_fallback(expr: Mapping[str, Any]) -> str:
    logger.debug("Unrecognized type expression tag %r", expr.get("type"))
    return str(expr.get("name") or UNKNOWN)


_RENDERERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "intrinsic": _render_intrinsic,
    "reference": _render_reference,
    "array": _render_array,
    "union": _render_union,
    "intersection": _render_intersection,
    "literal": _render_literal,
    "tuple": _render_tuple,
    "namedTupleMember": _render_named_tuple_member,
    "reflection": _render_reflection,
    "optional": _render_optional,
    "rest": _render_rest,
    "conditional": _render_conditional,
    "inferred": _render_inferred,
    "indexedAccess": _render_indexed_access,
    "mapped": _render_mapped,
    "typeOperator": _render_type_operator,
    "query": _render_query,
    "templateLiteral": _render_template_literal,
    "predicate": _render_predicate,
}
