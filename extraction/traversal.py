"""
Declaration tree traversal with per-node fault isolation.

Walks the declaration forest depth-first in pre-order, extracting one
record per node. Extraction of a single node never aborts the walk: it
produces an ExtractionOutcome that is either a record or a failure
reason, and failed nodes are skipped together with their subtree.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional

from core.structured_logging import node_scope
from extraction.config import MODULE_KINDS
from extraction.declarations import extract_record, kind_name
from extraction.models import ExtractedRecord

logger = logging.getLogger(__name__)

RecordExtractor = Callable[..., ExtractedRecord]


@dataclass
class ExtractionOutcome:
    """Result of extracting one declaration node."""

    node_name: str
    record: Optional[ExtractedRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass
class NodeFailure:
    """A declaration that could not be extracted."""

    node_name: str
    ancestor_path: str
    error: str

    def to_dict(self) -> dict:
        return {
            "nodeName": self.node_name,
            "ancestorPath": self.ancestor_path,
            "error": self.error,
        }


@dataclass
class WalkResult:
    """Records in pre-order plus the failures met on the way."""

    records: List[ExtractedRecord] = field(default_factory=list)
    failures: List[NodeFailure] = field(default_factory=list)
    nodes_visited: int = 0


def _node_label(node: Any) -> str:
    if isinstance(node, Mapping):
        return str(node.get("name") or f"<id {node.get('id')}>")
    return f"<{type(node).__name__}>"


def try_extract_record(
    node: Any,
    ancestor_path: str = "",
    parent: Optional[Mapping[str, Any]] = None,
    module: Optional[Mapping[str, Any]] = None,
    extractor: RecordExtractor = extract_record,
) -> ExtractionOutcome:
    """Extract one node, turning any error into a failed outcome.

    Args:
        node: The declaration node.
        ancestor_path: Full path of the enclosing declaration.
        parent: The enclosing declaration node.
        module: The nearest enclosing module/namespace node.
        extractor: Record extraction function (replaceable for tests).

    Returns:
        ExtractionOutcome carrying either the record or the error text.
    """
    label = _node_label(node)
    try:
        record = extractor(node, ancestor_path, parent=parent, module=module)
    except Exception as e:
        return ExtractionOutcome(node_name=label, error=f"{type(e).__name__}: {e}")
    return ExtractionOutcome(node_name=label, record=record)


def walk_forest(
    nodes: Optional[List[Any]],
    ancestor_path: str = "",
    extractor: RecordExtractor = extract_record,
) -> WalkResult:
    """Extract records for every node of a declaration forest.

    Args:
        nodes: Top-level declaration nodes.
        ancestor_path: Path prefix for the top-level nodes.
        extractor: Record extraction function (replaceable for tests).

    Returns:
        WalkResult with records in depth-first pre-order.
    """
    result = WalkResult()
    _walk(nodes or [], ancestor_path, None, None, extractor, result)
    logger.info(
        "Walked %d declarations: %d extracted, %d failed",
        result.nodes_visited,
        len(result.records),
        len(result.failures),
    )
    return result


def _walk(
    nodes: List[Any],
    ancestor_path: str,
    parent: Optional[Mapping[str, Any]],
    module: Optional[Mapping[str, Any]],
    extractor: RecordExtractor,
    result: WalkResult,
) -> None:
    for node in nodes:
        result.nodes_visited += 1
        label = _node_label(node)

        with node_scope(f"{ancestor_path}.{label}" if ancestor_path else label):
            outcome = try_extract_record(
                node, ancestor_path, parent=parent, module=module, extractor=extractor
            )
            if not outcome.ok:
                logger.warning(
                    "Failed to extract documentation for %s: %s",
                    outcome.node_name,
                    outcome.error,
                )
                result.failures.append(
                    NodeFailure(
                        node_name=outcome.node_name,
                        ancestor_path=ancestor_path,
                        error=outcome.error or "",
                    )
                )
                continue

        record = outcome.record
        result.records.append(record)

        children = node.get("children")
        if isinstance(children, list) and children:
            child_module = node if kind_name(node.get("kind")) in MODULE_KINDS else module
            _walk(children, record.full_path, node, child_module, extractor, result)
