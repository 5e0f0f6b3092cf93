"""
Keyword lookup index over extracted records.
"""

from typing import Any, Dict, Iterable

from extraction.models import ExtractedRecord

ID_PREFIX = "id:"
PATH_PREFIX = "path:"
TOKEN_PREFIX = "token:"


def build_search_index(records: Iterable[ExtractedRecord]) -> Dict[str, Any]:
    """Build the flat lookup index for a run.

    Keys:
        ``id:<id>`` -> ``{"name", "kind", "fullPath"}``
        ``path:<fullPath>`` -> id
        ``token:<lowercased token>`` -> ids in record order (repeats kept)

    Args:
        records: Records in traversal order.

    Returns:
        The index mapping.
    """
    index: Dict[str, Any] = {}

    for record in records:
        index[f"{ID_PREFIX}{record.id}"] = {
            "name": record.name,
            "kind": record.kind,
            "fullPath": record.full_path,
        }
        index[f"{PATH_PREFIX}{record.full_path}"] = record.id

        for token in record.search_tokens:
            index.setdefault(f"{TOKEN_PREFIX}{token.lower()}", []).append(record.id)

    return index
