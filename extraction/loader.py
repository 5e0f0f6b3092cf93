"""
Loading of TypeDoc JSON projects.

This module provides functions to read a TypeDoc JSON export from disk
or from raw bytes and check that it has the shape of a project.
"""

import json
import logging
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)


class ForestLoadError(RuntimeError):
    """Raised when the declaration forest cannot be loaded."""


def load_bytes(source: Union[bytes, str]) -> Dict[str, Any]:
    """Parse a TypeDoc JSON document.

    Args:
        source: UTF-8 encoded JSON bytes, or an already decoded string.

    Returns:
        The project mapping.

    Raises:
        ForestLoadError: If the payload is not valid JSON or not an object.

    Example:
        >>> project = load_bytes(b'{"name": "demo", "children": []}')
        >>> project["name"]
        'demo'
    """
    try:
        payload = json.loads(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ForestLoadError(f"Invalid TypeDoc JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ForestLoadError(
            f"TypeDoc JSON must be an object, got {type(payload).__name__}"
        )

    children = payload.get("children")
    if children is not None and not isinstance(children, list):
        raise ForestLoadError("TypeDoc JSON 'children' must be a list")

    logger.debug("Parsed TypeDoc project with %d root declarations", len(children or []))
    return payload


def load_file(file_path: str) -> Dict[str, Any]:
    """Load a TypeDoc JSON export from disk.

    Args:
        file_path: Path to the JSON file produced by ``typedoc --json``.

    Returns:
        The project mapping.

    Raises:
        ForestLoadError: If the file cannot be read or parsed.
    """
    try:
        with open(file_path, "rb") as f:
            source_bytes = f.read()
    except FileNotFoundError as e:
        logger.error(f"File not found: {file_path}")
        raise ForestLoadError(f"File not found: {file_path}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise ForestLoadError(f"Cannot read {file_path}: {e}") from e

    project = load_bytes(source_bytes)
    logger.info(f"Loaded TypeDoc JSON: {file_path}")
    return project
