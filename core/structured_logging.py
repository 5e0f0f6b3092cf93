"""Structured logging helpers with run, phase and declaration context."""

from __future__ import annotations

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator

_RUN_ID_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "run_id", default="-"
)
_PHASE_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "phase", default="-"
)
_NODE_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "node", default="-"
)

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | run_id=%(run_id)s | phase=%(phase)s | "
    "node=%(node)s | %(name)s | %(message)s"
)


class _ExtractionContextFilter(logging.Filter):
    """Inject run, phase and current declaration into all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID_VAR.get()
        record.phase = _PHASE_VAR.get()
        record.node = _NODE_VAR.get()
        return True


def _ensure_filter_on_root_handlers() -> None:
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, _ExtractionContextFilter) for f in handler.filters):
            handler.addFilter(_ExtractionContextFilter())


def configure_structured_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with the extraction context format.

    Args:
        level: Logging level as a number or a name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root_logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)
    _ensure_filter_on_root_handlers()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate the run correlation ID."""
    value = run_id or str(uuid.uuid4())
    _RUN_ID_VAR.set(value)
    return value


def get_run_id() -> str:
    """Get the current run correlation ID."""
    return _RUN_ID_VAR.get()


def get_current_node() -> str:
    """Path of the declaration currently being extracted, or ``-``."""
    return _NODE_VAR.get()


@contextmanager
def phase_scope(phase: str) -> Iterator[None]:
    """Temporarily set the pipeline phase for emitted logs."""
    token = _PHASE_VAR.set(phase)
    try:
        yield
    finally:
        _PHASE_VAR.reset(token)


@contextmanager
def node_scope(node_path: str) -> Iterator[None]:
    """Tag logs emitted while extracting one declaration with its path."""
    token = _NODE_VAR.set(node_path)
    try:
        yield
    finally:
        _NODE_VAR.reset(token)
