"""Shared run infrastructure: configuration, logging context and artifacts."""

from core.structured_logging import (
    configure_structured_logging,
    get_current_node,
    get_run_id,
    node_scope,
    phase_scope,
    set_run_id,
)
from core.run_config import (
    ConfigValidationError,
    RunConfig,
    load_run_config_file,
    resolve_run_config,
    settings_from_env,
)
from core.run_artifacts import (
    utc_timestamp,
    write_artifacts,
    write_json_artifact,
    write_run_report,
)

__all__ = [
    "configure_structured_logging",
    "get_current_node",
    "get_run_id",
    "node_scope",
    "phase_scope",
    "set_run_id",
    "ConfigValidationError",
    "RunConfig",
    "load_run_config_file",
    "resolve_run_config",
    "settings_from_env",
    "utc_timestamp",
    "write_artifacts",
    "write_json_artifact",
    "write_run_report",
]
