"""Run configuration for the extraction pipeline.

Settings are merged from, lowest to highest precedence: built-in
defaults, an optional YAML/JSON config file, ``TYPEDOC_RAG_*``
environment variables (a ``.env`` file is honoured via python-dotenv),
and explicit overrides from the command line.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TYPEDOC_RAG_"
DEFAULT_OUTPUT_DIR = "./extracted-docs"
DEFAULT_REPORT_DIR = "output/run_reports"
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigValidationError(RuntimeError):
    """Raised when the run configuration is invalid."""


@dataclass(frozen=True)
class RunConfig:
    """Resolved settings for one extraction run."""

    input_path: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    pretty: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    report_dir: str = DEFAULT_REPORT_DIR


_SETTING_NAMES = tuple(f.name for f in fields(RunConfig))


def _parse_flag(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(f"{name} must be a boolean, got {raw!r}")


def _expect_dict(payload: Any, ctx: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ConfigValidationError(f"{ctx} must be an object")
    return payload


def load_run_config_file(path: str) -> dict[str, Any]:
    """Load raw settings from a YAML or JSON file.

    Raises:
        ConfigValidationError: If the file is missing, unparsable, not a
            mapping, or names unknown settings.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigValidationError(f"Config file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    try:
        if config_path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Failed to parse config file {config_path}: {exc}") from exc

    if payload is None:
        return {}
    settings = _expect_dict(payload, "config file")

    unknown = sorted(set(settings) - set(_SETTING_NAMES))
    if unknown:
        raise ConfigValidationError(f"Unknown config settings: {', '.join(unknown)}")
    return settings


def settings_from_env(env: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    """Collect ``TYPEDOC_RAG_<SETTING>`` variables as raw settings."""
    env = os.environ if env is None else env
    settings: dict[str, Any] = {}
    for name in _SETTING_NAMES:
        value = env.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None and value != "":
            settings[name] = value
    return settings


def _validate(config: RunConfig) -> RunConfig:
    if not str(config.input_path).strip():
        raise ConfigValidationError("input_path is required")
    if not str(config.output_dir).strip():
        raise ConfigValidationError("output_dir must not be empty")

    log_level = str(config.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigValidationError(f"Unsupported log_level: {config.log_level}")

    return replace(
        config,
        input_path=str(config.input_path),
        output_dir=str(config.output_dir),
        report_dir=str(config.report_dir),
        pretty=_parse_flag("pretty", config.pretty),
        log_level=log_level,
    )


def resolve_run_config(
    input_path: Optional[str] = None,
    config_file: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> RunConfig:
    """Resolve the settings for a run.

    Args:
        input_path: TypeDoc JSON path (highest precedence for the input).
        config_file: Optional YAML/JSON settings file.
        overrides: Explicit settings, typically parsed CLI flags. ``None``
            values are ignored.
        env: Environment mapping; defaults to ``os.environ``.
        use_dotenv: Load a ``.env`` file into the process environment
            first (only when ``env`` is not given).

    Returns:
        Validated RunConfig.

    Raises:
        ConfigValidationError: If any layer is invalid or the input path is
            missing.
    """
    if env is None and use_dotenv:
        load_dotenv()

    merged: dict[str, Any] = {}
    if config_file:
        merged.update(load_run_config_file(config_file))
    merged.update(settings_from_env(env))
    merged.update({k: v for k, v in (overrides or {}).items() if v is not None})
    if input_path is not None:
        merged["input_path"] = input_path

    if not merged.get("input_path"):
        raise ConfigValidationError("input_path is required")

    config = _validate(RunConfig(**merged))
    logger.debug("Resolved run config: %s", config)
    return config
