"""Run artifact writers for extraction output and operational reporting."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time in ISO 8601 form."""
    return datetime.now(timezone.utc).isoformat()


def write_json_artifact(
    data: Any,
    output_dir: str,
    filename: str,
    pretty: bool = True,
) -> str:
    """Serialize ``data`` to ``output_dir/filename`` and return the path."""
    os.makedirs(output_dir, exist_ok=True)
    text = json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)
    path = os.path.join(output_dir, filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote %s (%.2f MB)", filename, len(text) / 1024 / 1024)
    return path


def write_artifacts(
    artifacts: dict[str, Any],
    output_dir: str,
    pretty: bool = True,
) -> dict[str, str]:
    """Write several JSON artifacts, keyed by filename.

    Returns:
        Mapping of filename to written path, in input order.
    """
    return {
        filename: write_json_artifact(data, output_dir, filename, pretty=pretty)
        for filename, data in artifacts.items()
    }


def write_run_report(
    report: dict[str, Any],
    run_id: str,
    output_dir: str = "output/run_reports",
) -> str:
    """Write a JSON run report and return its path."""
    payload = dict(report)
    payload.setdefault("run_id", run_id)
    payload.setdefault("timestamp_utc", utc_timestamp())
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    return path
