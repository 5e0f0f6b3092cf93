"""
High-level orchestrator for TypeDoc documentation extraction.

This module provides the main entry points for extracting records from a
loaded TypeDoc project or a JSON file, building the search index and run
summary, and handing the artifacts to the writers in ``core``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from core.run_artifacts import utc_timestamp, write_artifacts, write_run_report
from core.run_config import RunConfig
from core.structured_logging import get_run_id, phase_scope, set_run_id
from extraction.config import (
    COMPACT_RECORDS_FILE,
    FULL_RECORDS_FILE,
    SEARCH_INDEX_FILE,
    SUMMARY_FILE,
)
from extraction.declarations import extract_record
from extraction.loader import load_file
from extraction.models import ExtractedRecord
from extraction.search_index import build_search_index
from extraction.traversal import NodeFailure, RecordExtractor, walk_forest

logger = logging.getLogger(__name__)


class ExtractionStats:
    """Statistics for an extraction run."""

    def __init__(self):
        self.nodes_visited = 0
        self.records_extracted = 0
        self.nodes_failed = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "nodes_visited": self.nodes_visited,
            "records_extracted": self.records_extracted,
            "nodes_failed": self.nodes_failed,
        }

    def __str__(self) -> str:
        return (
            f"ExtractionStats(visited={self.nodes_visited}, "
            f"extracted={self.records_extracted}, failed={self.nodes_failed})"
        )


@dataclass
class ExtractionRun:
    """Everything one run produces, ready to be persisted.

    Attributes:
        records: Extracted records in pre-order.
        search_index: Lookup index built from ``records``.
        summary: Run summary (timestamp, totals, project name/version).
        failures: Declarations skipped because extraction failed.
        stats: Counters for the run.
    """

    records: List[ExtractedRecord]
    search_index: Dict[str, Any]
    summary: Dict[str, Any]
    failures: List[NodeFailure] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)

    def full_records(self) -> List[Dict[str, Any]]:
        """Records including the original declaration nodes."""
        return [record.to_dict() for record in self.records]

    def compact_records(self) -> List[Dict[str, Any]]:
        """Records without the original declaration nodes."""
        return [record.to_dict(include_raw=False) for record in self.records]

    def artifacts(self) -> Dict[str, Any]:
        """The four output artifacts keyed by filename."""
        return {
            FULL_RECORDS_FILE: self.full_records(),
            SUMMARY_FILE: self.summary,
            COMPACT_RECORDS_FILE: self.compact_records(),
            SEARCH_INDEX_FILE: self.search_index,
        }


def build_run_summary(project: Mapping[str, Any], total_records: int) -> Dict[str, Any]:
    """Build the run summary from the project context."""
    return {
        "timestamp": utc_timestamp(),
        "totalEntries": total_records,
        "projectName": project.get("name"),
        "projectVersion": project.get("packageVersion", project.get("version")),
    }


def extract_project(
    project: Mapping[str, Any],
    extractor: RecordExtractor = extract_record,
) -> ExtractionRun:
    """Extract every declaration of a loaded TypeDoc project.

    Args:
        project: Project mapping whose ``children`` form the declaration
            forest; ``name`` and ``version`` feed the run summary only.
        extractor: Record extraction function (replaceable for tests).

    Returns:
        ExtractionRun with records, search index and summary.

    Example:
        >>> run = extract_project({"name": "demo", "children": [{"id": 1, "name": "foo", "kind": 64}]})
        >>> run.search_index["path:foo"]
        '1'
    """
    roots = project.get("children") or []
    logger.info(f"Processing {len(roots)} root declarations")

    with phase_scope("extract"):
        walk = walk_forest(roots, extractor=extractor)

    with phase_scope("index"):
        search_index = build_search_index(walk.records)

    stats = ExtractionStats()
    stats.nodes_visited = walk.nodes_visited
    stats.records_extracted = len(walk.records)
    stats.nodes_failed = len(walk.failures)

    logger.info(f"Extraction complete: {stats}")
    return ExtractionRun(
        records=walk.records,
        search_index=search_index,
        summary=build_run_summary(project, len(walk.records)),
        failures=walk.failures,
        stats=stats,
    )


def extract_file(input_path: str) -> ExtractionRun:
    """Load a TypeDoc JSON file and extract all of its declarations.

    Raises:
        ForestLoadError: If the file cannot be loaded.
    """
    with phase_scope("load"):
        project = load_file(input_path)
    return extract_project(project)


def write_extraction_artifacts(
    run: ExtractionRun,
    output_dir: str,
    pretty: bool = True,
) -> Dict[str, str]:
    """Persist the run's artifacts and return their paths by filename."""
    with phase_scope("write"):
        paths = write_artifacts(run.artifacts(), output_dir, pretty=pretty)
    logger.info(f"Results saved to: {output_dir}")
    return paths


def process_file(config: RunConfig, run_id: Optional[str] = None) -> ExtractionRun:
    """Run the full pipeline for one input: load, extract, write, report.

    Args:
        config: Resolved run configuration.
        run_id: Run correlation id; defaults to the current logging run id.

    Returns:
        The ExtractionRun that was written.

    Raises:
        ForestLoadError: If the input cannot be loaded.
    """
    run = extract_file(config.input_path)
    paths = write_extraction_artifacts(run, config.output_dir, pretty=config.pretty)

    run_id = run_id or get_run_id()
    if run_id == "-":
        run_id = set_run_id()
    report_path = write_run_report(
        report={
            "status": "success",
            "input_path": config.input_path,
            "output_dir": config.output_dir,
            "stats": run.stats.to_dict(),
            "failures": [failure.to_dict() for failure in run.failures],
            "artifacts": paths,
        },
        run_id=run_id,
        output_dir=config.report_dir,
    )
    logger.info("Run report written to %s", report_path)
    return run
