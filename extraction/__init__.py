"""
Extraction Engine

Turns a TypeDoc JSON project into normalized documentation records.
Renders type expressions and comments, builds signatures, and walks the
declaration tree with per-node fault isolation.
"""

from extraction.models import DeclarationError, ExtractedRecord
from extraction.loader import ForestLoadError, load_bytes, load_file
from extraction.type_renderer import render_type
from extraction.comment_renderer import (
    detect_language,
    extract_author_list,
    extract_fenced_code_blocks,
    looks_like_code,
    render_parts,
)
from extraction.signatures import (
    build_accessor_signature,
    build_index_signature_string,
    build_parameter_clause,
    build_signature,
    build_type_parameter_clause,
)
from extraction.declarations import build_full_path, extract_record
from extraction.traversal import ExtractionOutcome, try_extract_record, walk_forest
from extraction.search_index import build_search_index
from extraction.extractor import (
    ExtractionRun,
    ExtractionStats,
    extract_file,
    extract_project,
    process_file,
    write_extraction_artifacts,
)

__all__ = [
    # Data models
    "DeclarationError",
    "ExtractedRecord",
    "ExtractionOutcome",
    "ExtractionRun",
    "ExtractionStats",
    # Loading
    "ForestLoadError",
    "load_bytes",
    "load_file",
    # Rendering
    "render_type",
    "render_parts",
    "extract_author_list",
    "extract_fenced_code_blocks",
    "looks_like_code",
    "detect_language",
    # Signatures
    "build_signature",
    "build_type_parameter_clause",
    "build_parameter_clause",
    "build_accessor_signature",
    "build_index_signature_string",
    # Per-declaration extraction
    "build_full_path",
    "extract_record",
    "try_extract_record",
    "walk_forest",
    "build_search_index",
    # High-level orchestration
    "extract_project",
    "extract_file",
    "process_file",
    "write_extraction_artifacts",
]
