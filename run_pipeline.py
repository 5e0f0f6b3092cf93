#!/usr/bin/env python3
"""
Command-line entry point for TypeDoc documentation extraction.

Loads a TypeDoc JSON export, extracts one normalized record per
declaration and writes the full records, the compact RAG index, the
search index and the run metadata to an output directory.

Usage:
    python run_pipeline.py docs.json
    python run_pipeline.py docs.json -o ./rag-output --compact
    python run_pipeline.py docs.json --config extractor.yml --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from core.run_config import ConfigValidationError, resolve_run_config
from core.structured_logging import configure_structured_logging, set_run_id
from extraction.extractor import process_file
from extraction.loader import ForestLoadError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="TypeDoc RAG Extractor: extract complete API documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_pipeline.py docs.json\n"
            "  python run_pipeline.py docs.json -o ./rag-output --compact\n"
        ),
    )

    parser.add_argument(
        "input",
        help="Path to the TypeDoc JSON file.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_dir",
        default=None,
        help="Output directory. Default: ./extracted-docs",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        default=False,
        help="Write minified JSON instead of indented JSON.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML or JSON file with run settings.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO",
    )
    parser.add_argument(
        "--report-dir",
        default=None,
        help="Directory for the JSON run report. Default: output/run_reports",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config = resolve_run_config(
            input_path=args.input,
            config_file=args.config,
            overrides={
                "output_dir": args.output_dir,
                "pretty": False if args.compact else None,
                "log_level": args.log_level,
                "report_dir": args.report_dir,
            },
        )
    except ConfigValidationError as e:
        configure_structured_logging()
        logger.error(f"Configuration error: {e}")
        return 1

    configure_structured_logging(config.log_level)
    run_id = set_run_id()

    logger.info("*" * 60)
    logger.info(" TypeDoc RAG Extractor")
    logger.info("*" * 60)
    logger.info(f"Input file       : {config.input_path}")
    logger.info(f"Output directory : {config.output_dir}")

    try:
        run = process_file(config, run_id=run_id)
    except ForestLoadError as e:
        logger.error(f"Extraction failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not write results: {e}")
        return 1

    if run.failures:
        logger.warning(f"{len(run.failures)} declarations could not be extracted")

    logger.info(f"Extracted {len(run.records)} documentation entries")
    logger.info(f"Extraction completed successfully. Output directory: {config.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
