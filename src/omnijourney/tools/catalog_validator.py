# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Catalog Validator CLI for journey node catalogs.

Loads a catalog (JSON or YAML), optionally checks it against a JSON Schema,
then runs the structural integrity checks and spacing checks. Intended for
build-time and CI use.

Usage:
    python -m omnijourney.tools.catalog_validator nodes.json
    python -m omnijourney.tools.catalog_validator nodes.json --schema nodes.schema.json
    python -m omnijourney.tools.catalog_validator nodes.yaml --json
    python -m omnijourney.tools.catalog_validator nodes.json --tree-min-distance 10

Output channels:
    stdout - the verdict (text or JSON)
    stderr - spacing warnings ("WARN: ...") and failure messages
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from omnijourney.nodes.node_catalog_validator_compute.handlers import (
    CatalogStructuralError,
    validate_catalog,
)
from omnijourney.nodes.node_catalog_validator_compute.models import (
    ModelCatalogValidationReport,
)
from omnijourney.settings import JourneyEngineSettings
from omnijourney.utils.catalog_loader import CatalogLoadError, load_catalog

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VALIDATION_FAILED = 1
EXIT_INPUT_ERROR = 2


def _format_text_success(
    catalog_path: str, report: ModelCatalogValidationReport, schema_checked: bool
) -> str:
    checks = "schema + integrity" if schema_checked else "integrity"
    return (
        f"OK: {catalog_path} passes {checks} checks "
        f"({report.node_count} node(s), {len(report.warnings)} spacing warning(s))"
    )


def _format_json_output(
    catalog_path: str,
    report: ModelCatalogValidationReport | None,
    error: dict[str, object] | None,
) -> str:
    """
    Format the validation verdict as JSON.

    Always returns the same top-level keys so consumers can parse
    success and failure alike.
    """
    return json.dumps(
        {
            "file_path": catalog_path,
            "is_valid": error is None,
            "node_count": report.node_count if report is not None else None,
            "warnings": [
                w.model_dump() | {"message": w.message}
                for w in (report.warnings if report is not None else ())
            ],
            "error": error,
        },
        indent=2,
    )


def _report_failure(
    catalog_path: str,
    json_output: bool,
    message: str,
    error: dict[str, object],
    details: list[str],
) -> None:
    print(f"\nVALIDATION FAILED: {message}", file=sys.stderr)
    for detail in details:
        print(f"  - {detail}", file=sys.stderr)
    if json_output:
        print(_format_json_output(catalog_path, None, error))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate a journey node catalog (schema, integrity, spacing)",
        prog="omnijourney-validate",
    )
    parser.add_argument("catalog", nargs="?", help="Path to the catalog (.json/.yaml)")
    parser.add_argument(
        "--schema",
        help="Optional JSON Schema the raw catalog document must satisfy",
    )
    parser.add_argument("--json", action="store_true", help="Output result as JSON")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--tree-min-distance",
        type=float,
        default=None,
        help="Minimum tree node spacing (default from JOURNEY_TREE_MIN_DISTANCE or 8)",
    )
    parser.add_argument(
        "--spiral-min-distance",
        type=float,
        default=None,
        help="Minimum spiral node spacing (default from JOURNEY_SPIRAL_MIN_DISTANCE or 12)",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    """
    CLI entry point for the catalog validator.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code:
            0 - Catalog is structurally sound (spacing warnings permitted)
            1 - Validation failure: structural error, schema violation,
                malformed document or invalid node shape
            2 - Input error: no catalog given, file not found, path is a
                directory, unreadable or oversized file, invalid thresholds
    """
    parser = _build_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if not parsed_args.catalog:
        parser.print_help()
        return EXIT_INPUT_ERROR

    catalog_path: str = parsed_args.catalog

    overrides: dict[str, float] = {}
    if parsed_args.tree_min_distance is not None:
        overrides["tree_min_distance"] = parsed_args.tree_min_distance
    if parsed_args.spiral_min_distance is not None:
        overrides["spiral_min_distance"] = parsed_args.spiral_min_distance
    try:
        thresholds = JourneyEngineSettings(**overrides).to_spacing_thresholds()
    except ValidationError as e:
        print(f"Invalid spacing threshold: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        catalog = load_catalog(Path(catalog_path), parsed_args.schema)
    except CatalogLoadError as e:
        _report_failure(
            catalog_path,
            parsed_args.json,
            e.message,
            {
                "code": e.code,
                "error_kind": e.error_kind.value,
                "message": e.message,
                "details": e.details,
            },
            e.details,
        )
        if e.error_kind.is_input_error:
            return EXIT_INPUT_ERROR
        return EXIT_VALIDATION_FAILED

    logger.debug(
        "Catalog loaded",
        extra={"catalog_path": catalog_path, "node_count": len(catalog.nodes)},
    )

    try:
        report = validate_catalog(catalog.nodes, thresholds)
    except CatalogStructuralError as e:
        _report_failure(
            catalog_path,
            parsed_args.json,
            e.message,
            {
                "code": e.code,
                "error_kind": type(e).__name__,
                "message": e.message,
                "node_id": e.node_id,
            },
            [],
        )
        return EXIT_VALIDATION_FAILED

    for warning in report.warnings:
        print(f"WARN: {warning.message}", file=sys.stderr)

    if parsed_args.json:
        print(_format_json_output(catalog_path, report, None))
    else:
        print(
            _format_text_success(catalog_path, report, parsed_args.schema is not None)
        )
    return EXIT_OK


def main_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    main_cli()
