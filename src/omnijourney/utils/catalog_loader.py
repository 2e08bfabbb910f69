# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Catalog loading: file -> (optional JSON Schema check) -> frozen models.

This is the single boundary where node shape is validated. Everything
downstream works with ModelNodeCatalog and never re-checks field types.

Supported formats:
    - ``.json``: parsed with the standard json module
    - ``.yaml`` / ``.yml``: parsed with PyYAML ``safe_load``

Cross-node invariants (duplicates, cycles, tree parents) are NOT checked
here; run the catalog validator on the loaded catalog.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from jsonschema import SchemaError
from jsonschema.validators import validator_for
from pydantic import ValidationError

from omnijourney.enums import EnumCatalogLoadErrorKind
from omnijourney.models import ModelNodeCatalog

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

# Maximum catalog document size (4MB)
MAX_CATALOG_SIZE_BYTES = 4 * 1024 * 1024

YAML_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml"})


class CatalogLoadError(Exception):
    """Raised when a catalog document cannot be loaded.

    Attributes:
        message: Human-readable error description.
        code: Always "LOAD_001".
        error_kind: Category of failure.
        details: Individual problems (schema or model errors), one per line.
    """

    code = "LOAD_001"

    def __init__(
        self,
        message: str,
        error_kind: EnumCatalogLoadErrorKind,
        details: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_kind = error_kind
        self.details = details if details is not None else []


def _read_document(path: Path, max_size_bytes: int) -> Any:
    if not path.exists():
        raise CatalogLoadError(
            f"File not found: {path}", EnumCatalogLoadErrorKind.FILE_NOT_FOUND
        )
    if path.is_dir():
        raise CatalogLoadError(
            f"Path is a directory, not a file: {path}",
            EnumCatalogLoadErrorKind.NOT_A_FILE,
        )

    try:
        file_size = path.stat().st_size
        if file_size > max_size_bytes:
            raise CatalogLoadError(
                f"File size ({file_size} bytes) exceeds maximum allowed "
                f"({max_size_bytes} bytes)",
                EnumCatalogLoadErrorKind.FILE_TOO_LARGE,
            )
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(
            f"Error reading file {path}: {e}", EnumCatalogLoadErrorKind.FILE_READ_ERROR
        ) from e

    if not content.strip():
        raise CatalogLoadError(
            f"File is empty: {path}", EnumCatalogLoadErrorKind.EMPTY_FILE
        )

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(content)
        return json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(
            f"Invalid syntax in {path}: {e}", EnumCatalogLoadErrorKind.PARSE_ERROR
        ) from e


def _format_pydantic_error(error: ErrorDetails, data: dict[str, Any]) -> str:
    """Render one pydantic error as ``field.path: message``.

    Paths into the node list are annotated with the node id when available,
    e.g. ``nodes.3[shadow_work].type: Input should be ...``.
    """
    loc = error.get("loc", ())
    parts = [str(part) for part in loc]
    if len(loc) >= 2 and loc[0] == "nodes" and isinstance(loc[1], int):
        nodes = data.get("nodes")
        if isinstance(nodes, list) and loc[1] < len(nodes):
            raw = nodes[loc[1]]
            if isinstance(raw, dict) and isinstance(raw.get("id"), str):
                parts[1] = f"{loc[1]}[{raw['id']}]"
    field_path = ".".join(parts) if parts else "root"
    return f"{field_path}: {error.get('msg', 'Validation error')}"


def check_against_schema(data: Any, schema: dict[str, Any]) -> None:
    """Validate a raw catalog document against a JSON Schema.

    Raises:
        CatalogLoadError: SCHEMA_ERROR, listing every violation.
    """
    validator_cls = validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        raise CatalogLoadError(
            f"Invalid JSON Schema: {e.message}", EnumCatalogLoadErrorKind.SCHEMA_ERROR
        ) from e

    validator = validator_cls(schema)
    errors = sorted(validator.iter_errors(data), key=lambda err: list(err.absolute_path))
    if errors:
        details = [
            f"{'.'.join(str(p) for p in err.absolute_path) or 'root'}: {err.message}"
            for err in errors
        ]
        raise CatalogLoadError(
            f"JSON Schema validation failed with {len(errors)} error(s)",
            EnumCatalogLoadErrorKind.SCHEMA_ERROR,
            details,
        )


def parse_catalog(data: Any) -> ModelNodeCatalog:
    """Parse an in-memory catalog document into frozen models.

    Args:
        data: Mapping with a ``nodes`` list (plus optional ``schema_version``
            and ``generated_at``).

    Raises:
        CatalogLoadError: MODEL_ERROR, listing every field problem.
    """
    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list):
        raise CatalogLoadError(
            "Invalid catalog: missing nodes array", EnumCatalogLoadErrorKind.MODEL_ERROR
        )
    try:
        return ModelNodeCatalog.model_validate(data)
    except ValidationError as e:
        details = [_format_pydantic_error(err, data) for err in e.errors()]
        raise CatalogLoadError(
            f"Invalid node shape: {len(details)} error(s)",
            EnumCatalogLoadErrorKind.MODEL_ERROR,
            details,
        ) from e


def load_catalog(
    path: str | Path,
    schema_path: str | Path | None = None,
    max_size_bytes: int = MAX_CATALOG_SIZE_BYTES,
) -> ModelNodeCatalog:
    """Load a catalog file, optionally checking it against a JSON Schema.

    Args:
        path: Catalog document (.json, .yaml or .yml).
        schema_path: Optional JSON Schema document (same formats).
        max_size_bytes: Size limit for each document.

    Returns:
        The parsed, shape-validated catalog.

    Raises:
        CatalogLoadError: On any read, parse, schema or model failure.
    """
    data = _read_document(Path(path), max_size_bytes)
    if schema_path is not None:
        schema = _read_document(Path(schema_path), max_size_bytes)
        if not isinstance(schema, dict):
            raise CatalogLoadError(
                f"JSON Schema must be an object: {schema_path}",
                EnumCatalogLoadErrorKind.SCHEMA_ERROR,
            )
        check_against_schema(data, schema)
    return parse_catalog(data)


__all__ = [
    "MAX_CATALOG_SIZE_BYTES",
    "CatalogLoadError",
    "check_against_schema",
    "load_catalog",
    "parse_catalog",
]
