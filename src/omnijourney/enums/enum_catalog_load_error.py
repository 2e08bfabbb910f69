# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Catalog loading error kinds."""

from enum import Enum


class EnumCatalogLoadErrorKind(str, Enum):
    """Why a catalog document could not be loaded.

    FILE_NOT_FOUND, NOT_A_FILE, FILE_READ_ERROR and FILE_TOO_LARGE are input
    errors (the document was never examined). The remaining kinds mean the
    document was read but rejected.
    """

    FILE_NOT_FOUND = "file_not_found"
    NOT_A_FILE = "not_a_file"
    FILE_READ_ERROR = "file_read_error"
    FILE_TOO_LARGE = "file_too_large"
    EMPTY_FILE = "empty_file"
    PARSE_ERROR = "parse_error"
    SCHEMA_ERROR = "schema_error"
    MODEL_ERROR = "model_error"

    @property
    def is_input_error(self) -> bool:
        return self in _INPUT_ERROR_KINDS


_INPUT_ERROR_KINDS = frozenset(
    {
        EnumCatalogLoadErrorKind.FILE_NOT_FOUND,
        EnumCatalogLoadErrorKind.NOT_A_FILE,
        EnumCatalogLoadErrorKind.FILE_READ_ERROR,
        EnumCatalogLoadErrorKind.FILE_TOO_LARGE,
    }
)


__all__ = ["EnumCatalogLoadErrorKind"]
