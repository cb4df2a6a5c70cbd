from __future__ import annotations

from ..errors import LoadError, ManifestNotFoundError
from ._manifest import (
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    MAX_TAGS,
    REQUIRED_FIELDS,
    validate_manifest,
)
from ._result import ValidationIssue, ValidationResult


def load_error_result(error: LoadError) -> ValidationResult:
    """Turn a manifest read failure into a single-error result.

    A missing manifest becomes MissingManifest, anything else
    InvalidManifestSyntax. The manifest rules are not run.
    """
    result = ValidationResult()
    if isinstance(error, ManifestNotFoundError):
        result.error("MissingManifest", "plugin.json", "Missing plugin.json")
    else:
        result.error("InvalidManifestSyntax", "plugin.json", str(error))
    return result


__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "DESCRIPTION_MIN_LENGTH",
    "MAX_TAGS",
    "REQUIRED_FIELDS",
    "ValidationIssue",
    "ValidationResult",
    "load_error_result",
    "validate_manifest",
]
