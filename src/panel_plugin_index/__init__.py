from .errors import (
    IndexWriteError,
    LoadError,
    ManifestNotFoundError,
    ManifestParseError,
    PipelineError,
    PluginsDirNotFoundError,
)
from .index import build_index
from .loaders import read_manifest
from .models import CATEGORIES, CategoryInfo, IndexEntry, MarketplaceIndex
from .pipeline import BuildReport, ValidationReport, build, validate, write_index
from .scanner import PluginOutcome, scan_plugin, scan_plugins
from .validation import ValidationIssue, ValidationResult, validate_manifest

__all__ = [
    "CATEGORIES",
    "BuildReport",
    "CategoryInfo",
    "IndexEntry",
    "IndexWriteError",
    "LoadError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MarketplaceIndex",
    "PipelineError",
    "PluginOutcome",
    "PluginsDirNotFoundError",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "build",
    "build_index",
    "read_manifest",
    "scan_plugin",
    "scan_plugins",
    "validate",
    "validate_manifest",
    "write_index",
]
