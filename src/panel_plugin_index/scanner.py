"""Plugin directory scanning: one outcome per plugin submission."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import PipelineError
from .loaders.manifest import read_manifest
from .validation import ValidationResult, load_error_result, validate_manifest

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class PluginOutcome:
    """What scanning produced for one plugin directory.

    Attributes:
        plugin_id: The directory name, which the manifest id must equal.
        path: The plugin directory.
        manifest: The parsed plugin.json, or None if it could not be read.
        result: Errors and warnings for this plugin.
    """

    plugin_id: str
    path: Path
    manifest: dict[str, Any] | None
    result: ValidationResult

    @property
    def valid(self) -> bool:
        return self.manifest is not None and self.result.valid

    @property
    def display_name(self) -> str:
        if self.manifest and isinstance(self.manifest.get("name"), str):
            return self.manifest["name"]
        return self.plugin_id


def scan_plugin(plugin_dir: Path, strict: bool = False) -> PluginOutcome:
    """Read and validate a single plugin directory."""
    manifest, error = read_manifest(plugin_dir)
    if error is not None:
        logger.debug(f"Could not load manifest for {plugin_dir.name}: {error}")
        return PluginOutcome(plugin_dir.name, plugin_dir, None, load_error_result(error))
    assert manifest is not None
    result = validate_manifest(manifest, plugin_dir.name, plugin_dir, strict=strict)
    return PluginOutcome(plugin_dir.name, plugin_dir, manifest, result)


def scan_plugins(plugins_dir: Path, strict: bool = False) -> list[PluginOutcome]:
    """Scan every plugin directory directly under plugins_dir.

    Dot-entries and non-directories are skipped. Directories are visited in
    name order. Per-plugin failures are recorded in the outcome and never
    raised.

    Raises:
        PipelineError: If plugins_dir cannot be listed.
    """
    try:
        entries = sorted(plugins_dir.iterdir())
    except OSError as e:
        raise PipelineError(
            f"Cannot read plugins directory {plugins_dir}: {e}", path=plugins_dir
        ) from e

    outcomes = []
    for entry in entries:
        if entry.name.startswith(".") or not entry.is_dir():
            continue
        outcomes.append(scan_plugin(entry, strict=strict))
    logger.debug(f"Scanned {len(outcomes)} plugin directories in {plugins_dir}")
    return outcomes
