"""Pipeline driver: scan, validate, assemble and write plugins.json."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import IndexWriteError, PluginsDirNotFoundError
from .index import build_index
from .models.index import DEFAULT_MIN_PANEL_VERSION, MarketplaceIndex
from .scanner import PluginOutcome, scan_plugins

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Per-plugin outcomes of one run and the verdict derived from them.

    Attributes:
        outcomes: One entry per plugin directory, in scan order.
        strict: Whether warnings block (exit_code is non-zero on any warning).
    """

    outcomes: list[PluginOutcome] = field(default_factory=list)
    strict: bool = False

    @property
    def valid(self) -> list[PluginOutcome]:
        return [o for o in self.outcomes if o.valid]

    @property
    def invalid(self) -> list[PluginOutcome]:
        return [o for o in self.outcomes if not o.valid]

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def has_errors(self) -> bool:
        return any(not o.valid for o in self.outcomes)

    @property
    def has_warnings(self) -> bool:
        return any(o.result.warnings for o in self.outcomes)

    @property
    def passed(self) -> bool:
        if self.has_errors:
            return False
        return not (self.strict and self.has_warnings)

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


@dataclass
class BuildReport(ValidationReport):
    """A ValidationReport plus the index that was written."""

    index: MarketplaceIndex | None = None
    output_file: Path | None = None


def _atomic_write(path: Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(data, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def render_index(index: MarketplaceIndex) -> str:
    return json.dumps(index.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"


def write_index(index: MarketplaceIndex, output_file: Path) -> None:
    """Serialize the index to output_file, replacing it atomically.

    Raises:
        IndexWriteError: If the file cannot be written.
    """
    try:
        _atomic_write(output_file, render_index(index))
    except OSError as e:
        raise IndexWriteError(f"Cannot write {output_file}: {e}", path=output_file) from e


def log_outcomes(outcomes: list[PluginOutcome]) -> None:
    for outcome in outcomes:
        if outcome.valid:
            version = outcome.manifest.get("version") if outcome.manifest else None
            logger.info(f"{outcome.display_name} v{version}")
        else:
            logger.error(f"{outcome.plugin_id}: excluded")
            for issue in outcome.result.errors:
                logger.error(f"{outcome.plugin_id}: {issue}")
        for issue in outcome.result.warnings:
            logger.warning(f"{outcome.plugin_id}: {issue}")


def validate(plugins_dir: Path, strict: bool = False) -> ValidationReport:
    """Scan and validate every plugin without writing anything.

    Raises:
        PluginsDirNotFoundError: If plugins_dir does not exist.
    """
    plugins_dir = Path(plugins_dir)
    if not plugins_dir.is_dir():
        raise PluginsDirNotFoundError(plugins_dir)

    report = ValidationReport(outcomes=scan_plugins(plugins_dir, strict=strict), strict=strict)
    log_outcomes(report.outcomes)
    logger.info(f"Results: {len(report.valid)}/{report.total} plugins valid")
    return report


def build(
    plugins_dir: Path,
    output_file: Path,
    strict: bool = False,
    min_panel_version: str = DEFAULT_MIN_PANEL_VERSION,
) -> BuildReport:
    """Run the full pipeline and write the marketplace index.

    The plugins root is created when missing. The index is written even if
    some plugins are invalid; those are left out and reflected in the
    report's exit_code.

    Raises:
        IndexWriteError: If the plugins root cannot be created or the index
            cannot be written.
        PipelineError: If the plugins root cannot be read.
    """
    plugins_dir = Path(plugins_dir)
    output_file = Path(output_file)
    if not plugins_dir.exists():
        logger.info(f"Creating plugins directory {plugins_dir}")
        try:
            plugins_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IndexWriteError(
                f"Cannot create plugins directory {plugins_dir}: {e}", path=plugins_dir
            ) from e

    outcomes = scan_plugins(plugins_dir, strict=strict)
    log_outcomes(outcomes)

    index = build_index(outcomes, min_panel_version=min_panel_version)
    write_index(index, output_file)
    logger.info(f"Generated {output_file} with {index.plugin_count} plugin(s)")

    report = BuildReport(outcomes=outcomes, strict=strict, index=index, output_file=output_file)
    if report.invalid:
        logger.warning(
            f"{len(report.invalid)} plugin(s) had validation errors and were skipped"
        )
    return report
