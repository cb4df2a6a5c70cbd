from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LoadError(Exception):
    """Raised (or returned) when a plugin manifest cannot be loaded.

    Attributes:
        path: The file or directory path that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ManifestNotFoundError(LoadError):
    """The plugin directory has no plugin.json."""


class ManifestParseError(LoadError):
    """plugin.json exists but is not a readable JSON object."""


class PipelineError(Exception):
    """Environment failure that aborts a whole pipeline run.

    Attributes:
        path: The directory or file the run could not use.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class PluginsDirNotFoundError(PipelineError):
    """Raised when validating a plugins directory that does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Plugins directory not found: {path}", path=path)


class IndexWriteError(PipelineError):
    """Raised when the plugins root or the index artifact cannot be written."""
