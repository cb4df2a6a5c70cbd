from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ..errors import LoadError, ManifestNotFoundError, ManifestParseError

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST_FILE = "plugin.json"


def manifest_path(plugin_dir: Path) -> Path:
    return plugin_dir / MANIFEST_FILE


def read_manifest(plugin_dir: Path) -> tuple[dict[str, Any] | None, LoadError | None]:
    """Read and parse <plugin_dir>/plugin.json.

    Returns (manifest, None) on success and (None, error) on failure; the
    error is a ManifestNotFoundError or ManifestParseError. Never raises.
    """
    path = manifest_path(plugin_dir)
    if not path.is_file():
        return None, ManifestNotFoundError(f"Missing {MANIFEST_FILE} in {plugin_dir}", path=path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return None, ManifestParseError(f"Invalid JSON in {MANIFEST_FILE}: {e}", path=path)
    except (OSError, UnicodeDecodeError) as e:
        return None, ManifestParseError(f"Could not read {MANIFEST_FILE}: {e}", path=path)
    if not isinstance(data, dict):
        return None, ManifestParseError(
            f"Invalid JSON in {MANIFEST_FILE}: expected an object, got {type(data).__name__}",
            path=path,
        )
    return data, None
