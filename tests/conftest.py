import json
from pathlib import Path

import pytest


def valid_manifest(plugin_id: str = "example-plugin", **overrides):
    data = {
        "id": plugin_id,
        "name": "Example Plugin",
        "version": "1.0.0",
        "author": "Panel Team",
        "description": "An example plugin for the panel marketplace",
    }
    data.update(overrides)
    return data


@pytest.fixture
def plugins_dir(tmp_path: Path) -> Path:
    root = tmp_path / "plugins"
    root.mkdir()
    return root


@pytest.fixture
def make_plugin(plugins_dir: Path):
    """Create plugins/<plugin_id>/ with a plugin.json and optional extra files.

    manifest may be a dict (serialized as JSON), a raw string, or None to skip
    writing plugin.json. files maps plugin-relative paths to contents.
    """

    def _make(plugin_id="example-plugin", manifest=..., files=None):
        plugin_dir = plugins_dir / plugin_id
        plugin_dir.mkdir(parents=True)
        if manifest is ...:
            manifest = valid_manifest(plugin_id)
        if isinstance(manifest, dict):
            (plugin_dir / "plugin.json").write_text(json.dumps(manifest), encoding="utf-8")
        elif isinstance(manifest, str):
            (plugin_dir / "plugin.json").write_text(manifest, encoding="utf-8")
        for rel, content in (files or {}).items():
            target = plugin_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return plugin_dir

    return _make
