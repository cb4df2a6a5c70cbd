"""Tests for the panel-plugin-index CLI."""

import json

from typer.testing import CliRunner

from panel_plugin_index.cli import app

runner = CliRunner()


def _manifest(plugin_id, **overrides):
    data = {
        "id": plugin_id,
        "name": plugin_id.title(),
        "version": "1.0.0",
        "author": "Me",
        "description": "A plugin used by the CLI tests",
    }
    data.update(overrides)
    return data


def test_build_command_writes_index(make_plugin, plugins_dir, tmp_path):
    make_plugin("good", manifest=_manifest("good"))
    output = tmp_path / "plugins.json"

    result = runner.invoke(app, ["build", "--plugins-dir", str(plugins_dir), "--output", str(output)])

    assert result.exit_code == 0
    assert "1/1 plugins valid" in result.output
    assert json.loads(output.read_text())["plugin_count"] == 1


def test_build_command_fails_on_invalid_plugin(make_plugin, plugins_dir, tmp_path):
    make_plugin("good", manifest=_manifest("good"))
    make_plugin("bad", manifest=_manifest("bad", version="1.0"))
    output = tmp_path / "plugins.json"

    result = runner.invoke(app, ["build", "--plugins-dir", str(plugins_dir), "-o", str(output)])

    assert result.exit_code == 1
    assert "InvalidVersion" in result.output
    assert "1/2 plugins valid" in result.output
    assert output.exists()


def test_validate_command_passes(make_plugin, plugins_dir):
    make_plugin("good", manifest=_manifest("good"))

    result = runner.invoke(app, ["validate", "--plugins-dir", str(plugins_dir)])

    assert result.exit_code == 0
    assert "PASS" in result.output


def test_validate_command_strict_fails_on_warnings(make_plugin, plugins_dir):
    make_plugin("good", manifest=_manifest("good", hooks=["on_time_travel"]))

    lenient = runner.invoke(app, ["validate", "--plugins-dir", str(plugins_dir)])
    assert lenient.exit_code == 0
    assert "UnknownHook" in lenient.output

    strict = runner.invoke(app, ["validate", "--plugins-dir", str(plugins_dir), "--strict"])
    assert strict.exit_code == 1
    assert "MissingReadme" in strict.output


def test_validate_command_missing_dir(tmp_path):
    result = runner.invoke(app, ["validate", "--plugins-dir", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "Plugins directory not found" in result.output


def test_plugins_dir_from_environment(make_plugin, plugins_dir, monkeypatch):
    make_plugin("good", manifest=_manifest("good"))
    monkeypatch.setenv("PANEL_INDEX_PLUGINS_DIR", str(plugins_dir))

    result = runner.invoke(app, ["validate"])

    assert result.exit_code == 0
    assert "1/1 plugins valid" in result.output
