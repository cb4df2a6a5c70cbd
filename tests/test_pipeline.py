import json

import pytest

from panel_plugin_index import (
    IndexWriteError,
    PluginsDirNotFoundError,
    build,
    validate,
)


def _manifest(plugin_id, name, **overrides):
    data = {
        "id": plugin_id,
        "name": name,
        "version": "1.0.0",
        "author": "Me",
        "description": "A plugin used by the pipeline tests",
    }
    data.update(overrides)
    return data


def test_build_creates_missing_root_and_writes_empty_index(tmp_path):
    plugins_dir = tmp_path / "plugins"
    output = tmp_path / "plugins.json"

    report = build(plugins_dir, output)

    assert plugins_dir.is_dir()
    assert report.exit_code == 0
    data = json.loads(output.read_text())
    assert data["version"] == 2
    assert data["plugin_count"] == 0
    assert data["plugins"] == []
    assert len(data["categories"]) == 7


def test_build_writes_index_even_with_invalid_plugins(make_plugin, plugins_dir, tmp_path):
    make_plugin("good", manifest=_manifest("good", "Good"))
    make_plugin("bad", manifest=_manifest("bad", "Bad", entry_point="main.go"))
    output = tmp_path / "plugins.json"

    report = build(plugins_dir, output)

    assert report.exit_code == 1
    assert report.has_errors
    assert [o.plugin_id for o in report.invalid] == ["bad"]
    assert [i.code for i in report.invalid[0].result.errors] == ["EntryPointNotFound"]
    data = json.loads(output.read_text())
    assert [p["id"] for p in data["plugins"]] == ["good"]


def test_build_survives_nul_bytes_in_declared_paths(make_plugin, plugins_dir, tmp_path):
    make_plugin("good", manifest=_manifest("good", "Good"))
    make_plugin(
        "nul-entry", manifest=_manifest("nul-entry", "Nul Entry", entry_point="main\u0000.go")
    )
    make_plugin(
        "nul-script",
        manifest=_manifest("nul-script", "Nul Script", frontend_scripts=["app\u0000.js"]),
    )
    output = tmp_path / "plugins.json"

    report = build(plugins_dir, output)

    assert report.exit_code == 1
    codes = {o.plugin_id: [i.code for i in o.result.errors] for o in report.invalid}
    assert codes == {"nul-entry": ["EntryPointNotFound"], "nul-script": ["ScriptNotFound"]}
    data = json.loads(output.read_text())
    assert [p["id"] for p in data["plugins"]] == ["good"]


def test_removing_entry_point_makes_plugin_valid(make_plugin, plugins_dir, tmp_path):
    plugin_dir = make_plugin("bad", manifest=_manifest("bad", "Bad", entry_point="main.go"))
    output = tmp_path / "plugins.json"
    assert build(plugins_dir, output).exit_code == 1

    (plugin_dir / "plugin.json").write_text(json.dumps(_manifest("bad", "Bad")))
    report = build(plugins_dir, output)
    assert report.exit_code == 0
    assert json.loads(output.read_text())["plugin_count"] == 1


def test_warning_passes_unless_strict(make_plugin, plugins_dir, tmp_path):
    make_plugin(
        "hooked",
        manifest=_manifest("hooked", "Hooked", hooks=["on_time_travel"]),
        files={"README.md": "# Hooked", "LICENSE": "MIT"},
    )
    output = tmp_path / "plugins.json"

    lenient = build(plugins_dir, output)
    assert lenient.exit_code == 0
    assert lenient.has_warnings
    assert lenient.index.plugin_count == 1

    strict = build(plugins_dir, output, strict=True)
    assert strict.exit_code == 1
    assert not strict.has_errors
    assert strict.index.plugin_count == 1


def test_rebuild_is_identical_except_generated_at(make_plugin, plugins_dir, tmp_path):
    make_plugin("one", manifest=_manifest("one", "One", tags=["a"]))
    make_plugin("two", manifest=_manifest("two", "two"), files={"assets/icon.png": "png"})
    output = tmp_path / "plugins.json"

    build(plugins_dir, output)
    first = json.loads(output.read_text())
    build(plugins_dir, output)
    second = json.loads(output.read_text())

    first.pop("generated_at")
    second.pop("generated_at")
    assert first == second


def test_output_format(make_plugin, plugins_dir, tmp_path):
    make_plugin("one", manifest=_manifest("one", "Ünïcode"))
    output = tmp_path / "out" / "plugins.json"
    build(plugins_dir, output)
    text = output.read_text(encoding="utf-8")
    assert text.startswith('{\n  "version": 2,\n')
    assert text.endswith("}\n")
    assert "Ünïcode" in text
    assert not (tmp_path / "out" / "plugins.json.tmp").exists()


def test_build_write_failure_raises(plugins_dir, tmp_path):
    output = tmp_path / "blocked"
    output.mkdir()
    (output / "child").write_text("")
    with pytest.raises(IndexWriteError):
        build(plugins_dir, output)
    assert not (tmp_path / "blocked.tmp").exists()


def test_validate_reports_without_writing(make_plugin, plugins_dir, tmp_path):
    make_plugin("good", manifest=_manifest("good", "Good"))
    make_plugin("empty", manifest=None)

    report = validate(plugins_dir)

    assert report.total == 2
    assert [o.plugin_id for o in report.valid] == ["good"]
    assert report.exit_code == 1
    assert not (tmp_path / "plugins.json").exists()


def test_validate_strict_fails_on_warnings(make_plugin, plugins_dir):
    make_plugin("good", manifest=_manifest("good", "Good"))
    assert validate(plugins_dir).exit_code == 0

    report = validate(plugins_dir, strict=True)
    assert report.has_warnings
    assert report.exit_code == 1


def test_validate_missing_root(tmp_path):
    with pytest.raises(PluginsDirNotFoundError):
        validate(tmp_path / "missing")
