from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ..models.category import CATEGORIES, CATEGORY_IDS
from ..models.hook import KNOWN_HOOKS
from ._result import ValidationResult

if TYPE_CHECKING:
    from pathlib import Path

REQUIRED_FIELDS = ("id", "name", "version", "author", "description")

ID_PATTERN = re.compile(r"^[a-z0-9-]+$")
ID_MIN_LENGTH = 2
ID_MAX_LENGTH = 50

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[a-z0-9.]+)?$")

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

MAX_TAGS = 10

ASSETS_DIR = "assets"
LICENSE_FILES = ("LICENSE", "LICENSE.md", "LICENSE.txt")

_STRING_FIELDS = (
    "name",
    "author",
    "description",
    "license",
    "repository",
    "homepage",
    "min_panel_version",
    "entry_point",
)
_LIST_FIELDS = ("hooks", "frontend_scripts", "nav_items", "dashboard_cards")
_STRING_LIST_FIELDS = ("tags",)


def validate_manifest(
    data: dict[str, Any],
    plugin_id: str,
    plugin_dir: Path,
    strict: bool = False,
) -> ValidationResult:
    """Validate a parsed plugin.json against the marketplace rules.

    Every rule runs regardless of earlier failures, so one pass reports all
    defects. Issues are recorded in rule order.

    Args:
        data: The parsed manifest object.
        plugin_id: Name of the directory holding the manifest.
        plugin_dir: The plugin directory, used to resolve declared files.
        strict: Also run the submission-review checks (README, LICENSE,
            HTTPS repository), which only produce warnings.
    """
    result = ValidationResult()

    _check_required(data, result)
    _check_id(data, plugin_id, result)
    _check_version(data, result)
    _check_category(data, result)
    _check_description(data, result)
    _check_entry_point(data, plugin_dir, result)
    _check_frontend_scripts(data, plugin_dir, result)
    _check_hooks(data, result)
    _check_tags(data, result)
    _check_field_types(data, result)
    if strict:
        _check_submission(data, plugin_dir, result)

    return result


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _check_required(data: dict[str, Any], result: ValidationResult) -> None:
    for name in REQUIRED_FIELDS:
        if _is_missing(data.get(name)):
            result.error("MissingField", name, f"Missing required field: {name}")


def _check_id(data: dict[str, Any], plugin_id: str, result: ValidationResult) -> None:
    plugin_id_value = data.get("id")
    if _is_missing(plugin_id_value):
        return
    if plugin_id_value != plugin_id:
        result.error(
            "IdMismatch",
            "id",
            f"Plugin ID '{plugin_id_value}' must match directory name '{plugin_id}'",
        )
    if not isinstance(plugin_id_value, str) or not ID_PATTERN.match(plugin_id_value):
        result.error(
            "InvalidIdFormat",
            "id",
            f"Invalid ID format '{plugin_id_value}'. Use lowercase letters, numbers, and hyphens only",
        )
    if isinstance(plugin_id_value, str) and not (
        ID_MIN_LENGTH <= len(plugin_id_value) <= ID_MAX_LENGTH
    ):
        result.error(
            "InvalidIdLength",
            "id",
            f"ID must be between {ID_MIN_LENGTH} and {ID_MAX_LENGTH} characters",
        )


def _check_version(data: dict[str, Any], result: ValidationResult) -> None:
    version = data.get("version")
    if _is_missing(version):
        return
    if not isinstance(version, str) or not VERSION_PATTERN.match(version):
        result.error(
            "InvalidVersion",
            "version",
            f"Invalid version format '{version}'. Use semantic versioning (e.g., 1.0.0 or 1.0.0-beta.1)",
        )


def _check_category(data: dict[str, Any], result: ValidationResult) -> None:
    category = data.get("category")
    if _is_absent(category):
        return
    if not isinstance(category, str) or category not in CATEGORY_IDS:
        allowed = ", ".join(c.id for c in CATEGORIES)
        result.error(
            "InvalidCategory",
            "category",
            f"Invalid category '{category}'. Must be one of: {allowed}",
        )


def _check_description(data: dict[str, Any], result: ValidationResult) -> None:
    description = data.get("description")
    if not isinstance(description, str) or _is_missing(description):
        return
    if len(description) < DESCRIPTION_MIN_LENGTH:
        result.error(
            "DescriptionTooShort",
            "description",
            f"Description too short (minimum {DESCRIPTION_MIN_LENGTH} characters)",
        )
    if len(description) > DESCRIPTION_MAX_LENGTH:
        result.error(
            "DescriptionTooLong",
            "description",
            f"Description too long (maximum {DESCRIPTION_MAX_LENGTH} characters)",
        )


def _resolves_to_file(plugin_dir: Path, relative: str) -> bool:
    """True if relative names an existing file that stays inside plugin_dir."""
    try:
        root = plugin_dir.resolve()
        target = (root / relative).resolve()
        return target.is_relative_to(root) and target.is_file()
    except (OSError, ValueError):
        # e.g. an embedded NUL byte or a name too long for the filesystem
        return False


def _check_entry_point(data: dict[str, Any], plugin_dir: Path, result: ValidationResult) -> None:
    entry_point = data.get("entry_point")
    if not isinstance(entry_point, str) or not entry_point:
        return
    if not _resolves_to_file(plugin_dir, entry_point):
        result.error(
            "EntryPointNotFound",
            "entry_point",
            f"Entry point file '{entry_point}' not found",
        )


def _check_frontend_scripts(
    data: dict[str, Any], plugin_dir: Path, result: ValidationResult
) -> None:
    scripts = data.get("frontend_scripts")
    if not isinstance(scripts, list):
        return
    for i, script in enumerate(scripts):
        if not isinstance(script, str) or not _resolves_to_file(
            plugin_dir, f"{ASSETS_DIR}/{script}"
        ):
            result.error(
                "ScriptNotFound",
                f"frontend_scripts[{i}]",
                f"Frontend script '{ASSETS_DIR}/{script}' not found",
            )


def _check_hooks(data: dict[str, Any], result: ValidationResult) -> None:
    hooks = data.get("hooks")
    if not isinstance(hooks, list):
        return
    for i, hook in enumerate(hooks):
        if not isinstance(hook, str):
            result.warning(
                "UnknownHook",
                f"hooks[{i}]",
                f"Unknown hook {hook!r} - hook names must be strings and it will be dropped",
            )
        elif hook not in KNOWN_HOOKS:
            result.warning(
                "UnknownHook",
                f"hooks[{i}]",
                f"Unknown hook '{hook}' - may not work with current panel version",
            )


def _check_tags(data: dict[str, Any], result: ValidationResult) -> None:
    tags = data.get("tags")
    if _is_absent(tags):
        return
    if not isinstance(tags, list):
        result.error("InvalidTags", "tags", "Tags must be an array")
    elif len(tags) > MAX_TAGS:
        result.warning("TooManyTags", "tags", f"Too many tags (recommended max: {MAX_TAGS})")


def _check_field_types(data: dict[str, Any], result: ValidationResult) -> None:
    # Shapes the index assembler and the panel rely on.
    for name in _STRING_FIELDS:
        value = data.get(name)
        if not _is_absent(value) and not isinstance(value, str):
            result.error("InvalidFieldType", name, f"{name} must be a string")
    for name in _LIST_FIELDS:
        value = data.get(name)
        if not _is_absent(value) and not isinstance(value, list):
            result.error("InvalidFieldType", name, f"{name} must be an array")
    for name in _STRING_LIST_FIELDS:
        value = data.get(name)
        if isinstance(value, list) and not all(isinstance(v, str) for v in value):
            result.error("InvalidFieldType", name, f"{name} must contain only strings")
    settings_schema = data.get("settings_schema")
    if not _is_absent(settings_schema) and not isinstance(settings_schema, dict):
        result.error("InvalidFieldType", "settings_schema", "settings_schema must be an object")


def _check_submission(data: dict[str, Any], plugin_dir: Path, result: ValidationResult) -> None:
    if not (plugin_dir / "README.md").is_file():
        result.warning("MissingReadme", "README.md", "No README.md found")
    if not any((plugin_dir / name).is_file() for name in LICENSE_FILES):
        result.warning("MissingLicenseFile", "LICENSE", "No LICENSE file found")
    repository = data.get("repository")
    if isinstance(repository, str) and repository and not repository.startswith("https://"):
        result.warning(
            "InsecureRepositoryUrl",
            "repository",
            f"Repository URL '{repository}' should use https://",
        )
