from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator

from .category import DEFAULT_CATEGORY, CategoryInfo

# Schema version of plugins.json understood by the panel.
INDEX_SCHEMA_VERSION = 2

DEFAULT_LICENSE = "MIT"
DEFAULT_MIN_PANEL_VERSION = "2.0.0"


class IndexEntry(BaseModel):
    """One valid plugin as published in plugins.json.

    Every optional manifest field has its default declared here. Null and
    empty-string values in the manifest are treated as absent, and hook
    entries that are not strings are dropped. Field order is
    the key order of the serialized entry.
    """

    model_config = ConfigDict(extra="ignore")
    id: str
    name: str
    version: str
    author: str
    description: str
    category: str = DEFAULT_CATEGORY
    license: str = DEFAULT_LICENSE
    tags: list[str] = []
    repository: str | None = None
    homepage: str | None = None
    min_panel_version: str = DEFAULT_MIN_PANEL_VERSION
    hooks: list[str] = []
    nav_items: list[Any] = []
    dashboard_cards: list[Any] = []
    frontend_scripts: list[str] = []
    settings_schema: dict[str, Any] | None = None
    has_readme: bool = False
    has_icon: bool = False
    last_updated: str
    # Filled in by the panel's stats service, never by this pipeline.
    downloads: int = 0
    rating: int | float = 0
    rating_count: int = 0

    @model_validator(mode="before")
    @classmethod
    def _apply_defaults(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = {k: v for k, v in data.items() if v is not None and v != ""}
        if isinstance(cleaned.get("hooks"), list):
            cleaned["hooks"] = [h for h in cleaned["hooks"] if isinstance(h, str)]
        if "repository" not in cleaned and "homepage" in cleaned:
            cleaned["repository"] = cleaned["homepage"]
        context = info.context or {}
        if "min_panel_version" not in cleaned and context.get("min_panel_version"):
            cleaned["min_panel_version"] = context["min_panel_version"]
        return cleaned


class MarketplaceIndex(BaseModel):
    """Root object of plugins.json."""

    version: int = INDEX_SCHEMA_VERSION
    generated_at: str
    plugin_count: int
    categories: list[CategoryInfo]
    plugins: list[IndexEntry]
