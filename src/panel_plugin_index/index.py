"""Assembly of plugins.json from validated plugins."""

from __future__ import annotations

import unicodedata
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from .loaders.manifest import manifest_path
from .models.category import CATEGORIES
from .models.index import DEFAULT_MIN_PANEL_VERSION, IndexEntry, MarketplaceIndex

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from .scanner import PluginOutcome


def name_sort_key(name: str) -> tuple[str, str]:
    """Case- and accent-insensitive ordering key, with accents as the tie-breaker.

    "Éclair" sorts with the e's, before "Zeta".
    """
    folded = name.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base, folded


def isoformat_utc(moment: datetime) -> str:
    """Format as UTC ISO-8601 with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def has_readme(plugin_dir: Path) -> bool:
    return (plugin_dir / "README.md").is_file()


def has_icon(plugin_dir: Path) -> bool:
    return (plugin_dir / "assets" / "icon.png").is_file()


def last_updated(plugin_dir: Path) -> str:
    mtime = manifest_path(plugin_dir).stat().st_mtime
    return isoformat_utc(datetime.fromtimestamp(mtime, tz=timezone.utc))


def build_entry(
    outcome: PluginOutcome, min_panel_version: str = DEFAULT_MIN_PANEL_VERSION
) -> IndexEntry:
    """Combine a valid plugin's manifest with facts read from its directory."""
    data = dict(outcome.manifest or {})
    data.update(
        has_readme=has_readme(outcome.path),
        has_icon=has_icon(outcome.path),
        last_updated=last_updated(outcome.path),
        # stats are never taken from the manifest
        downloads=0,
        rating=0,
        rating_count=0,
    )
    return IndexEntry.model_validate(data, context={"min_panel_version": min_panel_version})


def build_index(
    outcomes: Iterable[PluginOutcome],
    generated_at: datetime | None = None,
    min_panel_version: str = DEFAULT_MIN_PANEL_VERSION,
) -> MarketplaceIndex:
    """Build the marketplace index from scan outcomes.

    Outcomes with errors are left out. Plugins are ordered by display name,
    ignoring case and accents; plugins with equal names keep their scan order.
    Categories always list the full category set.
    """
    entries = [build_entry(o, min_panel_version) for o in outcomes if o.valid]
    entries.sort(key=lambda e: name_sort_key(e.name))
    return MarketplaceIndex(
        generated_at=isoformat_utc(generated_at or datetime.now(timezone.utc)),
        plugin_count=len(entries),
        categories=list(CATEGORIES),
        plugins=entries,
    )
