from .category import CATEGORIES, CATEGORY_IDS, DEFAULT_CATEGORY, CategoryInfo
from .hook import KNOWN_HOOKS
from .index import (
    DEFAULT_LICENSE,
    DEFAULT_MIN_PANEL_VERSION,
    INDEX_SCHEMA_VERSION,
    IndexEntry,
    MarketplaceIndex,
)

__all__ = [
    "CATEGORIES",
    "CATEGORY_IDS",
    "DEFAULT_CATEGORY",
    "DEFAULT_LICENSE",
    "DEFAULT_MIN_PANEL_VERSION",
    "INDEX_SCHEMA_VERSION",
    "KNOWN_HOOKS",
    "CategoryInfo",
    "IndexEntry",
    "MarketplaceIndex",
]
