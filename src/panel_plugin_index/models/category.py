from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CategoryInfo(BaseModel):
    """Display metadata for one marketplace category."""

    model_config = ConfigDict(frozen=True)
    id: str
    name: str
    description: str


# Closed category enum, in display order. Shared by the validator (membership)
# and the index assembler (metadata).
CATEGORIES: tuple[CategoryInfo, ...] = (
    CategoryInfo(id="security", name="Security", description="Security-related features and tools"),
    CategoryInfo(id="integration", name="Integrations", description="Third-party service integrations"),
    CategoryInfo(id="monitoring", name="Monitoring", description="Monitoring and alerting tools"),
    CategoryInfo(id="management", name="Management", description="Server and user management"),
    CategoryInfo(id="utilities", name="Utilities", description="General utility plugins"),
    CategoryInfo(id="appearance", name="Appearance", description="Visual customizations and themes"),
    CategoryInfo(id="fun", name="Fun", description="Fun and entertainment features"),
)

CATEGORY_IDS = frozenset(c.id for c in CATEGORIES)

DEFAULT_CATEGORY = "utilities"
