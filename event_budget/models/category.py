"""
Category Configuration

Categories are static configuration, not user data. They are loaded once
at import time and never change for the lifetime of the process.

DESIGN DECISION: The enumeration order IS the display order.
Every per-category view (dashboard cards, the budget breakdown) walks
CATEGORIES in this exact order - never alphabetical, never by the order
in which items happened to be created.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryId(str, Enum):
    """
    Known category identifiers, in canonical display order.

    These values are what LineItem.category_id refers to.
    """
    CIVIL = "civil"
    RELIGIOUS = "religious"
    VENUE = "venue"
    ATTIRE = "attire"
    VENDORS = "vendors"
    SOUVENIRS = "souvenirs"
    TRANSPORT = "transport"
    TASKS = "tasks"


class Category(BaseModel):
    """A fixed grouping bucket for planning line items."""
    model_config = ConfigDict(frozen=True)

    id: CategoryId = Field(
        ...,
        description="Category identifier"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="Display name"
    )
    icon: str = Field(
        default="",
        description="Display icon/tag"
    )


CATEGORIES: tuple[Category, ...] = (
    Category(id=CategoryId.CIVIL, name="Civil", icon="📋"),
    Category(id=CategoryId.RELIGIOUS, name="Religious Ceremony", icon="⛪"),
    Category(id=CategoryId.VENUE, name="Venue / Reception", icon="🏛️"),
    Category(id=CategoryId.ATTIRE, name="Attire", icon="👗"),
    Category(id=CategoryId.VENDORS, name="Vendors", icon="🎵"),
    Category(id=CategoryId.SOUVENIRS, name="Souvenirs / Party Favors", icon="🎁"),
    Category(id=CategoryId.TRANSPORT, name="Transport / Hotel", icon="🚗"),
    Category(id=CategoryId.TASKS, name="General Tasks", icon="✅"),
)

_CATEGORIES_BY_ID = {category.id.value: category for category in CATEGORIES}


def get_category(category_id: str) -> Optional[Category]:
    """Look up a configured category by its identifier."""
    return _CATEGORIES_BY_ID.get(str(getattr(category_id, "value", category_id)))


def is_known_category(category_id: str) -> bool:
    return get_category(category_id) is not None
