"""
Category and chilli type entities.

Both are reference data: products point at them, the admin workflow
never changes them.
"""
import uuid
from dataclasses import dataclass
from typing import Optional

from core.domain.value_objects import Slug


@dataclass(frozen=True)
class Category:
    """Sauce category, e.g. fruity or extreme."""

    id: uuid.UUID
    name: str
    slug: Slug

    @classmethod
    def create(cls, name: str, slug: str, category_id: Optional[uuid.UUID] = None) -> "Category":
        return cls(id=category_id or uuid.uuid4(), name=name.strip(), slug=Slug(slug.strip()))


@dataclass(frozen=True)
class ChilliType:
    """Chilli variety used in a sauce."""

    id: uuid.UUID
    name: str
    slug: Slug
    heat_level: Optional[str] = None
