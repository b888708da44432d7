"""
Brand domain entity.

A brand is a sauce maker whose products are sold in the store. In
single mode the store sells exactly one brand; in multi mode it is a
marketplace of many.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Slug


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    Referenced by products, never owned by them.
    """

    id: uuid.UUID
    name: str
    slug: Slug
    description: str = ""
    country: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Brand name too long")

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        description: str = "",
        country: Optional[str] = None,
        logo_url: Optional[str] = None,
        brand_id: Optional[uuid.UUID] = None,
    ) -> "Brand":
        """
        Create a new Brand entity.

        Args:
            name: Brand display name
            slug: Brand slug (URL-safe identifier)
            description: Optional blurb shown on the brand page
            country: Optional country of origin
            logo_url: Optional logo location
            brand_id: Optional UUID (generated if not provided)

        Returns:
            Brand entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=brand_id or uuid.uuid4(),
            name=name.strip(),
            slug=Slug(slug.strip()),
            description=description,
            country=country,
            logo_url=logo_url,
            created_at=now,
            updated_at=now,
        )
