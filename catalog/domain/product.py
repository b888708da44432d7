"""
Product domain entity.

This is the core domain entity representing a sauce for sale.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Currency, Slug


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    Prices are integers in minor currency units (pence, cents).
    """

    id: uuid.UUID
    name: str
    slug: Slug
    price_cents: int
    currency: Currency
    description: str = ""
    image_url: Optional[str] = None
    category_id: Optional[uuid.UUID] = None
    brand_id: Optional[uuid.UUID] = None
    heat_level: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Product name too long")
        if isinstance(self.price_cents, bool) or not isinstance(self.price_cents, int):
            raise ValueError("Product price must be an integer")
        if self.price_cents < 0:
            raise ValueError("Product price cannot be negative")
        if not isinstance(self.currency, Currency):
            raise ValueError(f"Unsupported currency: {self.currency}")

    @classmethod
    def create(
        cls,
        name: str,
        slug: str,
        price_cents: int,
        currency: Currency = Currency.GBP,
        description: str = "",
        image_url: Optional[str] = None,
        category_id: Optional[uuid.UUID] = None,
        brand_id: Optional[uuid.UUID] = None,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product display name
            slug: Product slug (URL-safe identifier)
            price_cents: Price in minor currency units
            currency: Currency the price is in
            description: Free text description
            image_url: URL of an uploaded image
            category_id: Optional category reference
            brand_id: Brand reference
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=product_id or uuid.uuid4(),
            name=name.strip(),
            slug=Slug(slug.strip()),
            price_cents=price_cents,
            currency=currency,
            description=description,
            image_url=image_url,
            category_id=category_id,
            brand_id=brand_id,
            created_at=now,
            updated_at=now,
        )

    def touch(self) -> "Product":
        """Copy of the product with ``updated_at`` set to now."""
        return replace(self, updated_at=datetime.now(timezone.utc))
