"""
Read model for products as the shop front shows them.

Unlike :class:`catalog.domain.product.Product`, a catalog product carries
its category and brand inline so the query engine can filter without
further lookups.
"""
import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from catalog.domain.category import Category, ChilliType


@dataclass(frozen=True)
class BrandSummary:
    """The parts of a brand the shop front needs."""

    id: uuid.UUID
    name: str
    slug: str


@dataclass(frozen=True)
class CatalogProduct:
    """A product with its category and brand resolved."""

    id: uuid.UUID
    name: str
    slug: str
    price_cents: int
    currency: str
    description: str = ""
    image_url: Optional[str] = None
    heat_level: Optional[str] = None
    category: Optional[Category] = None
    brand: Optional[BrandSummary] = None
    chilli_types: Tuple[ChilliType, ...] = field(default_factory=tuple)
