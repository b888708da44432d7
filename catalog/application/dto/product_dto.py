"""
Product DTOs for API responses and admin action outcomes.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from catalog.domain.catalog_product import CatalogProduct


class OperationState(Enum):
    """Stages an admin catalog mutation passes through."""

    PENDING = "pending"
    AUTHORIZING = "authorizing"
    VALIDATING = "validating"
    PERSISTING = "persisting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class MutationOutcome:
    """What a successful lifecycle handler did."""

    product_id: uuid.UUID
    invalidated_paths: List[str]


@dataclass
class ProductActionResult:
    """
    Outcome of one admin create, update or delete.

    Failures carry the error code and message; ``attempted`` is the input
    the admin submitted, so the form can be shown again unchanged.
    """

    success: bool
    state: OperationState
    code: Optional[str] = None
    message: Optional[str] = None
    product_id: Optional[uuid.UUID] = None
    invalidated_paths: List[str] = field(default_factory=list)
    attempted: Optional[Dict[str, Optional[str]]] = None
    failed_during: Optional[OperationState] = None

    @classmethod
    def succeeded(cls, outcome: MutationOutcome) -> "ProductActionResult":
        return cls(
            success=True,
            state=OperationState.SUCCEEDED,
            product_id=outcome.product_id,
            invalidated_paths=list(outcome.invalidated_paths),
        )

    @classmethod
    def failed(
        cls,
        code: str,
        message: str,
        attempted: Optional[Dict[str, Optional[str]]] = None,
        failed_during: Optional[OperationState] = None,
    ) -> "ProductActionResult":
        return cls(
            success=False,
            state=OperationState.FAILED,
            code=code,
            message=message,
            attempted=attempted,
            failed_during=failed_during,
        )


@dataclass
class ProductDetailDTO:
    """DTO for one product, as shown on the shop front and edit page."""

    id: uuid.UUID
    name: str
    slug: str
    price_cents: int
    currency: str
    description: str
    image_url: Optional[str]
    heat_level: Optional[str]
    category_id: Optional[uuid.UUID]
    category_name: Optional[str]
    brand_id: Optional[uuid.UUID]
    brand_name: Optional[str]
    chilli_types: List[str]

    @classmethod
    def from_catalog(cls, product: CatalogProduct) -> "ProductDetailDTO":
        return cls(
            id=product.id,
            name=product.name,
            slug=str(product.slug),
            price_cents=product.price_cents,
            currency=str(product.currency),
            description=product.description,
            image_url=product.image_url,
            heat_level=product.heat_level,
            category_id=product.category.id if product.category else None,
            category_name=product.category.name if product.category else None,
            brand_id=product.brand.id if product.brand else None,
            brand_name=product.brand.name if product.brand else None,
            chilli_types=[chilli.name for chilli in product.chilli_types],
        )


@dataclass
class CatalogPageDTO:
    """DTO for the revealed slice of the shop front."""

    products: List[ProductDetailDTO]
    total_matches: int
    displayed_count: int
    has_more: bool
    sort_option: str

    @property
    def is_empty(self) -> bool:
        return self.total_matches == 0


@dataclass
class OptionDTO:
    """A selectable id/name pair."""

    id: uuid.UUID
    name: str


@dataclass
class FormOptionsDTO:
    """DTO for the admin product form's choices."""

    categories: List[OptionDTO]
    brands: List[OptionDTO]
    currencies: List[str]
    brand_field_visible: bool
    store_mode: str


@dataclass
class DashboardStatsDTO:
    """DTO for the admin dashboard counters."""

    products: int
    brands: int
    categories: int
