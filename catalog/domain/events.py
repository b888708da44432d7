"""
Catalog domain events.

Domain events represent something that happened in the catalog.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.events import DomainEvent


class ProductEvent(DomainEvent):
    """Base for product lifecycle events."""

    def __init__(
        self,
        product_id: uuid.UUID,
        key_prefix: str,
        occurred_at: Optional[datetime] = None,
    ):
        """
        Initialize product event.

        Args:
            product_id: Product UUID
            key_prefix: Prefix of the owner key that made the change
            occurred_at: When the event occurred
        """
        super().__init__(
            event_id=uuid.uuid4(),
            occurred_at=occurred_at or datetime.now(timezone.utc),
            aggregate_id=str(product_id),
            event_type=self.__class__.__name__,
        )
        self.product_id = product_id
        self.key_prefix = key_prefix

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["key_prefix"] = self.key_prefix
        return data


class ProductCreated(ProductEvent):
    """Event raised when a product is created."""

    def __init__(self, product_id: uuid.UUID, key_prefix: str, slug: str, **kwargs):
        super().__init__(product_id, key_prefix, **kwargs)
        self.slug = slug

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["slug"] = self.slug
        return data


class ProductUpdated(ProductEvent):
    """Event raised when a product is updated."""

    def __init__(self, product_id: uuid.UUID, key_prefix: str, slug: str, **kwargs):
        super().__init__(product_id, key_prefix, **kwargs)
        self.slug = slug

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["slug"] = self.slug
        return data


class ProductDeleted(ProductEvent):
    """Event raised when a product is deleted."""
