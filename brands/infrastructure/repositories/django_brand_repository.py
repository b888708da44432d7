"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.value_objects import Slug


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        return Brand(
            id=model.id,
            name=model.name,
            slug=Slug(model.slug),
            description=model.description,
            country=model.country,
            logo_url=model.logo_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @sync_to_async
    def save(self, brand: Brand) -> Brand:
        model, _ = BrandModel.objects.update_or_create(
            id=brand.id,
            defaults={
                "name": brand.name,
                "slug": str(brand.slug),
                "description": brand.description,
                "country": brand.country,
                "logo_url": brand.logo_url,
            },
        )
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        try:
            return self._to_domain(BrandModel.objects.get(id=brand_id))
        except BrandModel.DoesNotExist:
            return None

    @sync_to_async
    def list_ordered(self) -> List[Brand]:
        return [self._to_domain(model) for model in BrandModel.objects.order_by("name")]

    @sync_to_async
    def first_by_name(self) -> Optional[Brand]:
        model = BrandModel.objects.order_by("name").first()
        return self._to_domain(model) if model else None

    @sync_to_async
    def count(self) -> int:
        return BrandModel.objects.count()
