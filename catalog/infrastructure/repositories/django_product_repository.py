"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import logging
import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError, transaction
from django.utils import timezone

from catalog.domain.catalog_product import BrandSummary, CatalogProduct
from catalog.domain.category import Category, ChilliType
from catalog.domain.product import Product
from catalog.infrastructure.models import Product as ProductModel
from catalog.ports.product_repository import ProductRepository
from core.domain.exceptions import PersistenceError
from core.domain.value_objects import Slug

logger = logging.getLogger(__name__)


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    Store errors are re-raised as PersistenceError carrying the
    database's own message.
    """

    def _to_catalog(self, model: ProductModel) -> CatalogProduct:
        """
        Convert Django model to the catalog read model.

        Args:
            model: Django Product model with category and brand loaded

        Returns:
            CatalogProduct
        """
        category = None
        if model.category is not None:
            category = Category(
                id=model.category.id,
                name=model.category.name,
                slug=Slug(model.category.slug),
            )
        brand = None
        if model.brand is not None:
            brand = BrandSummary(id=model.brand.id, name=model.brand.name, slug=model.brand.slug)
        return CatalogProduct(
            id=model.id,
            name=model.name,
            slug=model.slug,
            price_cents=model.price_cents,
            currency=model.currency,
            description=model.description or "",
            image_url=model.image_url,
            heat_level=model.heat_level,
            category=category,
            brand=brand,
            chilli_types=tuple(
                ChilliType(
                    id=chilli.id,
                    name=chilli.name,
                    slug=Slug(chilli.slug),
                    heat_level=chilli.heat_level,
                )
                for chilli in model.chilli_types.all()
            ),
        )

    def _fields(self, product: Product) -> dict:
        return {
            "name": product.name,
            "slug": str(product.slug),
            "price_cents": product.price_cents,
            "currency": product.currency.value,
            "description": product.description,
            "image_url": product.image_url,
            "category_id": product.category_id,
            "brand_id": product.brand_id,
        }

    def _catalog_queryset(self):
        return ProductModel.objects.select_related("category", "brand").prefetch_related(
            "chilli_types"
        )

    @sync_to_async
    def create(self, product: Product) -> Product:
        model = ProductModel(id=product.id, **self._fields(product))
        try:
            with transaction.atomic():
                model.save(force_insert=True)
        except DatabaseError as e:
            logger.warning("Store rejected product insert %s: %s", product.slug, e)
            raise PersistenceError(str(e)) from e
        return product

    @sync_to_async
    def update(self, product: Product) -> bool:
        try:
            with transaction.atomic():
                updated = ProductModel.objects.filter(id=product.id).update(
                    updated_at=timezone.now(), **self._fields(product)
                )
        except DatabaseError as e:
            logger.warning("Store rejected product update %s: %s", product.id, e)
            raise PersistenceError(str(e)) from e
        return updated > 0

    @sync_to_async
    def delete(self, product_id: uuid.UUID) -> bool:
        try:
            with transaction.atomic():
                _, per_model = ProductModel.objects.filter(id=product_id).delete()
        except DatabaseError as e:
            logger.warning("Store rejected product delete %s: %s", product_id, e)
            raise PersistenceError(str(e)) from e
        return per_model.get(ProductModel._meta.label, 0) > 0

    @sync_to_async
    def find_by_id(self, product_id: uuid.UUID) -> Optional[CatalogProduct]:
        model = self._catalog_queryset().filter(id=product_id).first()
        return self._to_catalog(model) if model else None

    @sync_to_async
    def list_catalog(self) -> List[CatalogProduct]:
        return [self._to_catalog(model) for model in self._catalog_queryset().order_by("-created_at")]

    @sync_to_async
    def count(self) -> int:
        return ProductModel.objects.count()
