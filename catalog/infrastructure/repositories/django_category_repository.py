"""
Django implementation of CategoryRepository port.
"""
from typing import List

from asgiref.sync import sync_to_async

from catalog.domain.category import Category
from catalog.infrastructure.models import Category as CategoryModel
from catalog.ports.category_repository import CategoryRepository
from core.domain.value_objects import Slug


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM implementation of CategoryRepository."""

    @sync_to_async
    def list_ordered(self) -> List[Category]:
        return [
            Category(id=model.id, name=model.name, slug=Slug(model.slug))
            for model in CategoryModel.objects.order_by("name")
        ]

    @sync_to_async
    def count(self) -> int:
        return CategoryModel.objects.count()
