"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer. Each mutating method
issues exactly one statement and relies on the store for atomicity.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.domain.catalog_product import CatalogProduct
from catalog.domain.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Insert a new product.

        Args:
            product: Product entity to insert

        Returns:
            Saved product entity

        Raises:
            PersistenceError: If the store rejects the row (e.g. duplicate slug)
        """
        pass

    @abstractmethod
    async def update(self, product: Product) -> bool:
        """
        Overwrite the editable fields of an existing product.

        Args:
            product: Product entity carrying the id to update

        Returns:
            True if a row was updated, False if no product has that id

        Raises:
            PersistenceError: If the store rejects the change
        """
        pass

    @abstractmethod
    async def delete(self, product_id: uuid.UUID) -> bool:
        """
        Delete a product.

        Args:
            product_id: Product UUID

        Returns:
            True if a row was deleted, False if no product has that id

        Raises:
            PersistenceError: If the store rejects the delete
        """
        pass

    @abstractmethod
    async def find_by_id(self, product_id: uuid.UUID) -> Optional[CatalogProduct]:
        """
        Find a product by ID, with category and brand resolved.

        Args:
            product_id: Product UUID

        Returns:
            CatalogProduct or None if not found
        """
        pass

    @abstractmethod
    async def list_catalog(self) -> List[CatalogProduct]:
        """
        List every product, newest first, with category and brand resolved.

        Returns:
            List of CatalogProduct
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of products."""
        pass
