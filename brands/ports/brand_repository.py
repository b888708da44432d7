"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, brand_id: uuid.UUID) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand UUID

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def list_ordered(self) -> List[Brand]:
        """
        List all brands ordered by name.

        Returns:
            List of Brand entities
        """
        pass

    @abstractmethod
    async def first_by_name(self) -> Optional[Brand]:
        """
        Return the first brand by name, used as the single-mode default.

        Returns:
            Brand entity or None when no brand is configured
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of brands."""
        pass
