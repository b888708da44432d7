"""
Category repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import List

from catalog.domain.category import Category


class CategoryRepository(ABC):
    """Read access to categories."""

    @abstractmethod
    async def list_ordered(self) -> List[Category]:
        """
        List all categories ordered by name.

        Returns:
            List of Category entities
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of categories."""
        pass
