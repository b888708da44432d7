"""
DeleteProductCommand.
"""
from dataclasses import dataclass
from typing import Optional

from brands.domain.session import CallerContext


@dataclass
class DeleteProductCommand:
    """Command to delete a product."""

    caller: CallerContext
    product_id: Optional[str]
