"""
GetProductQuery.

Query backing the admin edit page.
"""
import uuid
from dataclasses import dataclass


@dataclass
class GetProductQuery:
    """Query to load one product."""

    product_id: uuid.UUID
