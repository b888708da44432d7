"""
BrowseCatalogQuery.

Query for the shop front: search, category and sort state plus the
number of "load more" presses.
"""
from dataclasses import dataclass

from catalog.domain.query_engine import SortOption


@dataclass
class BrowseCatalogQuery:
    """Query to browse the catalog."""

    search_term: str = ""
    category_filter: str = ""
    sort_option: SortOption = SortOption.RECENT
    reveals: int = 0
