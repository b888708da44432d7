"""
Catalog query engine.

Decides which products a shopper sees for a search/category/sort state,
and how many of them are revealed. Everything here is a pure function of
its inputs and runs over the already-fetched collection, so it is cheap
enough to re-run on every keystroke.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from catalog.domain.catalog_product import CatalogProduct

REVEAL_INCREMENT = 12


class SortOption(Enum):
    """
    Orderings offered to shoppers.

    There is no ranking signal for either option yet, so both keep the
    order the collection was fetched in.
    """

    RECENT = "recent"
    POPULAR = "popular"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortOption":
        """
        Parse a sort option, defaulting to ``recent``.

        Raises:
            ValueError: If the value is not a known option
        """
        if not value:
            return cls.RECENT
        return cls(value)

    def __str__(self) -> str:
        """Return sort option as string."""
        return self.value


@dataclass(frozen=True)
class CatalogFilter:
    """Search, category and sort state of the shop front."""

    search_term: str = ""
    category_filter: str = ""
    sort_option: SortOption = SortOption.RECENT

    @property
    def is_active(self) -> bool:
        """True when a search or category filter narrows the catalog."""
        return bool(self.search_term or self.category_filter)


@dataclass(frozen=True)
class CatalogQueryResult:
    """Matched products, in display order."""

    visible: Tuple[CatalogProduct, ...]

    @property
    def total_matches(self) -> int:
        return len(self.visible)

    @property
    def is_empty(self) -> bool:
        return not self.visible


def matches_search(product: CatalogProduct, search_term: str) -> bool:
    """Case-insensitive substring match on name, description or brand name."""
    if not search_term:
        return True
    needle = search_term.lower()
    if needle in product.name.lower():
        return True
    if product.description and needle in product.description.lower():
        return True
    return bool(product.brand and product.brand.name and needle in product.brand.name.lower())


def matches_category(product: CatalogProduct, category_filter: str) -> bool:
    """Match on the category id, falling back to the category slug."""
    if not category_filter:
        return True
    if product.category is None:
        return False
    return (
        str(product.category.id) == category_filter
        or str(product.category.slug) == category_filter
    )


def sort_products(products: Tuple[CatalogProduct, ...], sort_option: SortOption):
    """Order matched products. Both options keep fetch order."""
    # TODO: rank POPULAR by units sold once order history reaches the catalog
    return tuple(products)


def filter_products(
    products: Iterable[CatalogProduct], catalog_filter: CatalogFilter
) -> CatalogQueryResult:
    """
    Apply the shop front filter to a product collection.

    Args:
        products: Full fetched collection
        catalog_filter: Search, category and sort state

    Returns:
        CatalogQueryResult with the matching products in display order
    """
    matched = tuple(
        product
        for product in products
        if matches_search(product, catalog_filter.search_term)
        and matches_category(product, catalog_filter.category_filter)
    )
    return CatalogQueryResult(visible=sort_products(matched, catalog_filter.sort_option))


@dataclass(frozen=True)
class CatalogPage:
    """The revealed slice of a query result."""

    displayed: Tuple[CatalogProduct, ...]
    total_matches: int
    has_more: bool


@dataclass(frozen=True)
class RevealWindow:
    """
    Number of matched products currently shown to the shopper.

    Growing the window never re-queries: it only reveals more of the
    same result.
    """

    size: int = REVEAL_INCREMENT
    increment: int = field(default=REVEAL_INCREMENT)

    def __post_init__(self):
        """Validate window."""
        if self.size < 0:
            raise ValueError("Reveal window cannot be negative")
        if self.increment <= 0:
            raise ValueError("Reveal increment must be positive")

    @classmethod
    def after_reveals(cls, reveals: int) -> "RevealWindow":
        """Window after ``reveals`` presses of "load more"."""
        if reveals < 0:
            raise ValueError("Reveal count cannot be negative")
        return cls(size=REVEAL_INCREMENT * (reveals + 1))

    def reveal_more(self) -> "RevealWindow":
        return RevealWindow(size=self.size + self.increment, increment=self.increment)

    def apply(self, result: CatalogQueryResult) -> CatalogPage:
        return CatalogPage(
            displayed=result.visible[: self.size],
            total_matches=result.total_matches,
            has_more=result.total_matches > self.size,
        )
