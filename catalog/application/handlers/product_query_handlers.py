"""
Product query handlers.

Read-side handlers for the shop front and the admin console.
"""
import asyncio

from brands.ports.brand_repository import BrandRepository
from catalog.application.dto.product_dto import (
    CatalogPageDTO,
    DashboardStatsDTO,
    FormOptionsDTO,
    OptionDTO,
    ProductDetailDTO,
)
from catalog.application.queries.browse_catalog import BrowseCatalogQuery
from catalog.application.queries.get_dashboard_stats import GetDashboardStatsQuery
from catalog.application.queries.get_form_options import GetFormOptionsQuery
from catalog.application.queries.get_product import GetProductQuery
from catalog.domain.query_engine import CatalogFilter, RevealWindow, filter_products
from catalog.ports.category_repository import CategoryRepository
from catalog.ports.product_repository import ProductRepository
from core.domain.exceptions import ProductNotFoundError
from core.domain.value_objects import Currency, StoreMode
from core.metrics import catalog_queries_total


class GetProductHandler:
    """Handler for GetProductQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: GetProductQuery) -> ProductDetailDTO:
        """
        Handle get product query.

        Raises:
            ProductNotFoundError: If no product has the id
        """
        product = await self.product_repository.find_by_id(query.product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {query.product_id} not found")
        return ProductDetailDTO.from_catalog(product)


class BrowseCatalogHandler:
    """
    Handler for BrowseCatalogQuery.

    The catalog is fetched once and filtered in memory; revealing more
    products only widens the window over the same result.
    """

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: BrowseCatalogQuery) -> CatalogPageDTO:
        products = await self.product_repository.list_catalog()
        catalog_filter = CatalogFilter(
            search_term=query.search_term,
            category_filter=query.category_filter,
            sort_option=query.sort_option,
        )
        result = filter_products(products, catalog_filter)
        page = RevealWindow.after_reveals(query.reveals).apply(result)
        catalog_queries_total.labels(sort_option=str(query.sort_option)).inc()

        return CatalogPageDTO(
            products=[ProductDetailDTO.from_catalog(product) for product in page.displayed],
            total_matches=page.total_matches,
            displayed_count=len(page.displayed),
            has_more=page.has_more,
            sort_option=str(query.sort_option),
        )


class GetFormOptionsHandler:
    """Handler for GetFormOptionsQuery."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        brand_repository: BrandRepository,
        store_mode: StoreMode,
    ):
        """Initialize handler with repositories and the store mode."""
        self.category_repository = category_repository
        self.brand_repository = brand_repository
        self.store_mode = store_mode

    async def handle(self, query: GetFormOptionsQuery) -> FormOptionsDTO:
        categories = await self.category_repository.list_ordered()
        brands = await self.brand_repository.list_ordered()
        return FormOptionsDTO(
            categories=[OptionDTO(id=category.id, name=category.name) for category in categories],
            brands=[OptionDTO(id=brand.id, name=brand.name) for brand in brands],
            currencies=Currency.codes(),
            brand_field_visible=self.store_mode.brand_field_visible,
            store_mode=str(self.store_mode),
        )


class GetDashboardStatsHandler:
    """Handler for GetDashboardStatsQuery."""

    def __init__(
        self,
        product_repository: ProductRepository,
        brand_repository: BrandRepository,
        category_repository: CategoryRepository,
    ):
        """Initialize handler with repositories."""
        self.product_repository = product_repository
        self.brand_repository = brand_repository
        self.category_repository = category_repository

    async def handle(self, query: GetDashboardStatsQuery) -> DashboardStatsDTO:
        products, brands, categories = await asyncio.gather(
            self.product_repository.count(),
            self.brand_repository.count(),
            self.category_repository.count(),
        )
        return DashboardStatsDTO(products=products, brands=brands, categories=categories)
