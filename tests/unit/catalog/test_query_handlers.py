"""
Unit tests for product query handlers.
"""
import uuid

import pytest

from brands.domain.brand import Brand
from catalog.application.handlers.product_query_handlers import (
    BrowseCatalogHandler,
    GetDashboardStatsHandler,
    GetFormOptionsHandler,
    GetProductHandler,
)
from catalog.application.queries.browse_catalog import BrowseCatalogQuery
from catalog.application.queries.get_dashboard_stats import GetDashboardStatsQuery
from catalog.application.queries.get_form_options import GetFormOptionsQuery
from catalog.application.queries.get_product import GetProductQuery
from catalog.domain.category import Category
from catalog.domain.product import Product
from catalog.domain.query_engine import SortOption
from core.domain.exceptions import ProductNotFoundError
from core.domain.value_objects import Currency, StoreMode
from tests.fakes import InMemoryBrandRepository, InMemoryCategoryRepository


def fill(repository, count):
    for i in range(count):
        product = Product.create(
            name=f"Sauce {i}", slug=f"sauce-{i}", price_cents=100 + i, currency=Currency.GBP
        )
        repository.products[product.id] = product


@pytest.mark.asyncio
class TestBrowseCatalogHandler:
    """Tests for BrowseCatalogHandler."""

    async def test_first_page(self, memory_product_repository):
        fill(memory_product_repository, 15)

        page = await BrowseCatalogHandler(memory_product_repository).handle(BrowseCatalogQuery())

        assert page.displayed_count == 12
        assert page.total_matches == 15
        assert page.has_more is True
        assert page.sort_option == "recent"

    async def test_after_one_reveal(self, memory_product_repository):
        fill(memory_product_repository, 15)

        page = await BrowseCatalogHandler(memory_product_repository).handle(
            BrowseCatalogQuery(reveals=1, sort_option=SortOption.POPULAR)
        )

        assert page.displayed_count == 15
        assert page.has_more is False
        assert page.sort_option == "popular"

    async def test_search(self, memory_product_repository):
        fill(memory_product_repository, 15)

        page = await BrowseCatalogHandler(memory_product_repository).handle(
            BrowseCatalogQuery(search_term="sauce 1")
        )

        assert sorted(p.name for p in page.products) == [
            "Sauce 1", "Sauce 10", "Sauce 11", "Sauce 12", "Sauce 13", "Sauce 14"
        ]


@pytest.mark.asyncio
class TestGetProductHandler:
    """Tests for GetProductHandler."""

    async def test_found(self, memory_product_repository):
        fill(memory_product_repository, 1)
        product_id = next(iter(memory_product_repository.products))

        detail = await GetProductHandler(memory_product_repository).handle(GetProductQuery(product_id))

        assert detail.id == product_id
        assert detail.currency == "GBP"
        assert detail.chilli_types == []

    async def test_not_found(self, memory_product_repository):
        with pytest.raises(ProductNotFoundError):
            await GetProductHandler(memory_product_repository).handle(GetProductQuery(uuid.uuid4()))


@pytest.mark.asyncio
class TestGetFormOptionsHandler:
    """Tests for GetFormOptionsHandler."""

    @pytest.fixture
    def repositories(self):
        brands = InMemoryBrandRepository(
            [Brand.create(name="Dawson's", slug="dawsons"), Brand.create(name="Blair's", slug="blairs")]
        )
        categories = InMemoryCategoryRepository(
            [Category.create(name="Fruity", slug="fruity"), Category.create(name="Extreme", slug="extreme")]
        )
        return brands, categories

    async def test_multi_mode_shows_brand_field(self, repositories):
        brands, categories = repositories
        handler = GetFormOptionsHandler(categories, brands, StoreMode.multi())

        options = await handler.handle(GetFormOptionsQuery())

        assert options.brand_field_visible is True
        assert options.store_mode == "multi"
        assert [b.name for b in options.brands] == ["Blair's", "Dawson's"]
        assert [c.name for c in options.categories] == ["Extreme", "Fruity"]
        assert options.currencies == ["GBP", "EUR", "USD"]

    async def test_single_mode_hides_brand_field(self, repositories):
        brands, categories = repositories
        handler = GetFormOptionsHandler(categories, brands, StoreMode.single(uuid.uuid4()))

        options = await handler.handle(GetFormOptionsQuery())

        assert options.brand_field_visible is False


@pytest.mark.asyncio
async def test_dashboard_counts(memory_product_repository):
    fill(memory_product_repository, 3)
    handler = GetDashboardStatsHandler(
        memory_product_repository,
        InMemoryBrandRepository([Brand.create(name="Blair's", slug="blairs")]),
        InMemoryCategoryRepository(),
    )

    stats = await handler.handle(GetDashboardStatsQuery())

    assert (stats.products, stats.brands, stats.categories) == (3, 1, 0)
