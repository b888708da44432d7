"""
Unit tests for the catalog query engine.
"""
import uuid

import pytest

from catalog.domain.catalog_product import BrandSummary, CatalogProduct
from catalog.domain.category import Category
from catalog.domain.query_engine import (
    REVEAL_INCREMENT,
    CatalogFilter,
    RevealWindow,
    SortOption,
    filter_products,
)

FRUITY = Category.create(name="Fruity", slug="fruity")
EXTREME = Category.create(name="Extreme", slug="extreme")


def make_product(name, category=None, description="", brand_name=None):
    brand = None
    if brand_name:
        brand = BrandSummary(id=uuid.uuid4(), name=brand_name, slug=brand_name.lower())
    return CatalogProduct(
        id=uuid.uuid4(),
        name=name,
        slug=name.lower().replace(" ", "-"),
        price_cents=599,
        currency="GBP",
        description=description,
        category=category,
        brand=brand,
    )


@pytest.fixture
def sauces():
    return [
        make_product("Mild Mango", category=FRUITY, description="Sweet and gentle"),
        make_product("Ghost Pepper Inferno", category=EXTREME, brand_name="Blair's"),
        make_product("Smoky Chipotle", description="Ghostly smoke flavour"),
        make_product("Scotch Bonnet Blaze", category=EXTREME, brand_name="Dawson's"),
    ]


class TestFilterProducts:
    """Tests for filter_products."""

    def test_search_for_ghost(self):
        """Test the two-product ghost pepper search."""
        mango = make_product("Mild Mango", category=FRUITY)
        ghost = make_product("Ghost Pepper Inferno", category=EXTREME)

        result = filter_products([mango, ghost], CatalogFilter(search_term="ghost"))

        assert result.visible == (ghost,)
        assert result.total_matches == 1

    def test_search_is_case_insensitive_over_name_description_and_brand(self, sauces):
        result = filter_products(sauces, CatalogFilter(search_term="GHOST"))
        assert [p.name for p in result.visible] == ["Ghost Pepper Inferno", "Smoky Chipotle"]

        result = filter_products(sauces, CatalogFilter(search_term="dawson"))
        assert [p.name for p in result.visible] == ["Scotch Bonnet Blaze"]

    def test_category_matches_id_or_slug(self, sauces):
        by_slug = filter_products(sauces, CatalogFilter(category_filter="extreme"))
        by_id = filter_products(sauces, CatalogFilter(category_filter=str(EXTREME.id)))

        assert by_slug.visible == by_id.visible
        assert [p.name for p in by_slug.visible] == ["Ghost Pepper Inferno", "Scotch Bonnet Blaze"]

    def test_uncategorized_products_never_match_a_category(self, sauces):
        result = filter_products(sauces, CatalogFilter(category_filter="fruity"))
        assert all(p.category is not None for p in result.visible)

    def test_search_and_category_both_apply(self, sauces):
        result = filter_products(
            sauces, CatalogFilter(search_term="blaze", category_filter="extreme")
        )
        assert [p.name for p in result.visible] == ["Scotch Bonnet Blaze"]

        result = filter_products(
            sauces, CatalogFilter(search_term="blaze", category_filter="fruity")
        )
        assert result.is_empty

    def test_empty_filter_keeps_fetch_order(self, sauces):
        result = filter_products(sauces, CatalogFilter())
        assert list(result.visible) == sauces

    def test_result_is_subset_of_input(self, sauces):
        for catalog_filter in (
            CatalogFilter(search_term="e"),
            CatalogFilter(category_filter="extreme"),
            CatalogFilter(search_term="nothing matches this"),
        ):
            result = filter_products(sauces, catalog_filter)
            assert all(product in sauces for product in result.visible)

    def test_filter_is_idempotent(self, sauces):
        catalog_filter = CatalogFilter(search_term="o", category_filter="extreme")
        assert filter_products(sauces, catalog_filter) == filter_products(sauces, catalog_filter)

    def test_sort_options_do_not_reorder(self, sauces):
        recent = filter_products(sauces, CatalogFilter(sort_option=SortOption.RECENT))
        popular = filter_products(sauces, CatalogFilter(sort_option=SortOption.POPULAR))
        assert recent.visible == popular.visible


class TestSortOption:
    """Tests for SortOption parsing."""

    def test_parse_defaults_to_recent(self):
        assert SortOption.parse(None) is SortOption.RECENT
        assert SortOption.parse("") is SortOption.RECENT

    def test_parse_known_value(self):
        assert SortOption.parse("popular") is SortOption.POPULAR

    def test_parse_unknown_value(self):
        with pytest.raises(ValueError):
            SortOption.parse("spiciest")


class TestRevealWindow:
    """Tests for RevealWindow."""

    def test_fifteen_products_reveal_in_two_steps(self):
        products = [make_product(f"Sauce {i}") for i in range(15)]
        result = filter_products(products, CatalogFilter())

        window = RevealWindow()
        page = window.apply(result)
        assert len(page.displayed) == 12
        assert page.has_more is True

        page = window.reveal_more().apply(result)
        assert len(page.displayed) == 15
        assert page.has_more is False
        assert page.total_matches == 15

    def test_revealing_more_only_appends(self):
        products = [make_product(f"Sauce {i}") for i in range(30)]
        result = filter_products(products, CatalogFilter())

        window = RevealWindow()
        previous = window.apply(result).displayed
        for _ in range(3):
            window = window.reveal_more()
            current = window.apply(result).displayed
            assert current[: len(previous)] == previous
            previous = current

    def test_after_reveals(self):
        assert RevealWindow.after_reveals(0).size == REVEAL_INCREMENT
        assert RevealWindow.after_reveals(2).size == 3 * REVEAL_INCREMENT

    def test_window_equal_to_matches_has_no_more(self):
        products = [make_product(f"Sauce {i}") for i in range(12)]
        page = RevealWindow().apply(filter_products(products, CatalogFilter()))
        assert page.has_more is False

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError):
            RevealWindow(size=-1)
        with pytest.raises(ValueError):
            RevealWindow.after_reveals(-1)
