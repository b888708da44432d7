"""
Integration tests for the public catalog API.
"""

import pytest
from django.urls import reverse

from brands.infrastructure.models import Brand
from catalog.infrastructure.models import Category, Product


@pytest.fixture
def catalog_rows():
    brand = Brand.objects.create(name="Blair's", slug="blairs")
    fruity = Category.objects.create(name="Fruity", slug="fruity")
    extreme = Category.objects.create(name="Extreme", slug="extreme")
    Product.objects.create(name="Mild Mango", slug="mild-mango", price_cents=499, category=fruity, brand=brand)
    Product.objects.create(
        name="Ghost Pepper Inferno", slug="ghost-pepper-inferno", price_cents=899, category=extreme, brand=brand
    )
    return {"fruity": fruity, "extreme": extreme}


@pytest.mark.django_db
@pytest.mark.integration
class TestCatalogAPI:
    """Integration tests for the catalog API."""

    def test_search_for_ghost(self, api_client, catalog_rows):
        response = api_client.get(reverse("browse-catalog"), {"search": "ghost"})

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["products"]] == ["Ghost Pepper Inferno"]
        assert data["total_matches"] == 1
        assert data["products"][0]["brand_name"] == "Blair's"
        assert data["is_empty"] is False

    def test_no_matches_is_empty(self, api_client, catalog_rows):
        data = api_client.get(reverse("browse-catalog"), {"search": "carolina reaper"}).json()

        assert data["products"] == []
        assert data["is_empty"] is True
        assert data["has_more"] is False

    def test_category_filter_by_slug_and_id(self, api_client, catalog_rows):
        by_slug = api_client.get(reverse("browse-catalog"), {"category": "fruity"}).json()
        by_id = api_client.get(
            reverse("browse-catalog"), {"category": str(catalog_rows["fruity"].id)}
        ).json()

        assert [p["name"] for p in by_slug["products"]] == ["Mild Mango"]
        assert by_slug["products"] == by_id["products"]

    def test_reveal_window(self, api_client):
        for i in range(15):
            Product.objects.create(name=f"Sauce {i}", slug=f"sauce-{i}", price_cents=100)

        first = api_client.get(reverse("browse-catalog")).json()
        more = api_client.get(reverse("browse-catalog"), {"reveals": 1}).json()

        assert (first["displayed_count"], first["has_more"]) == (12, True)
        assert (more["displayed_count"], more["has_more"]) == (15, False)
        assert more["products"][:12] == first["products"]

    def test_unknown_sort_rejected(self, api_client):
        response = api_client.get(reverse("browse-catalog"), {"sort": "spiciest"})
        assert response.status_code == 400

    def test_popular_sort_accepted(self, api_client, catalog_rows):
        recent = api_client.get(reverse("browse-catalog"), {"sort": "recent"}).json()
        popular = api_client.get(reverse("browse-catalog"), {"sort": "popular"}).json()

        assert popular["sort_option"] == "popular"
        assert popular["products"] == recent["products"]

    def test_categories(self, api_client, catalog_rows):
        response = api_client.get(reverse("list-categories"))

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Extreme", "Fruity"]
