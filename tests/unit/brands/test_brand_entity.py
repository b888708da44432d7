"""
Unit tests for Brand domain entity.
"""

import uuid

import pytest

from brands.domain.brand import Brand


class TestBrandEntity:
    """Tests for Brand domain entity."""

    def test_create_brand(self):
        """Test creating a brand entity."""
        brand = Brand.create(name="Dawson's", slug="dawsons", country="CA")

        assert brand.name == "Dawson's"
        assert brand.slug.value == "dawsons"
        assert brand.country == "CA"
        assert isinstance(brand.id, uuid.UUID)
        assert brand.created_at is not None

    def test_create_brand_with_id(self):
        """Test creating a brand with specific ID."""
        brand_id = uuid.uuid4()
        brand = Brand.create(name="Dawson's", slug="dawsons", brand_id=brand_id)

        assert brand.id == brand_id

    def test_brand_name_trimmed(self):
        brand = Brand.create(name="  Blair's  ", slug="blairs")
        assert brand.name == "Blair's"

    def test_empty_name_rejected(self):
        """Test brand without a name."""
        with pytest.raises(ValueError, match="Brand name cannot be empty"):
            Brand.create(name=" ", slug="blank")

    def test_long_name_rejected(self):
        with pytest.raises(ValueError, match="Brand name too long"):
            Brand.create(name="x" * 256, slug="long")
