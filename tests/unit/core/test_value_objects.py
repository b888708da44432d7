"""
Unit tests for core value objects.
"""
import uuid

import pytest

from core.domain.value_objects import Currency, Slug, StoreMode, StoreModeKind


class TestSlug:
    """Tests for Slug value object."""

    def test_valid_slug(self):
        """Test valid slug creation."""
        slug = Slug("ghost-pepper")
        assert str(slug) == "ghost-pepper"
        assert slug == Slug("ghost-pepper")

    def test_blank_slug(self):
        """Test blank slug is rejected."""
        with pytest.raises(ValueError, match="Slug cannot be empty"):
            Slug("  ")


class TestCurrency:
    """Tests for Currency."""

    def test_default_is_gbp(self):
        assert Currency.default() is Currency.GBP

    def test_codes(self):
        assert Currency.codes() == ["GBP", "EUR", "USD"]


class TestStoreMode:
    """Tests for StoreMode tagged variant."""

    def test_single_carries_default_brand(self):
        brand_id = uuid.uuid4()
        mode = StoreMode.single(brand_id)

        assert mode.kind is StoreModeKind.SINGLE
        assert mode.is_single
        assert not mode.is_multi
        assert mode.default_brand_id == brand_id
        assert str(mode) == "single"

    def test_multi_has_no_default_brand(self):
        mode = StoreMode.multi()
        assert mode.is_multi
        assert mode.default_brand_id is None

    def test_multi_with_default_brand_rejected(self):
        with pytest.raises(ValueError):
            StoreMode(kind=StoreModeKind.MULTI, default_brand_id=uuid.uuid4())

    def test_brand_field_visible_only_in_multi(self):
        assert StoreMode.multi().brand_field_visible is True
        assert StoreMode.single(uuid.uuid4()).brand_field_visible is False
