"""
Unit tests for ProductValidator.
"""
import uuid

import pytest

from catalog.domain.form_input import ProductFormInput
from catalog.domain.validator import (
    BRAND_REQUIRED,
    IMAGE_NOT_UPLOADED,
    INVALID_PRICE,
    MISSING_REQUIRED_FIELDS,
    ProductValidator,
    parse_price_cents,
)
from core.domain.exceptions import ProductValidationError
from core.domain.value_objects import Currency, StoreMode

PREFIX = "https://cdn.example.test/"


def form(**overrides):
    data = {"name": "Sauce", "slug": "sauce", "price_cents": "100"}
    data.update(overrides)
    return ProductFormInput.from_mapping(data)


@pytest.fixture
def validator():
    return ProductValidator(asset_url_prefix=PREFIX)


class TestRequiredFields:
    """Tests for required field checks."""

    @pytest.mark.parametrize("mode", [StoreMode.single(uuid.uuid4()), StoreMode.multi()])
    def test_blank_name_is_missing(self, validator, mode):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(form(name="", slug="x", brand_id=str(uuid.uuid4())), mode)
        assert exc.value.message == MISSING_REQUIRED_FIELDS
        assert exc.value.code == "VALIDATION_ERROR"

    def test_missing_price_is_missing(self, validator):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(ProductFormInput(name="Sauce", slug="sauce"), StoreMode.single(None))
        assert exc.value.message == MISSING_REQUIRED_FIELDS

    def test_whitespace_only_slug_is_missing(self, validator):
        with pytest.raises(ProductValidationError):
            validator.validate(form(slug="   "), StoreMode.single(None))


class TestPrice:
    """Tests for price parsing."""

    @pytest.mark.parametrize("raw", ["-1", "4.99", "abc", "NaN", "Infinity"])
    def test_rejected_prices(self, validator, raw):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(form(price_cents=raw), StoreMode.single(None))
        assert exc.value.message == INVALID_PRICE

    def test_whole_number_prices(self):
        assert parse_price_cents("0") == 0
        assert parse_price_cents(" 499 ") == 499
        assert parse_price_cents("500.00") == 500


class TestBrandRule:
    """Tests for the store mode brand rule."""

    def test_single_mode_always_uses_default_brand(self, validator):
        default_brand = uuid.uuid4()
        submitted = uuid.uuid4()

        validated = validator.validate(form(brand_id=str(submitted)), StoreMode.single(default_brand))

        assert validated.brand_id == default_brand

    def test_single_mode_ignores_malformed_brand(self, validator):
        default_brand = uuid.uuid4()
        validated = validator.validate(form(brand_id="not-a-uuid"), StoreMode.single(default_brand))
        assert validated.brand_id == default_brand

    def test_multi_mode_requires_brand(self, validator):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(form(), StoreMode.multi())
        assert exc.value.message == BRAND_REQUIRED

    def test_multi_mode_uses_submitted_brand(self, validator):
        submitted = uuid.uuid4()
        validated = validator.validate(form(brand_id=str(submitted)), StoreMode.multi())
        assert validated.brand_id == submitted

    def test_multi_mode_falls_back_to_explicit_default(self, validator):
        default_brand = uuid.uuid4()
        validated = validator.validate(form(), StoreMode.multi(), default_brand_id=default_brand)
        assert validated.brand_id == default_brand

    def test_multi_mode_rejects_malformed_brand(self, validator):
        with pytest.raises(ProductValidationError):
            validator.validate(form(brand_id="nope"), StoreMode.multi())


class TestOptionalFields:
    """Tests for currency, category and image handling."""

    def test_currency_defaults_to_gbp(self, validator):
        validated = validator.validate(form(), StoreMode.single(None))
        assert validated.currency is Currency.GBP

    def test_currency_is_case_insensitive(self, validator):
        validated = validator.validate(form(currency="usd"), StoreMode.single(None))
        assert validated.currency is Currency.USD

    def test_unsupported_currency(self, validator):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(form(currency="JPY"), StoreMode.single(None))
        assert "JPY" in exc.value.message

    def test_category_reference_parsed(self, validator):
        category_id = uuid.uuid4()
        validated = validator.validate(form(category_id=str(category_id)), StoreMode.single(None))
        assert validated.category_id == category_id

    def test_blank_category_is_none(self, validator):
        validated = validator.validate(form(category_id=""), StoreMode.single(None))
        assert validated.category_id is None

    def test_uploaded_image_accepted(self, validator):
        url = f"{PREFIX}products/1-abc.png"
        validated = validator.validate(form(image_url=url), StoreMode.single(None))
        assert validated.image_url == url

    def test_foreign_image_rejected(self, validator):
        with pytest.raises(ProductValidationError) as exc:
            validator.validate(form(image_url="https://elsewhere.test/x.png"), StoreMode.single(None))
        assert exc.value.message == IMAGE_NOT_UPLOADED

    def test_name_and_slug_trimmed(self, validator):
        validated = validator.validate(form(name="  Sauce ", slug=" sauce "), StoreMode.single(None))
        assert validated.name == "Sauce"
        assert validated.slug == "sauce"


class TestProductFormInput:
    """Tests for ProductFormInput."""

    def test_from_mapping_keeps_values_as_text(self):
        form_input = ProductFormInput.from_mapping({"price_cents": 499, "unknown": "x"})
        assert form_input.price_cents == "499"
        assert "unknown" not in form_input.to_dict()

    def test_with_image_url_replaces_only_image(self):
        form_input = form(image_url="old")
        updated = form_input.with_image_url("new")
        assert updated.image_url == "new"
        assert updated.name == form_input.name
