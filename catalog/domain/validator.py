"""
Product validator.

Turns admin form input into a normalized product record for the active
store mode, or rejects it as a whole.
"""
import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from catalog.domain.form_input import ProductFormInput
from core.domain.exceptions import ProductValidationError
from core.domain.value_objects import Currency, StoreMode

MISSING_REQUIRED_FIELDS = "Missing required fields"
INVALID_PRICE = "Price must be a non-negative whole number of minor units"
BRAND_REQUIRED = "Brand is required in multi-store mode"
IMAGE_NOT_UPLOADED = "Image must be uploaded through the asset uploader"
STORE_BRAND_MISSING = "The store has no brand configured"
UNKNOWN_BRAND = "Brand does not exist"


@dataclass(frozen=True)
class ValidatedProduct:
    """A mode-valid product record ready for persistence."""

    name: str
    slug: str
    price_cents: int
    currency: Currency
    description: str
    category_id: Optional[uuid.UUID]
    brand_id: Optional[uuid.UUID]
    image_url: Optional[str]


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_price_cents(raw: str) -> int:
    """
    Parse a price in minor units.

    Raises:
        ProductValidationError: If the value is not a non-negative whole number
    """
    try:
        amount = Decimal(raw.strip())
    except InvalidOperation:
        raise ProductValidationError(INVALID_PRICE) from None
    if not amount.is_finite() or amount < 0 or amount != amount.to_integral_value():
        raise ProductValidationError(INVALID_PRICE)
    return int(amount)


def parse_currency(raw: Optional[str]) -> Currency:
    code = _blank_to_none(raw)
    if code is None:
        return Currency.default()
    try:
        return Currency(code.upper())
    except ValueError:
        raise ProductValidationError(f"Unsupported currency: {code}") from None


def parse_reference(raw: Optional[str], label: str) -> Optional[uuid.UUID]:
    value = _blank_to_none(raw)
    if value is None:
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ProductValidationError(f"Invalid {label} reference: {value}") from None


class ProductValidator:
    """
    Validates admin form input against the store mode.

    ``asset_url_prefix`` is where uploaded images are served from. Image
    URLs outside it were not produced by the uploader and are rejected.
    """

    def __init__(self, asset_url_prefix: Optional[str] = None):
        self.asset_url_prefix = asset_url_prefix

    def validate(
        self,
        form: ProductFormInput,
        store_mode: StoreMode,
        default_brand_id: Optional[uuid.UUID] = None,
    ) -> ValidatedProduct:
        """
        Validate form input.

        Args:
            form: Submitted form fields
            store_mode: Active store mode
            default_brand_id: Brand to fall back to when none is submitted

        Returns:
            ValidatedProduct

        Raises:
            ProductValidationError: If any field is missing or malformed,
                or the brand rule of the store mode is violated
        """
        name = _blank_to_none(form.name)
        slug = _blank_to_none(form.slug)
        price_raw = _blank_to_none(form.price_cents)
        if name is None or slug is None or price_raw is None:
            raise ProductValidationError(MISSING_REQUIRED_FIELDS)

        price_cents = parse_price_cents(price_raw)
        currency = parse_currency(form.currency)
        category_id = parse_reference(form.category_id, "category")
        brand_id = self.resolve_brand(form, store_mode, default_brand_id)
        image_url = self.check_image_url(form.image_url)

        return ValidatedProduct(
            name=name,
            slug=slug,
            price_cents=price_cents,
            currency=currency,
            description=form.description or "",
            category_id=category_id,
            brand_id=brand_id,
            image_url=image_url,
        )

    def resolve_brand(
        self,
        form: ProductFormInput,
        store_mode: StoreMode,
        default_brand_id: Optional[uuid.UUID],
    ) -> Optional[uuid.UUID]:
        """
        Apply the store mode's brand rule.

        Single mode always uses the store's brand, whatever was submitted.
        Multi mode uses the submitted brand, then the default, and fails
        when neither is present.
        """
        if store_mode.is_single:
            return store_mode.default_brand_id or default_brand_id

        brand_id = parse_reference(form.brand_id, "brand") or default_brand_id
        if brand_id is None:
            raise ProductValidationError(BRAND_REQUIRED)
        return brand_id

    def check_image_url(self, raw: Optional[str]) -> Optional[str]:
        image_url = _blank_to_none(raw)
        if image_url is None:
            return None
        if self.asset_url_prefix and not image_url.startswith(self.asset_url_prefix):
            raise ProductValidationError(IMAGE_NOT_UPLOADED)
        return image_url
