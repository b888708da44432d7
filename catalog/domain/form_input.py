"""
Typed admin form input.

The admin form posts loosely typed data. It is converted into a
:class:`ProductFormInput` once, at the API boundary, and only the
validator looks at it after that.
"""
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

FORM_FIELDS = (
    "product_id",
    "name",
    "slug",
    "price_cents",
    "currency",
    "description",
    "category_id",
    "brand_id",
    "image_url",
)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@dataclass(frozen=True)
class ProductFormInput:
    """Raw, unvalidated admin form fields. Every field is optional text."""

    product_id: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None
    price_cents: Optional[str] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    category_id: Optional[str] = None
    brand_id: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ProductFormInput":
        """
        Build form input from request data.

        Unknown keys are ignored; values are kept as text.
        """
        return cls(**{name: _as_text(data.get(name)) for name in FORM_FIELDS})

    def with_image_url(self, image_url: Optional[str]) -> "ProductFormInput":
        return replace(self, image_url=image_url)

    def with_product_id(self, product_id: Optional[str]) -> "ProductFormInput":
        return replace(self, product_id=product_id)

    def to_dict(self) -> dict:
        """Attempted input, echoed back so the form can be re-populated."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
