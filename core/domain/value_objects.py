"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import uuid
from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Slug(ValueObject):
    """
    Textual URL identifier of a product, brand or category.

    Uniqueness is enforced by the store, so the only local rule is
    that the slug is not blank.
    """

    value: str

    def __post_init__(self):
        """Validate slug."""
        if not self.value or not self.value.strip():
            raise ValueError("Slug cannot be empty")

    def __str__(self) -> str:
        """Return slug as string."""
        return self.value


class Currency(Enum):
    """Currencies a product can be priced in."""

    GBP = "GBP"
    EUR = "EUR"
    USD = "USD"

    @classmethod
    def default(cls) -> "Currency":
        """Currency used when the form leaves it blank."""
        return cls.GBP

    @classmethod
    def codes(cls):
        """All supported codes, in display order."""
        return [currency.value for currency in cls]

    def __str__(self) -> str:
        """Return currency code as string."""
        return self.value


class StoreModeKind(Enum):
    """Deployment-time store mode."""

    SINGLE = "single"
    MULTI = "multi"

    def __str__(self) -> str:
        """Return mode as string."""
        return self.value


@dataclass(frozen=True)
class StoreMode(ValueObject):
    """
    Store mode as a tagged variant.

    ``single`` carries the id of the sole configured brand, which every
    product is attached to. ``multi`` carries nothing: every product must
    name its brand. Build it with :meth:`single` or :meth:`multi`.
    """

    kind: StoreModeKind
    default_brand_id: Optional[uuid.UUID] = None

    def __post_init__(self):
        """Validate variant payload."""
        if self.kind is StoreModeKind.MULTI and self.default_brand_id is not None:
            raise ValueError("Multi store mode does not carry a default brand")

    @classmethod
    def single(cls, default_brand_id: Optional[uuid.UUID]) -> "StoreMode":
        return cls(kind=StoreModeKind.SINGLE, default_brand_id=default_brand_id)

    @classmethod
    def multi(cls) -> "StoreMode":
        return cls(kind=StoreModeKind.MULTI)

    @property
    def is_single(self) -> bool:
        return self.kind is StoreModeKind.SINGLE

    @property
    def is_multi(self) -> bool:
        return self.kind is StoreModeKind.MULTI

    @property
    def brand_field_visible(self) -> bool:
        """Whether the admin form lets the owner pick a brand."""
        return self.is_multi

    def __str__(self) -> str:
        """Return mode as string."""
        return self.kind.value
