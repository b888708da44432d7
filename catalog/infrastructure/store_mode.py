"""
Store mode loading.

The store mode is read from settings once per coordinator and handed to
the components that consult it.
"""
import logging
import uuid
from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from brands.ports.brand_repository import BrandRepository
from core.domain.value_objects import StoreMode, StoreModeKind

logger = logging.getLogger(__name__)


def _configured_brand_id() -> Optional[uuid.UUID]:
    raw = getattr(settings, "STORE_DEFAULT_BRAND_ID", None)
    if not raw:
        return None
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        raise ImproperlyConfigured(f"STORE_DEFAULT_BRAND_ID is not a UUID: {raw}") from None


async def load_store_mode(brand_repository: BrandRepository) -> StoreMode:
    """
    Build the active store mode from settings.

    In single mode the default brand is ``STORE_DEFAULT_BRAND_ID`` or,
    when unset, the first brand by name.

    Raises:
        ImproperlyConfigured: If ``STORE_MODE`` is not ``single`` or ``multi``
    """
    raw_mode = str(getattr(settings, "STORE_MODE", "single")).strip().lower()
    try:
        kind = StoreModeKind(raw_mode)
    except ValueError:
        raise ImproperlyConfigured(f"Unknown STORE_MODE: {raw_mode}") from None

    if kind is StoreModeKind.MULTI:
        return StoreMode.multi()

    brand_id = _configured_brand_id()
    if brand_id is None:
        brand = await brand_repository.first_by_name()
        brand_id = brand.id if brand else None
    if brand_id is None:
        logger.warning("Single store mode has no brand; product changes will fail validation")
    return StoreMode.single(brand_id)
