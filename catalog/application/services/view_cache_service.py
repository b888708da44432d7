"""
View cache service.

Caches rendered admin views per path. Catalog mutations mark the
affected paths stale through the view invalidator.
"""
import hashlib
import uuid
from typing import Any, Optional, Union

from django.conf import settings

from core.infrastructure.cache_adapters import cache_adapter


class ViewCacheService:
    """Service for caching rendered catalog views."""

    @staticmethod
    def listing_path(locale: str) -> str:
        """Path of the admin product listing for a locale."""
        return f"/{locale}/admin/products"

    @staticmethod
    def detail_path(locale: str, product_id: Union[uuid.UUID, str]) -> str:
        """Path of one product's admin page for a locale."""
        return f"/{locale}/admin/products/{product_id}"

    @staticmethod
    def view_key(path: str) -> str:
        """Generate cache key for a rendered path."""
        path_hash = hashlib.sha256(path.encode()).hexdigest()[:16]
        return f"view:{path_hash}"

    @staticmethod
    async def get_view(path: str) -> Optional[Any]:
        return await cache_adapter.get(ViewCacheService.view_key(path))

    @staticmethod
    async def set_view(path: str, payload: Any, timeout: Optional[int] = None) -> None:
        """
        Cache a rendered view.

        Args:
            path: Rendered path
            payload: Serializable response body
            timeout: TTL in seconds (defaults to ``VIEW_CACHE_TTL``)
        """
        await cache_adapter.set(
            ViewCacheService.view_key(path),
            payload,
            timeout=timeout or settings.VIEW_CACHE_TTL,
        )
