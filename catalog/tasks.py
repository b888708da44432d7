"""
Celery tasks for the catalog.

Cached views are dropped in the background so that admin mutations
never wait on the cache.
"""
import logging

from django.core.cache import cache

from catalog.application.services.view_cache_service import ViewCacheService
from SauceStore.celery import app

logger = logging.getLogger(__name__)


@app.task(bind=True, max_retries=3)
def invalidate_view_task(self, path: str):
    """
    Drop the cached view rendered for ``path``.

    Args:
        path: Rendered path, e.g. ``/en/admin/products``
    """
    # Eager tasks run inside the caller's event loop, so this stays synchronous.
    try:
        cache.delete(ViewCacheService.view_key(path))
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("View invalidation failed for %s: %s", path, exc, exc_info=True)
        raise self.retry(exc=exc, countdown=2**self.request.retries)
    logger.info("Invalidated view %s", path)
