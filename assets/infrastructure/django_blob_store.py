"""
Django storage implementation of the BlobStore port.

Works with whatever backend ``default_storage`` is configured with
(filesystem locally, object storage in deployments).
"""
import logging
from typing import Optional

from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import Storage, default_storage

from assets.ports.blob_store import BlobStore, BlobStoreError

logger = logging.getLogger(__name__)


class DjangoBlobStore(BlobStore):
    """BlobStore backed by a Django ``Storage``."""

    def __init__(self, storage: Optional[Storage] = None, url_prefix: Optional[str] = None):
        self.storage = storage or default_storage
        self.url_prefix = url_prefix

    def _write(self, key: str, content: bytes, overwrite: bool) -> None:
        if overwrite and self.storage.exists(key):
            self.storage.delete(key)
        saved_name = self.storage.save(key, ContentFile(content))
        if saved_name != key:
            raise BlobStoreError(f"Object key already taken: {key}")

    async def put(self, key: str, content: bytes, content_type: str = "", overwrite: bool = True) -> None:
        try:
            await sync_to_async(self._write)(key, content, overwrite)
        except BlobStoreError:
            raise
        except (OSError, ValueError) as e:
            logger.error("Blob write failed for %s: %s", key, e, exc_info=True)
            raise BlobStoreError(str(e)) from e
        logger.debug("Stored %s (%d bytes, %s)", key, len(content), content_type or "unknown type")

    def public_url(self, key: str) -> str:
        prefix = self.url_prefix or getattr(settings, "ASSET_URL_PREFIX", None)
        if prefix:
            return f"{prefix.rstrip('/')}/{key}"
        return self.storage.url(key)
