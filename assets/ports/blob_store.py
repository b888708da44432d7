"""
Blob store port (interface).

This defines the contract for storing uploaded image bytes.
"""
from abc import ABC, abstractmethod


class BlobStoreError(Exception):
    """Raised by blob stores when a write fails. Carries the store's message."""


class BlobStore(ABC):
    """Abstract object storage for product images."""

    @abstractmethod
    async def put(self, key: str, content: bytes, content_type: str = "", overwrite: bool = True) -> None:
        """
        Write ``content`` under ``key``.

        Args:
            key: Object key, e.g. ``products/1700000000000-ab12cd34ef56ab78.png``
            content: Raw bytes
            content_type: MIME type of the content
            overwrite: Replace an existing object with the same key

        Raises:
            BlobStoreError: If the store rejects the write
        """
        pass

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public URL the object under ``key`` is served from."""
        pass
