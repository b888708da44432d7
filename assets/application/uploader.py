"""
Asset uploader.

Stores product images under collision-resistant keys and hands back
their public URLs.
"""
import logging
import os
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Optional

from assets.ports.blob_store import BlobStore, BlobStoreError
from core.metrics import asset_uploads_total

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "products"


@dataclass(frozen=True)
class UploadedFile:
    """An image as received from the admin form."""

    name: str
    content: bytes
    content_type: str = ""


@dataclass(frozen=True)
class UploadResult:
    """Either the public URL of the stored image or the store's error message."""

    url: Optional[str] = None
    error: Optional[str] = None
    key: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.url is not None


def file_extension(filename: str) -> str:
    """Extension of ``filename`` without the dot, or ``""`` if there is none."""
    return os.path.splitext(os.path.basename(filename or ""))[1].lstrip(".")


class AssetUploader:
    """
    Uploads images to the blob store.

    Keys look like ``products/{epoch_millis}-{random}.{ext}``. The random
    part keeps two uploads in the same millisecond apart.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        prefix: str = DEFAULT_PREFIX,
        clock: Callable[[], float] = time.time,
    ):
        self.blob_store = blob_store
        self.prefix = prefix.strip("/")
        self.clock = clock

    def generate_key(self, filename: str) -> str:
        epoch_millis = int(self.clock() * 1000)
        key = f"{self.prefix}/{epoch_millis}-{secrets.token_hex(8)}"
        extension = file_extension(filename)
        if extension:
            key = f"{key}.{extension}"
        return key

    async def upload(self, file: UploadedFile) -> UploadResult:
        """
        Upload one image.

        Args:
            file: Uploaded file

        Returns:
            UploadResult with the public URL, or the store's error message
        """
        key = self.generate_key(file.name)
        try:
            await self.blob_store.put(key, file.content, content_type=file.content_type, overwrite=True)
        except BlobStoreError as e:
            asset_uploads_total.labels(outcome="failed").inc()
            logger.warning("Upload of %s failed: %s", file.name, e)
            return UploadResult(error=str(e), key=key)

        asset_uploads_total.labels(outcome="succeeded").inc()
        url = self.blob_store.public_url(key)
        logger.info("Uploaded %s as %s", file.name, key)
        return UploadResult(url=url, key=key)
