"""
Brand and API Key models.
"""

import hashlib
import secrets
import uuid

from django.db import models
from django.utils import timezone


class Brand(models.Model):
    """
    A sauce maker sold through the store.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Brand display name")
    slug = models.SlugField(
        max_length=100,
        unique=True,
        help_text="URL-safe identifier",
    )
    description = models.TextField(blank=True, default="")
    country = models.CharField(max_length=100, blank=True, null=True)
    logo_url = models.CharField(max_length=500, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "brands"
        ordering = ["name"]

    def __str__(self):
        return self.name


class ApiKey(models.Model):
    """
    API keys for admin console authentication.

    Only ``owner`` keys may change the catalog.
    """

    SCOPE_OWNER = "owner"
    SCOPE_READ = "read"
    SCOPE_CHOICES = [
        (SCOPE_OWNER, "Shop Owner"),
        (SCOPE_READ, "Read Only"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    brand = models.ForeignKey(Brand, on_delete=models.CASCADE, related_name="api_keys")
    key_prefix = models.CharField(max_length=8, editable=False)
    key_hash = models.CharField(max_length=64, editable=False, db_index=True)
    scope = models.CharField(max_length=20, choices=SCOPE_CHOICES, default=SCOPE_OWNER)
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "api_keys"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.brand.name} - {self.key_prefix}..."

    @staticmethod
    def hash_key(raw_key: str) -> str:
        """SHA-256 hex digest stored in place of the raw key."""
        return hashlib.sha256(raw_key.encode()).hexdigest()

    @classmethod
    def issue(cls, brand: Brand, scope: str = SCOPE_OWNER, expires_at=None):
        """
        Create a key for a brand.

        Args:
            brand: Brand the key belongs to
            scope: ``owner`` or ``read``
            expires_at: Optional expiry

        Returns:
            Tuple of (ApiKey, raw key). The raw key is not stored.
        """
        raw_key = secrets.token_urlsafe(32)
        api_key = cls.objects.create(
            brand=brand,
            scope=scope,
            expires_at=expires_at,
            key_prefix=raw_key[:8],
            key_hash=cls.hash_key(raw_key),
        )
        return api_key, raw_key

    def is_valid(self) -> bool:
        """
        Check if the API key is still valid.

        Returns:
            True if key is valid, False if expired
        """
        if self.expires_at and self.expires_at < timezone.now():
            return False
        return True

    def mark_used(self):
        """Update last_used_at timestamp."""
        self.last_used_at = timezone.now()
        self.save(update_fields=["last_used_at"])
