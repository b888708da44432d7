"""
Test settings for SauceStore.
"""
import tempfile

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# In-memory SQLite; apps without migrations are created with run_syncdb
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

CELERY_TASK_ALWAYS_EAGER = True
CELERY_BROKER_URL = "memory://"

MEDIA_ROOT = tempfile.mkdtemp(prefix="saucestore-media-")
MEDIA_URL = "/media/"
ASSET_URL_PREFIX = MEDIA_URL

STORE_MODE = "single"
STORE_DEFAULT_BRAND_ID = None

OTEL_ENABLED = False

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Disable logging configuration during tests
LOGGING_CONFIG = None
