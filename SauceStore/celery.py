"""
Celery configuration for background tasks.

Used for fire-and-forget view invalidation after catalog mutations.
"""
import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "SauceStore.settings.dev")

app = Celery("SauceStore")

# Load configuration from Django settings
app.config_from_object("django.conf:settings", namespace="CELERY")

# Auto-discover tasks from all installed apps
app.autodiscover_tasks()
