"""
App configuration for SauceStore.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SauceStoreConfig(AppConfig):
    """App configuration for SauceStore."""

    name = "SauceStore"
    verbose_name = "SauceStore"

    def ready(self):
        """Wire tracing and event handlers once the app registry is loaded."""
        if len(sys.argv) > 1 and sys.argv[1] in [
            "migrate",
            "makemigrations",
            "collectstatic",
            "shell",
            "check",
            "createsuperuser",
        ]:
            return

        # Django's autoreloader imports the project twice
        if os.environ.get("RUN_MAIN") == "false":
            return

        if getattr(self, "_initialized", False):
            return

        from django.conf import settings

        from core.infrastructure.event_handlers import register_event_handlers
        from core.instrumentation import setup_opentelemetry

        if settings.OTEL_ENABLED:
            logger.info("Setting up observability...")
            setup_opentelemetry()
        register_event_handlers()
        self._initialized = True
        logger.info("Observability setup complete")
