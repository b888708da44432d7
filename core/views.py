"""
Core views for health checks and system status.
"""

from django.conf import settings
from django.core.cache import cache
from django.core.files.storage import default_storage
from django.db import connection
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt


@method_decorator(csrf_exempt, name="dispatch")
class HealthView(View):
    """Liveness endpoint."""

    def get(self, _request):
        return JsonResponse(
            {"status": "healthy", "service": "sauce-store", "store_mode": settings.STORE_MODE}
        )


@method_decorator(csrf_exempt, name="dispatch")
class ReadyView(View):
    """Readiness check: database, cache and blob storage must answer."""

    def get(self, _request):
        checks = {
            "database": self._check_database(),
            "cache": self._check_cache(),
            "storage": self._check_storage(),
        }

        all_healthy = all(checks.values())
        return JsonResponse(
            {
                "status": "ready" if all_healthy else "not_ready",
                "checks": checks,
            },
            status=200 if all_healthy else 503,
        )

    def _check_database(self) -> bool:
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            return True
        except Exception:  # pylint: disable=broad-exception-caught
            return False

    def _check_cache(self) -> bool:
        try:
            cache.set("ready_check", "ok", 10)
            return cache.get("ready_check") == "ok"
        except Exception:  # pylint: disable=broad-exception-caught
            return False

    def _check_storage(self) -> bool:
        try:
            default_storage.exists("ready_check")
            return True
        except Exception:  # pylint: disable=broad-exception-caught
            return False
