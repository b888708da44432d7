"""
Caller credential middleware.

Extracts the shop-owner API key presented with an admin request and
attaches it to the request. It does not decide anything: every admin
operation passes the credentials to the authorization gate, which
re-derives the session on each call.
"""

import logging
from typing import Callable, Optional

from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

ADMIN_PATH_PREFIX = "/api/v1/admin/"


def extract_api_key(request: HttpRequest) -> Optional[str]:
    """
    Read the API key from ``X-API-Key`` or a bearer ``Authorization`` header.

    Args:
        request: HTTP request

    Returns:
        Raw key, or None when no credentials were sent
    """
    api_key = request.headers.get("X-API-Key")
    if not api_key:
        authorization = request.headers.get("Authorization", "")
        if authorization.startswith("Bearer "):
            api_key = authorization[len("Bearer "):]
    api_key = (api_key or "").strip()
    return api_key or None


class CallerContextMiddleware:
    """Attach presented credentials to admin requests."""

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.caller_api_key = None  # type: ignore
        if request.path.startswith(ADMIN_PATH_PREFIX):
            api_key = extract_api_key(request)
            request.caller_api_key = api_key  # type: ignore
            if api_key:
                request.caller_key_prefix = api_key[:8]  # type: ignore
            else:
                logger.debug("Admin request without credentials: %s", request.path)
        return self.get_response(request)
