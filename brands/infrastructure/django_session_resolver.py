"""
Django implementation of the SessionResolver port.

Looks up the hashed API key on every call; nothing is cached between calls.
"""

import logging
from typing import Optional

from asgiref.sync import sync_to_async

from brands.domain.session import CallerContext, Session
from brands.infrastructure.models import ApiKey
from brands.ports.session_resolver import SessionResolver

logger = logging.getLogger(__name__)


class DjangoSessionResolver(SessionResolver):
    """Resolve sessions from ``ApiKey`` rows."""

    @sync_to_async
    def resolve_session(self, caller: CallerContext) -> Optional[Session]:
        if not caller.api_key:
            return None

        api_key = (
            ApiKey.objects.select_related("brand")
            .filter(key_hash=ApiKey.hash_key(caller.api_key))
            .first()
        )
        if not api_key:
            logger.warning("Invalid API key attempted: %s...", caller.api_key[:8])
            return None

        if not api_key.is_valid():
            logger.warning("Expired API key attempted: %s...", caller.api_key[:8])
            return None

        api_key.mark_used()
        return Session(
            brand_id=api_key.brand_id,
            key_prefix=api_key.key_prefix,
            is_shop_owner=api_key.scope == ApiKey.SCOPE_OWNER,
        )
