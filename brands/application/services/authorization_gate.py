"""
Admin authorization gate.

Every catalog mutation passes through :meth:`AuthorizationGate.authorize`
before anything else happens.
"""

import logging

from brands.domain.session import AuthorizedSession, CallerContext
from brands.ports.session_resolver import SessionResolver
from core.domain.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """
    Confirms that a caller is the shop owner.

    The gate keeps no state between calls: the session is re-derived
    from the caller's credentials every time.
    """

    def __init__(self, session_resolver: SessionResolver):
        """Initialize gate with the session resolver."""
        self.session_resolver = session_resolver

    async def authorize(self, caller: CallerContext) -> AuthorizedSession:
        """
        Authorize a caller for one catalog operation.

        Args:
            caller: Caller credentials and locale

        Returns:
            AuthorizedSession for the operation

        Raises:
            AuthorizationError: If the caller is not the shop owner
        """
        session = await self.session_resolver.resolve_session(caller)
        if session is None:
            logger.info("Authorization refused: no session for %r", caller)
            raise AuthorizationError()
        if not session.is_shop_owner:
            logger.info("Authorization refused: key %s... is not an owner key", session.key_prefix)
            raise AuthorizationError()

        return AuthorizedSession(
            brand_id=session.brand_id,
            key_prefix=session.key_prefix,
            locale=caller.locale,
        )
