"""
Session resolver port (interface).

Turns the credentials a caller presents into a session, or nothing.
"""
from abc import ABC, abstractmethod
from typing import Optional

from brands.domain.session import CallerContext, Session


class SessionResolver(ABC):
    """Resolve caller credentials into a session."""

    @abstractmethod
    async def resolve_session(self, caller: CallerContext) -> Optional[Session]:
        """
        Resolve a session for the caller.

        Args:
            caller: Caller credentials and locale

        Returns:
            Session, or None when the credentials are missing, unknown or expired
        """
        pass
