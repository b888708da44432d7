"""
Caller and session types used by the admin authorization gate.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallerContext:
    """
    What an admin request presents: raw credentials and the locale
    the console is being used in.
    """

    api_key: Optional[str]
    locale: str

    def __repr__(self) -> str:
        prefix = f"{self.api_key[:8]}..." if self.api_key else None
        return f"CallerContext(api_key={prefix!r}, locale={self.locale!r})"


@dataclass(frozen=True)
class Session:
    """Session resolved from a caller's credentials."""

    brand_id: uuid.UUID
    key_prefix: str
    is_shop_owner: bool


@dataclass(frozen=True)
class AuthorizedSession:
    """Proof that the caller passed the gate for one operation."""

    brand_id: uuid.UUID
    key_prefix: str
    locale: str
