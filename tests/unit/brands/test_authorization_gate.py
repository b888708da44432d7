"""
Unit tests for AuthorizationGate.
"""
import uuid

import pytest

from brands.application.services.authorization_gate import AuthorizationGate
from brands.domain.session import CallerContext, Session
from core.domain.exceptions import AuthorizationError
from tests.fakes import StaticSessionResolver


@pytest.mark.asyncio
class TestAuthorizationGate:
    """Tests for AuthorizationGate."""

    async def test_owner_is_authorized(self, owner_session, owner_caller):
        gate = AuthorizationGate(StaticSessionResolver(owner_session))

        session = await gate.authorize(owner_caller)

        assert session.brand_id == owner_session.brand_id
        assert session.key_prefix == owner_session.key_prefix
        assert session.locale == "en"

    async def test_missing_credentials_refused(self, owner_session, anonymous_caller):
        gate = AuthorizationGate(StaticSessionResolver(owner_session))

        with pytest.raises(AuthorizationError) as exc:
            await gate.authorize(anonymous_caller)
        assert exc.value.code == "NOT_AUTHORIZED"
        assert exc.value.message == "Not authorized"

    async def test_non_owner_refused(self, owner_caller):
        session = Session(brand_id=uuid.uuid4(), key_prefix="readonly", is_shop_owner=False)
        gate = AuthorizationGate(StaticSessionResolver(session))

        with pytest.raises(AuthorizationError):
            await gate.authorize(owner_caller)

    async def test_session_resolved_on_every_call(self, owner_session, owner_caller):
        resolver = StaticSessionResolver(owner_session)
        gate = AuthorizationGate(resolver)

        await gate.authorize(owner_caller)
        await gate.authorize(owner_caller)
        assert resolver.calls == 2

        resolver.session = None
        with pytest.raises(AuthorizationError):
            await gate.authorize(owner_caller)


def test_caller_repr_masks_key():
    caller = CallerContext(api_key="supersecretkeyvalue", locale="en")
    assert "supersecretkeyvalue" not in repr(caller)
    assert "supersec..." in repr(caller)
