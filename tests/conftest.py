"""
Pytest configuration and shared fixtures.
"""

import uuid

import pytest
from django.core.cache import cache

from brands.application.services.authorization_gate import AuthorizationGate
from brands.domain.brand import Brand
from brands.domain.session import CallerContext, Session
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from catalog.application.coordinator import ProductLifecycleCoordinator
from catalog.domain.validator import ProductValidator
from catalog.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from catalog.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from core.domain.value_objects import StoreMode
from tests.fakes import (
    ASSET_URL_PREFIX,
    InMemoryBrandRepository,
    InMemoryProductRepository,
    RecordingViewInvalidator,
    StaticSessionResolver,
)


@pytest.fixture
def brand_id():
    return uuid.uuid4()


@pytest.fixture
def owner_session(brand_id):
    return Session(brand_id=brand_id, key_prefix="ownerkey", is_shop_owner=True)


@pytest.fixture
def owner_caller():
    return CallerContext(api_key="owner-key-raw", locale="en")


@pytest.fixture
def anonymous_caller():
    return CallerContext(api_key=None, locale="en")


@pytest.fixture
def session_resolver(owner_session):
    return StaticSessionResolver(owner_session)


@pytest.fixture
def authorization_gate(session_resolver):
    return AuthorizationGate(session_resolver)


@pytest.fixture
def memory_product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def memory_brand_repository(brand_id):
    return InMemoryBrandRepository([Brand.create(name="Blair's", slug="blairs", brand_id=brand_id)])


@pytest.fixture
def view_invalidator():
    return RecordingViewInvalidator()


@pytest.fixture
def validator():
    return ProductValidator(asset_url_prefix=ASSET_URL_PREFIX)


@pytest.fixture
def single_store_mode(brand_id):
    return StoreMode.single(brand_id)


@pytest.fixture
def coordinator_factory(
    authorization_gate, validator, memory_product_repository, memory_brand_repository, view_invalidator
):
    """Build a coordinator over the in-memory collaborators for a store mode."""

    def build(store_mode: StoreMode) -> ProductLifecycleCoordinator:
        return ProductLifecycleCoordinator.build(
            authorization_gate=authorization_gate,
            validator=validator,
            product_repository=memory_product_repository,
            brand_repository=memory_brand_repository,
            view_invalidator=view_invalidator,
            store_mode=store_mode,
        )

    return build


@pytest.fixture
def coordinator(coordinator_factory, single_store_mode):
    return coordinator_factory(single_store_mode)


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def category_repository():
    """Fixture for CategoryRepository."""
    return DjangoCategoryRepository()


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture(autouse=True)
def clear_view_cache():
    cache.clear()
    yield
    cache.clear()
