"""
Unit tests for ProductFormSession.
"""
import asyncio

import pytest

from assets.application.uploader import AssetUploader, UploadedFile
from catalog.application.dto.product_dto import ProductDetailDTO
from catalog.application.form_session import ProductFormSession
from catalog.domain.form_input import ProductFormInput
from catalog.domain.product import Product
from core.domain.value_objects import Currency
from tests.fakes import ASSET_URL_PREFIX, InMemoryBlobStore

EXISTING_IMAGE = f"{ASSET_URL_PREFIX}products/1700000000000-aaaaaaaaaaaaaaaa.png"


def sauce_form(**overrides):
    data = {"name": "Mild Mango", "slug": "mild-mango", "price_cents": "499"}
    data.update(overrides)
    return ProductFormInput.from_mapping(data)


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def uploader(blob_store):
    return AssetUploader(blob_store)


@pytest.fixture
def stored(memory_product_repository):
    product = Product.create(
        name="Mild Mango",
        slug="mild-mango",
        price_cents=499,
        currency=Currency.GBP,
        image_url=EXISTING_IMAGE,
    )
    memory_product_repository.products[product.id] = product
    return product


@pytest.fixture
def edit_session(coordinator, uploader, owner_caller, stored):
    detail = ProductDetailDTO(
        id=stored.id,
        name=stored.name,
        slug=str(stored.slug),
        price_cents=stored.price_cents,
        currency="GBP",
        description="",
        image_url=stored.image_url,
        heat_level=None,
        category_id=None,
        category_name=None,
        brand_id=None,
        brand_name=None,
        chilli_types=[],
    )
    return ProductFormSession.for_product(coordinator, uploader, owner_caller, detail)


@pytest.mark.asyncio
class TestProductFormSession:
    """Tests for ProductFormSession."""

    async def test_edit_keeps_inherited_image(self, edit_session, memory_product_repository, stored):
        result = await edit_session.submit(sauce_form(name="Mild Mango Deluxe"))

        assert result.success
        assert memory_product_repository.products[stored.id].image_url == EXISTING_IMAGE

    async def test_submitted_image_url_is_overridden(self, edit_session, memory_product_repository, stored):
        await edit_session.submit(sauce_form(image_url=f"{ASSET_URL_PREFIX}forged.png"))
        assert memory_product_repository.products[stored.id].image_url == EXISTING_IMAGE

    async def test_upload_replaces_image(self, edit_session, memory_product_repository, blob_store, stored):
        upload = await edit_session.upload_image(UploadedFile(name="label.jpg", content=b"jpeg"))

        assert upload.success
        assert edit_session.image_url == upload.url
        await edit_session.submit(sauce_form())
        assert memory_product_repository.products[stored.id].image_url == upload.url
        assert list(blob_store.objects.values()) == [b"jpeg"]

    async def test_failed_upload_keeps_existing_image(self, edit_session, blob_store):
        blob_store.fail_with = "bucket is read-only"

        upload = await edit_session.upload_image(UploadedFile(name="label.jpg", content=b"jpeg"))

        assert not upload.success
        assert upload.error == "bucket is read-only"
        assert edit_session.image_url == EXISTING_IMAGE

    async def test_remove_image_clears_reference_only(self, edit_session, memory_product_repository, blob_store, stored):
        upload = await edit_session.upload_image(UploadedFile(name="label.png", content=b"png"))
        edit_session.remove_image()

        assert edit_session.image_url is None
        await edit_session.submit(sauce_form())
        assert memory_product_repository.products[stored.id].image_url is None
        assert upload.key in blob_store.objects

    async def test_new_form_creates(self, coordinator, uploader, owner_caller, memory_product_repository):
        session = ProductFormSession(coordinator, uploader, owner_caller)

        result = await session.submit(sauce_form(slug="new-sauce"))

        assert result.success
        assert not session.is_editing
        assert memory_product_repository.mutation_calls == ["create"]

    async def test_overlapping_submit_rejected(self, edit_session, memory_product_repository):
        memory_product_repository.release = asyncio.Event()

        first = asyncio.create_task(edit_session.submit(sauce_form()))
        await asyncio.sleep(0)
        while not edit_session.mutation_in_progress:
            await asyncio.sleep(0)
        second = await edit_session.submit(sauce_form())
        memory_product_repository.release.set()
        first_result = await first

        assert second.code == "SUBMISSION_IN_PROGRESS"
        assert first_result.success
        assert memory_product_repository.mutation_calls == ["update"]
        assert not edit_session.mutation_in_progress

    async def test_flag_released_after_failure(self, edit_session, memory_product_repository):
        result = await edit_session.submit(sauce_form(price_cents="abc"))

        assert result.code == "VALIDATION_ERROR"
        assert not edit_session.mutation_in_progress
        assert edit_session.last_result is result

    async def test_delete_through_session(self, edit_session, memory_product_repository, stored, view_invalidator):
        result = await edit_session.delete()

        assert result.success
        assert stored.id not in memory_product_repository.products
        assert view_invalidator.paths == ["/en/admin/products"]
