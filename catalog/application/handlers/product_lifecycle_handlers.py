"""
Product lifecycle handlers.

Handlers for create, update, and delete product commands. Each one
authorizes the caller first and then issues exactly one store mutation.
Create and update also check that the
resolved brand exists. Failures are raised as domain exceptions.
"""
import uuid
from typing import List, Optional

from brands.application.services.authorization_gate import AuthorizationGate
from brands.ports.brand_repository import BrandRepository
from catalog.application.commands.create_product import CreateProductCommand
from catalog.application.commands.delete_product import DeleteProductCommand
from catalog.application.commands.update_product import UpdateProductCommand
from catalog.application.dto.product_dto import MutationOutcome, OperationState
from catalog.application.services.operation_progress import OperationProgress
from catalog.application.services.view_cache_service import ViewCacheService
from catalog.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from catalog.domain.product import Product
from catalog.domain.validator import (
    STORE_BRAND_MISSING,
    UNKNOWN_BRAND,
    ProductValidator,
    ValidatedProduct,
)
from catalog.ports.product_repository import ProductRepository
from catalog.ports.view_invalidator import ViewInvalidator
from core.domain.exceptions import (
    MissingProductIdentifierError,
    ProductNotFoundError,
    ProductValidationError,
)
from core.domain.value_objects import StoreMode
from core.infrastructure.events import event_bus


def parse_product_id(raw: Optional[str]) -> uuid.UUID:
    """
    Parse the product identifier submitted with an update or delete.

    Raises:
        MissingProductIdentifierError: If no identifier was submitted
        ProductNotFoundError: If the identifier cannot name a product
    """
    value = (raw or "").strip()
    if not value:
        raise MissingProductIdentifierError()
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ProductNotFoundError(f"Product {value} not found") from None


def build_product(validated: ValidatedProduct, product_id: Optional[uuid.UUID] = None) -> Product:
    try:
        return Product.create(
            name=validated.name,
            slug=validated.slug,
            price_cents=validated.price_cents,
            currency=validated.currency,
            description=validated.description,
            image_url=validated.image_url,
            category_id=validated.category_id,
            brand_id=validated.brand_id,
            product_id=product_id,
        )
    except ValueError as e:
        raise ProductValidationError(str(e)) from e


class _ProductMutationHandler:
    def __init__(
        self,
        authorization_gate: AuthorizationGate,
        product_repository: ProductRepository,
        view_invalidator: ViewInvalidator,
    ):
        """Initialize handler with its collaborators."""
        self.authorization_gate = authorization_gate
        self.product_repository = product_repository
        self.view_invalidator = view_invalidator

    def _invalidate(self, paths: List[str]) -> List[str]:
        for path in paths:
            self.view_invalidator.invalidate(path)
        return paths


class _BrandedMutationHandler(_ProductMutationHandler):
    def __init__(
        self,
        authorization_gate: AuthorizationGate,
        validator: ProductValidator,
        product_repository: ProductRepository,
        brand_repository: BrandRepository,
        view_invalidator: ViewInvalidator,
        store_mode: StoreMode,
    ):
        super().__init__(authorization_gate, product_repository, view_invalidator)
        self.validator = validator
        self.brand_repository = brand_repository
        self.store_mode = store_mode

    async def _check_brand(self, validated: ValidatedProduct) -> None:
        """
        Reject products whose brand is not in the store.

        Raises:
            ProductValidationError: If single mode has no brand, or the
                brand id names no brand
        """
        if validated.brand_id is None:
            raise ProductValidationError(STORE_BRAND_MISSING)
        if await self.brand_repository.find_by_id(validated.brand_id) is None:
            raise ProductValidationError(f"{UNKNOWN_BRAND}: {validated.brand_id}")


class CreateProductHandler(_BrandedMutationHandler):
    """Handler for CreateProductCommand."""

    async def handle(
        self, command: CreateProductCommand, progress: Optional[OperationProgress] = None
    ) -> MutationOutcome:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand
            progress: Optional stage tracker

        Returns:
            MutationOutcome with the new product's id

        Raises:
            AuthorizationError: If the caller is not the shop owner
            ProductValidationError: If the form is invalid for the store mode
            PersistenceError: If the store rejects the insert
        """
        progress = progress or OperationProgress("create")

        progress.advance(OperationState.AUTHORIZING)
        session = await self.authorization_gate.authorize(command.caller)

        progress.advance(OperationState.VALIDATING)
        validated = self.validator.validate(command.form, self.store_mode)
        await self._check_brand(validated)
        product = build_product(validated)

        progress.advance(OperationState.PERSISTING)
        saved = await self.product_repository.create(product)

        paths = self._invalidate([ViewCacheService.listing_path(session.locale)])
        await event_bus.publish(
            ProductCreated(product_id=saved.id, key_prefix=session.key_prefix, slug=str(saved.slug))
        )
        return MutationOutcome(product_id=saved.id, invalidated_paths=paths)


class UpdateProductHandler(_BrandedMutationHandler):
    """Handler for UpdateProductCommand."""

    async def handle(
        self, command: UpdateProductCommand, progress: Optional[OperationProgress] = None
    ) -> MutationOutcome:
        """
        Handle update product command.

        Raises:
            AuthorizationError: If the caller is not the shop owner
            MissingProductIdentifierError: If no product id was submitted
            ProductValidationError: If the form is invalid for the store mode
            ProductNotFoundError: If no product has the id
            PersistenceError: If the store rejects the change
        """
        progress = progress or OperationProgress("update")

        progress.advance(OperationState.AUTHORIZING)
        session = await self.authorization_gate.authorize(command.caller)
        product_id = parse_product_id(command.product_id)

        progress.advance(OperationState.VALIDATING)
        validated = self.validator.validate(command.form, self.store_mode)
        await self._check_brand(validated)
        product = build_product(validated, product_id=product_id)

        progress.advance(OperationState.PERSISTING)
        if not await self.product_repository.update(product):
            raise ProductNotFoundError(f"Product {product_id} not found")

        paths = self._invalidate(
            [
                ViewCacheService.listing_path(session.locale),
                ViewCacheService.detail_path(session.locale, product_id),
            ]
        )
        await event_bus.publish(
            ProductUpdated(product_id=product_id, key_prefix=session.key_prefix, slug=str(product.slug))
        )
        return MutationOutcome(product_id=product_id, invalidated_paths=paths)


class DeleteProductHandler(_ProductMutationHandler):
    """Handler for DeleteProductCommand."""

    async def handle(
        self, command: DeleteProductCommand, progress: Optional[OperationProgress] = None
    ) -> MutationOutcome:
        """
        Handle delete product command.

        Raises:
            AuthorizationError: If the caller is not the shop owner
            MissingProductIdentifierError: If no product id was submitted
            ProductNotFoundError: If no product has the id
            PersistenceError: If the store rejects the delete
        """
        progress = progress or OperationProgress("delete")

        progress.advance(OperationState.AUTHORIZING)
        session = await self.authorization_gate.authorize(command.caller)
        product_id = parse_product_id(command.product_id)

        progress.advance(OperationState.PERSISTING)
        if not await self.product_repository.delete(product_id):
            raise ProductNotFoundError(f"Product {product_id} not found")

        paths = self._invalidate([ViewCacheService.listing_path(session.locale)])
        await event_bus.publish(ProductDeleted(product_id=product_id, key_prefix=session.key_prefix))
        return MutationOutcome(product_id=product_id, invalidated_paths=paths)
