"""
Product lifecycle coordinator.

Runs admin create, update and delete operations and turns every outcome
into a :class:`ProductActionResult`. Nothing raised by a handler crosses
this boundary as an exception.
"""
import logging
import uuid
from typing import Optional

from brands.application.services.authorization_gate import AuthorizationGate
from brands.ports.brand_repository import BrandRepository
from brands.domain.session import CallerContext
from catalog.application.commands.create_product import CreateProductCommand
from catalog.application.commands.delete_product import DeleteProductCommand
from catalog.application.commands.update_product import UpdateProductCommand
from catalog.application.dto.product_dto import OperationState, ProductActionResult
from catalog.application.handlers.product_lifecycle_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from catalog.application.services.operation_progress import OperationProgress
from catalog.domain.form_input import ProductFormInput
from catalog.domain.validator import ProductValidator
from catalog.ports.product_repository import ProductRepository
from catalog.ports.view_invalidator import ViewInvalidator
from core.domain.exceptions import DomainException
from core.domain.value_objects import StoreMode
from core.metrics import product_mutations_total

logger = logging.getLogger(__name__)


class ProductLifecycleCoordinator:
    """
    Coordinates admin catalog mutations.

    Each operation moves through ``PENDING`` and ``AUTHORIZING`` (then
    ``VALIDATING`` for create and update) and ``PERSISTING`` before it
    ends in ``SUCCEEDED`` or ``FAILED``.
    """

    def __init__(
        self,
        create_handler: CreateProductHandler,
        update_handler: UpdateProductHandler,
        delete_handler: DeleteProductHandler,
    ):
        self.create_handler = create_handler
        self.update_handler = update_handler
        self.delete_handler = delete_handler

    @classmethod
    def build(
        cls,
        authorization_gate: AuthorizationGate,
        validator: ProductValidator,
        product_repository: ProductRepository,
        brand_repository: BrandRepository,
        view_invalidator: ViewInvalidator,
        store_mode: StoreMode,
    ) -> "ProductLifecycleCoordinator":
        """Wire the three lifecycle handlers around shared collaborators."""
        return cls(
            create_handler=CreateProductHandler(
                authorization_gate,
                validator,
                product_repository,
                brand_repository,
                view_invalidator,
                store_mode,
            ),
            update_handler=UpdateProductHandler(
                authorization_gate,
                validator,
                product_repository,
                brand_repository,
                view_invalidator,
                store_mode,
            ),
            delete_handler=DeleteProductHandler(
                authorization_gate, product_repository, view_invalidator
            ),
        )

    async def create(self, caller: CallerContext, form: ProductFormInput) -> ProductActionResult:
        return await self._run(
            "create",
            self.create_handler,
            CreateProductCommand(caller=caller, form=form),
            attempted=form.to_dict(),
        )

    async def update(
        self, caller: CallerContext, product_id: Optional[str], form: ProductFormInput
    ) -> ProductActionResult:
        return await self._run(
            "update",
            self.update_handler,
            UpdateProductCommand(caller=caller, product_id=product_id, form=form),
            attempted=form.with_product_id(product_id).to_dict(),
        )

    async def delete(self, caller: CallerContext, product_id: Optional[str]) -> ProductActionResult:
        return await self._run(
            "delete",
            self.delete_handler,
            DeleteProductCommand(caller=caller, product_id=product_id),
            attempted={"product_id": product_id},
        )

    async def _run(self, operation: str, handler, command, attempted: dict) -> ProductActionResult:
        """
        Run one handler and report its outcome.

        Args:
            operation: ``create``, ``update`` or ``delete``
            handler: Lifecycle handler for the command
            command: Command to handle
            attempted: Submitted input, echoed back on failure

        Returns:
            ProductActionResult
        """
        progress = OperationProgress(operation)
        try:
            outcome = await handler.handle(command, progress)
        except DomainException as e:
            failed_during = progress.state
            progress.advance(OperationState.FAILED)
            product_mutations_total.labels(operation=operation, outcome="failed").inc()
            logger.info(
                "Product %s failed during %s: %s",
                operation,
                failed_during,
                e.message,
                extra={"operation": operation, "error_code": e.code},
            )
            result = ProductActionResult.failed(
                code=e.code,
                message=e.message,
                attempted=attempted,
                failed_during=failed_during,
            )
            result.product_id = _as_uuid(attempted.get("product_id"))
            return result

        progress.advance(OperationState.SUCCEEDED)
        product_mutations_total.labels(operation=operation, outcome="succeeded").inc()
        logger.info(
            "Product %s succeeded for %s",
            operation,
            outcome.product_id,
            extra={"operation": operation, "invalidated_paths": outcome.invalidated_paths},
        )
        return ProductActionResult.succeeded(outcome)


def _as_uuid(raw: Optional[str]) -> Optional[uuid.UUID]:
    if not raw:
        return None
    try:
        return uuid.UUID(str(raw).strip())
    except ValueError:
        return None
