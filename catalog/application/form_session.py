"""
Admin product form session.

One session backs one open product form. It owns the form's image
reference and allows a single mutation in flight at a time.
"""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional, Union

from assets.application.uploader import AssetUploader, UploadedFile, UploadResult
from brands.domain.session import CallerContext
from catalog.application.coordinator import ProductLifecycleCoordinator
from catalog.application.dto.product_dto import ProductActionResult, ProductDetailDTO
from catalog.domain.form_input import ProductFormInput
from core.domain.exceptions import SubmissionInProgressError

logger = logging.getLogger(__name__)


class ProductFormSession:
    """
    State of one create or edit form.

    An edit form starts from the loaded product and inherits its image.
    Uploads replace the image reference only when they succeed, and
    :meth:`remove_image` clears the reference without touching the
    stored blob.
    """

    def __init__(
        self,
        coordinator: ProductLifecycleCoordinator,
        uploader: AssetUploader,
        caller: CallerContext,
        product_id: Optional[Union[uuid.UUID, str]] = None,
        image_url: Optional[str] = None,
    ):
        self.coordinator = coordinator
        self.uploader = uploader
        self.caller = caller
        self.product_id = str(product_id) if product_id else None
        self.image_url = image_url
        self.last_result: Optional[ProductActionResult] = None
        self._mutation_in_progress = False

    @classmethod
    def for_product(
        cls,
        coordinator: ProductLifecycleCoordinator,
        uploader: AssetUploader,
        caller: CallerContext,
        product: ProductDetailDTO,
    ) -> "ProductFormSession":
        """Open an edit form for a loaded product."""
        return cls(coordinator, uploader, caller, product_id=product.id, image_url=product.image_url)

    @property
    def is_editing(self) -> bool:
        return self.product_id is not None

    @property
    def mutation_in_progress(self) -> bool:
        return self._mutation_in_progress

    @asynccontextmanager
    async def _mutation(self):
        if self._mutation_in_progress:
            raise SubmissionInProgressError()
        self._mutation_in_progress = True
        try:
            yield
        finally:
            self._mutation_in_progress = False

    async def upload_image(self, file: UploadedFile) -> UploadResult:
        result = await self.uploader.upload(file)
        if result.success:
            self.image_url = result.url
        return result

    def remove_image(self) -> None:
        self.image_url = None

    async def submit(self, form: ProductFormInput) -> ProductActionResult:
        """
        Submit the form as a create or, for an edit form, an update.

        The submitted ``image_url`` is always replaced by the session's.
        """
        form = form.with_image_url(self.image_url)
        try:
            async with self._mutation():
                if self.is_editing:
                    result = await self.coordinator.update(self.caller, self.product_id, form)
                else:
                    result = await self.coordinator.create(self.caller, form)
        except SubmissionInProgressError as e:
            logger.info("Rejected overlapping submit for %s", self.product_id or "new product")
            return ProductActionResult.failed(code=e.code, message=e.message, attempted=form.to_dict())
        self.last_result = result
        return result

    async def delete(self) -> ProductActionResult:
        try:
            async with self._mutation():
                result = await self.coordinator.delete(self.caller, self.product_id)
        except SubmissionInProgressError as e:
            return ProductActionResult.failed(
                code=e.code, message=e.message, attempted={"product_id": self.product_id}
            )
        self.last_result = result
        return result
