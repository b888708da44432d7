"""
Admin API views.

These endpoints back the shop owner's console:
- List, create, edit and delete products
- Upload product images
- Load form choices and dashboard counters

Every endpoint passes the caller's credentials through the
authorization gate. Mutations go through the product lifecycle
coordinator and report failures with the submitted input echoed back.

Each mutating request opens its own product form session. The session
guard against overlapping submits therefore covers one request, not
concurrent requests for the same product; those are ordered by the
database, and the last write wins.
"""

import uuid
from typing import Optional

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import status_for_code
from api.v1.admin.serializers import (
    DashboardStatsSerializer,
    FormOptionsSerializer,
    ImageUploadRequestSerializer,
    ImageUploadResponseSerializer,
    ProductActionErrorSerializer,
    ProductActionResultSerializer,
    ProductFormRequestSerializer,
)
from api.v1.catalog.serializers import ProductDetailSerializer
from assets.application.uploader import AssetUploader, UploadedFile
from assets.infrastructure.django_blob_store import DjangoBlobStore
from brands.application.services.authorization_gate import AuthorizationGate
from brands.domain.session import AuthorizedSession, CallerContext
from brands.infrastructure.django_session_resolver import DjangoSessionResolver
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from catalog.application.coordinator import ProductLifecycleCoordinator
from catalog.application.dto.product_dto import ProductActionResult, ProductDetailDTO
from catalog.application.form_session import ProductFormSession
from catalog.application.handlers.product_query_handlers import (
    GetDashboardStatsHandler,
    GetFormOptionsHandler,
    GetProductHandler,
)
from catalog.application.queries.get_dashboard_stats import GetDashboardStatsQuery
from catalog.application.queries.get_form_options import GetFormOptionsQuery
from catalog.application.queries.get_product import GetProductQuery
from catalog.application.services.view_cache_service import ViewCacheService
from catalog.domain.form_input import ProductFormInput
from catalog.domain.validator import ProductValidator
from catalog.infrastructure.celery_view_invalidator import CeleryViewInvalidator
from catalog.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from catalog.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from catalog.infrastructure.store_mode import load_store_mode
from core.domain.exceptions import AuthorizationError, ProductNotFoundError, UploadError
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_brand_repo = DjangoBrandRepository()
_product_repo = DjangoProductRepository()
_category_repo = DjangoCategoryRepository()
_session_resolver = DjangoSessionResolver()
_view_invalidator = CeleryViewInvalidator()

tracer = get_tracer(__name__)

ACTION_RESPONSES = {
    400: {"description": "Bad Request - Missing product identifier"},
    401: {"description": "Unauthorized - Missing or non-owner API key"},
    404: {"description": "Not Found"},
    409: {"description": "Conflict - Store rejected the change or a submit is in flight"},
    422: {"description": "Unprocessable - Product validation failed"},
}


def _caller(request: Request, locale: str) -> CallerContext:
    return CallerContext(api_key=getattr(request, "caller_api_key", None), locale=locale)


async def _authorize(request: Request, locale: str) -> AuthorizedSession:
    return await AuthorizationGate(_session_resolver).authorize(_caller(request, locale))


async def _coordinator() -> ProductLifecycleCoordinator:
    store_mode = await load_store_mode(_brand_repo)
    return ProductLifecycleCoordinator.build(
        authorization_gate=AuthorizationGate(_session_resolver),
        validator=ProductValidator(asset_url_prefix=settings.ASSET_URL_PREFIX),
        product_repository=_product_repo,
        brand_repository=_brand_repo,
        view_invalidator=_view_invalidator,
        store_mode=store_mode,
    )


def _uploader() -> AssetUploader:
    return AssetUploader(DjangoBlobStore(), prefix=settings.ASSET_UPLOAD_PREFIX)


def _parse_form(request: Request):
    serializer = ProductFormRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return None, Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)
    return ProductFormInput.from_mapping(serializer.validated_data), None


def _action_response(result: ProductActionResult, span, success_status: int) -> Response:
    span.set_attribute("operation.state", str(result.state))
    if result.success:
        span.set_attribute("product.id", str(result.product_id))
        span.set_status(Status(StatusCode.OK))
        return Response(ProductActionResultSerializer(result).data, status=success_status)

    span.set_attribute("error", result.code)
    span.set_status(Status(StatusCode.ERROR, result.message))
    return Response(ProductActionErrorSerializer(result).data, status=status_for_code(result.code))


def _product_uuid(product_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(product_id)
    except ValueError:
        raise ProductNotFoundError(f"Product {product_id} not found") from None


class ProductListView(APIView):
    """View for the admin product listing."""

    parser_classes = [JSONParser, FormParser, MultiPartParser]

    @extend_schema(
        operation_id="admin_list_products",
        summary="List Products",
        description="All products, newest first. Cached per locale until a product changes.",
        tags=["Admin"],
        responses={
            200: ProductDetailSerializer(many=True),
            401: {"description": "Unauthorized - Missing or non-owner API key"},
        },
    )
    def get(self, request: Request, locale: str) -> Response:
        """List products."""
        return async_to_sync(self._handle_list)(request, locale)

    async def _handle_list(self, request: Request, locale: str) -> Response:
        with tracer.start_as_current_span("admin_list_products") as span:
            await _authorize(request, locale)

            path = ViewCacheService.listing_path(locale)
            cached = await ViewCacheService.get_view(path)
            if cached is not None:
                span.set_attribute("cache.hit", True)
                return Response(cached, status=status.HTTP_200_OK)

            span.set_attribute("cache.hit", False)
            products = await _product_repo.list_catalog()
            data = ProductDetailSerializer(
                [ProductDetailDTO.from_catalog(product) for product in products], many=True
            ).data
            await ViewCacheService.set_view(path, data)
            span.set_attribute("products.count", len(products))
            span.set_status(Status(StatusCode.OK))
            return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="admin_create_product",
        summary="Create Product",
        description=(
            "Create a product from the admin form. In single-store mode the product "
            "is always attached to the store's brand; in multi-store mode a brand is required. "
            "`image_url` must come from the image upload endpoint."
        ),
        tags=["Admin"],
        request=ProductFormRequestSerializer,
        responses={201: ProductActionResultSerializer, **ACTION_RESPONSES},
    )
    def post(self, request: Request, locale: str) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create)(request, locale)

    async def _handle_create(self, request: Request, locale: str) -> Response:
        with tracer.start_as_current_span("admin_create_product") as span:
            span.set_attribute("operation", "create_product")
            form, error_response = _parse_form(request)
            if error_response is not None:
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return error_response

            session = ProductFormSession(
                await _coordinator(), _uploader(), _caller(request, locale), image_url=form.image_url
            )
            result = await session.submit(form)
            return _action_response(result, span, status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="admin_delete_product_by_form",
        summary="Delete Product (form)",
        description="Delete the product named by the `product_id` form field.",
        tags=["Admin"],
        responses={200: ProductActionResultSerializer, **ACTION_RESPONSES},
    )
    def delete(self, request: Request, locale: str) -> Response:
        """Delete the product named in the request body."""
        return async_to_sync(self._handle_delete)(request, locale)

    async def _handle_delete(self, request: Request, locale: str) -> Response:
        with tracer.start_as_current_span("admin_delete_product") as span:
            raw_id = request.data.get("product_id") if hasattr(request.data, "get") else None
            session = ProductFormSession(
                await _coordinator(),
                _uploader(),
                _caller(request, locale),
                product_id=str(raw_id) if raw_id else None,
            )
            result = await session.delete()
            return _action_response(result, span, status.HTTP_200_OK)


class ProductDetailView(APIView):
    """
    View for one product in the admin console.

    Detail responses are cached under the canonical form of the product
    id, the same path an update invalidates.
    """

    parser_classes = [JSONParser, FormParser, MultiPartParser]

    @extend_schema(
        operation_id="admin_get_product",
        summary="Get Product",
        description="Load a product for the edit form.",
        tags=["Admin"],
        responses={
            200: ProductDetailSerializer,
            401: {"description": "Unauthorized - Missing or non-owner API key"},
            404: {"description": "Not Found"},
        },
    )
    def get(self, request: Request, locale: str, product_id: str) -> Response:
        """Get a product."""
        return async_to_sync(self._handle_get)(request, locale, product_id)

    async def _handle_get(self, request: Request, locale: str, product_id: str) -> Response:
        with tracer.start_as_current_span("admin_get_product") as span:
            await _authorize(request, locale)
            product_uuid = _product_uuid(product_id)
            span.set_attribute("product.id", str(product_uuid))

            path = ViewCacheService.detail_path(locale, product_uuid)
            cached = await ViewCacheService.get_view(path)
            if cached is not None:
                span.set_attribute("cache.hit", True)
                return Response(cached, status=status.HTTP_200_OK)

            span.set_attribute("cache.hit", False)
            product = await GetProductHandler(_product_repo).handle(
                GetProductQuery(product_id=product_uuid)
            )
            data = ProductDetailSerializer(product).data
            await ViewCacheService.set_view(path, data)
            span.set_status(Status(StatusCode.OK))
            return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="admin_update_product",
        summary="Update Product",
        description=(
            "Overwrite a product from the admin form. When `image_url` is omitted the "
            "product keeps its current image; send it empty to remove the image."
        ),
        tags=["Admin"],
        request=ProductFormRequestSerializer,
        responses={200: ProductActionResultSerializer, **ACTION_RESPONSES},
    )
    def put(self, request: Request, locale: str, product_id: str) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update)(request, locale, product_id)

    async def _handle_update(self, request: Request, locale: str, product_id: str) -> Response:
        with tracer.start_as_current_span("admin_update_product") as span:
            span.set_attribute("operation", "update_product")
            span.set_attribute("product.id", product_id)
            form, error_response = _parse_form(request)
            if error_response is not None:
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return error_response

            image_url = form.image_url
            if "image_url" not in request.data:
                image_url = await self._saved_image(request, locale, product_id)

            session = ProductFormSession(
                await _coordinator(),
                _uploader(),
                _caller(request, locale),
                product_id=product_id,
                image_url=image_url,
            )
            if not image_url:
                session.remove_image()
            result = await session.submit(form)
            return _action_response(result, span, status.HTTP_200_OK)

    async def _saved_image(self, request: Request, locale: str, product_id: str) -> Optional[str]:
        """
        Image of the saved product, read only for an authorized caller.

        A refused caller gets no image; the coordinator then reports the
        refusal with the attempted input echoed back.
        """
        try:
            await _authorize(request, locale)
        except AuthorizationError:
            return None
        try:
            product = await _product_repo.find_by_id(uuid.UUID(product_id))
        except ValueError:
            return None
        return product.image_url if product else None

    @extend_schema(
        operation_id="admin_delete_product",
        summary="Delete Product",
        description="Delete a product. The listing view is invalidated.",
        tags=["Admin"],
        responses={200: ProductActionResultSerializer, **ACTION_RESPONSES},
    )
    def delete(self, request: Request, locale: str, product_id: str) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete)(request, locale, product_id)

    async def _handle_delete(self, request: Request, locale: str, product_id: str) -> Response:
        with tracer.start_as_current_span("admin_delete_product") as span:
            span.set_attribute("product.id", product_id)
            session = ProductFormSession(
                await _coordinator(), _uploader(), _caller(request, locale), product_id=product_id
            )
            result = await session.delete()
            return _action_response(result, span, status.HTTP_200_OK)


class ImageUploadView(APIView):
    """View for uploading product images."""

    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        operation_id="admin_upload_image",
        summary="Upload Image",
        description=(
            "Store a product image under a unique key and return its public URL, "
            "to be submitted as the product form's `image_url`."
        ),
        tags=["Admin"],
        request={"multipart/form-data": ImageUploadRequestSerializer},
        responses={
            201: ImageUploadResponseSerializer,
            400: {"description": "Bad Request - No file"},
            401: {"description": "Unauthorized - Missing or non-owner API key"},
            502: {"description": "Bad Gateway - Blob store rejected the upload"},
        },
    )
    def post(self, request: Request, locale: str) -> Response:
        """Upload an image."""
        return async_to_sync(self._handle_upload)(request, locale)

    async def _handle_upload(self, request: Request, locale: str) -> Response:
        with tracer.start_as_current_span("admin_upload_image") as span:
            await _authorize(request, locale)

            serializer = ImageUploadRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            upload = serializer.validated_data["file"]
            span.set_attribute("upload.name", upload.name)
            span.set_attribute("upload.size", upload.size)
            result = await _uploader().upload(
                UploadedFile(
                    name=upload.name,
                    content=upload.read(),
                    content_type=getattr(upload, "content_type", "") or "",
                )
            )
            if not result.success:
                span.set_status(Status(StatusCode.ERROR, result.error))
                raise UploadError(result.error)

            span.set_status(Status(StatusCode.OK))
            return Response(
                ImageUploadResponseSerializer(result).data, status=status.HTTP_201_CREATED
            )


class FormOptionsView(APIView):
    """View for the admin product form's choices."""

    @extend_schema(
        operation_id="admin_form_options",
        summary="Form Options",
        description=(
            "Categories, brands and currencies for the product form. "
            "`brand_field_visible` is true only in multi-store mode."
        ),
        tags=["Admin"],
        responses={200: FormOptionsSerializer},
    )
    def get(self, request: Request, locale: str) -> Response:
        """Get form options."""
        return async_to_sync(self._handle_options)(request, locale)

    async def _handle_options(self, request: Request, locale: str) -> Response:
        await _authorize(request, locale)
        handler = GetFormOptionsHandler(
            category_repository=_category_repo,
            brand_repository=_brand_repo,
            store_mode=await load_store_mode(_brand_repo),
        )
        options = await handler.handle(GetFormOptionsQuery())
        return Response(FormOptionsSerializer(options).data, status=status.HTTP_200_OK)


class DashboardView(APIView):
    """View for the admin dashboard."""

    @extend_schema(
        operation_id="admin_dashboard",
        summary="Dashboard",
        description="Counts of products, brands and categories.",
        tags=["Admin"],
        responses={200: DashboardStatsSerializer},
    )
    def get(self, request: Request, locale: str) -> Response:
        """Get dashboard counters."""
        return async_to_sync(self._handle_dashboard)(request, locale)

    async def _handle_dashboard(self, request: Request, locale: str) -> Response:
        await _authorize(request, locale)
        handler = GetDashboardStatsHandler(
            product_repository=_product_repo,
            brand_repository=_brand_repo,
            category_repository=_category_repo,
        )
        stats = await handler.handle(GetDashboardStatsQuery())
        return Response(DashboardStatsSerializer(stats).data, status=status.HTTP_200_OK)
