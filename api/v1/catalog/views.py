"""
Catalog API views.

These endpoints back the shop front:
- Browse products with search, category filter and sort
- Reveal more products in steps of twelve
- List categories for the filter
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.catalog.serializers import (
    BrowseCatalogRequestSerializer,
    CatalogPageSerializer,
    CategorySerializer,
)
from catalog.application.handlers.product_query_handlers import BrowseCatalogHandler
from catalog.application.queries.browse_catalog import BrowseCatalogQuery
from catalog.domain.query_engine import SortOption
from catalog.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from catalog.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)
from core.instrumentation import Status, StatusCode, get_tracer

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_category_repo = DjangoCategoryRepository()

tracer = get_tracer(__name__)


class BrowseCatalogView(APIView):
    """View for browsing the catalog."""

    @extend_schema(
        operation_id="browse_catalog",
        summary="Browse Catalog",
        description=(
            "Filter the catalog by a case-insensitive search over product name, "
            "description and brand name, and by category id or slug. "
            "Results are revealed twelve at a time: pass `reveals` for the number "
            "of times more products were requested."
        ),
        tags=["Catalog"],
        parameters=[
            OpenApiParameter("search", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("category", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter(
                "sort", str, OpenApiParameter.QUERY, required=False, enum=["recent", "popular"]
            ),
            OpenApiParameter("reveals", int, OpenApiParameter.QUERY, required=False),
        ],
        responses={
            200: CatalogPageSerializer,
            400: {"description": "Bad Request - Invalid query parameters"},
        },
    )
    def get(self, request: Request) -> Response:
        """Browse the catalog."""
        return async_to_sync(self._handle_browse)(request)

    async def _handle_browse(self, request: Request) -> Response:
        """Async handler for browse catalog."""
        with tracer.start_as_current_span("browse_catalog") as span:
            serializer = BrowseCatalogRequestSerializer(data=request.query_params)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return Response({"error": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

            data = serializer.validated_data
            query = BrowseCatalogQuery(
                search_term=data["search"],
                category_filter=data["category"],
                sort_option=SortOption.parse(data["sort"]),
                reveals=data["reveals"],
            )
            span.set_attribute("catalog.search_term", query.search_term)
            span.set_attribute("catalog.category_filter", query.category_filter)
            span.set_attribute("catalog.reveals", query.reveals)

            page = await BrowseCatalogHandler(product_repository=_product_repo).handle(query)

            span.set_attribute("catalog.total_matches", page.total_matches)
            span.set_status(Status(StatusCode.OK))
            return Response(CatalogPageSerializer(page).data, status=status.HTTP_200_OK)


class ListCategoriesView(APIView):
    """View for listing categories."""

    @extend_schema(
        operation_id="list_categories",
        summary="List Categories",
        description="Categories ordered by name, for the shop front filter.",
        tags=["Catalog"],
        responses={200: CategorySerializer(many=True)},
    )
    def get(self, request: Request) -> Response:
        """List categories."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        categories = await _category_repo.list_ordered()
        return Response(CategorySerializer(categories, many=True).data, status=status.HTTP_200_OK)
