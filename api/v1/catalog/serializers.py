"""
Serializers for the public catalog endpoints.
"""

from rest_framework import serializers

from catalog.domain.query_engine import SortOption


class BrowseCatalogRequestSerializer(serializers.Serializer):
    """Serializer for shop front query parameters."""

    search = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, default="")
    sort = serializers.ChoiceField(
        choices=[option.value for option in SortOption],
        required=False,
        default=SortOption.RECENT.value,
    )
    reveals = serializers.IntegerField(required=False, default=0, min_value=0)


class ProductDetailSerializer(serializers.Serializer):
    """Serializer for ProductDetailDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    slug = serializers.CharField()
    price_cents = serializers.IntegerField()
    currency = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    image_url = serializers.CharField(allow_null=True)
    heat_level = serializers.CharField(allow_null=True)
    category_id = serializers.UUIDField(allow_null=True)
    category_name = serializers.CharField(allow_null=True)
    brand_id = serializers.UUIDField(allow_null=True)
    brand_name = serializers.CharField(allow_null=True)
    chilli_types = serializers.ListField(child=serializers.CharField())


class CatalogPageSerializer(serializers.Serializer):
    """Serializer for CatalogPageDTO."""

    products = ProductDetailSerializer(many=True)
    total_matches = serializers.IntegerField()
    displayed_count = serializers.IntegerField()
    has_more = serializers.BooleanField()
    is_empty = serializers.BooleanField(read_only=True)
    sort_option = serializers.CharField()


class CategorySerializer(serializers.Serializer):
    """Serializer for a category option."""

    id = serializers.UUIDField()
    name = serializers.CharField()
