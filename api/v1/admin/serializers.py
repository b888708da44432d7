"""
Serializers for admin console endpoints.
"""

from rest_framework import serializers


class ProductFormRequestSerializer(serializers.Serializer):
    """
    Serializer for the admin product form.

    Every field is accepted as text; the product validator decides what
    is missing or malformed.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    slug = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    price_cents = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    currency = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    category_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    brand_id = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ImageUploadRequestSerializer(serializers.Serializer):
    """Serializer for image upload request."""

    file = serializers.FileField(required=True)


class ImageUploadResponseSerializer(serializers.Serializer):
    """Serializer for UploadResult."""

    url = serializers.CharField()
    key = serializers.CharField()


class ProductActionResultSerializer(serializers.Serializer):
    """Serializer for a successful ProductActionResult."""

    success = serializers.BooleanField()
    state = serializers.CharField()
    product_id = serializers.UUIDField(allow_null=True)
    invalidated_paths = serializers.ListField(child=serializers.CharField())


class ProductActionErrorSerializer(serializers.Serializer):
    """Serializer for a failed ProductActionResult."""

    success = serializers.BooleanField()
    state = serializers.CharField()
    failed_during = serializers.CharField(allow_null=True)
    attempted = serializers.DictField(child=serializers.CharField(allow_null=True), allow_null=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["error"] = {"code": instance.code, "message": instance.message}
        return data


class OptionSerializer(serializers.Serializer):
    """Serializer for OptionDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()


class FormOptionsSerializer(serializers.Serializer):
    """Serializer for FormOptionsDTO."""

    categories = OptionSerializer(many=True)
    brands = OptionSerializer(many=True)
    currencies = serializers.ListField(child=serializers.CharField())
    brand_field_visible = serializers.BooleanField()
    store_mode = serializers.CharField()


class DashboardStatsSerializer(serializers.Serializer):
    """Serializer for DashboardStatsDTO."""

    products = serializers.IntegerField()
    brands = serializers.IntegerField()
    categories = serializers.IntegerField()
