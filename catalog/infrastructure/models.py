"""
Catalog models: categories, chilli types and products.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models


class Category(models.Model):
    """Sauce category (fruity, smoky, extreme, ...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class ChilliType(models.Model):
    """Chilli variety, with an optional heat rating."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=100, unique=True)
    heat_level = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        db_table = "chilli_types"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    A sauce for sale. Slugs are unique across the whole store.
    """

    CURRENCY_CHOICES = [
        ("GBP", "GBP"),
        ("EUR", "EUR"),
        ("USD", "USD"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, help_text="Product display name")
    slug = models.SlugField(max_length=150, unique=True, help_text="URL-safe identifier")
    price_cents = models.PositiveIntegerField(validators=[MinValueValidator(0)])
    currency = models.CharField(max_length=3, choices=CURRENCY_CHOICES, default="GBP")
    description = models.TextField(blank=True, default="")
    image_url = models.CharField(max_length=500, blank=True, null=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    brand = models.ForeignKey(
        "brands.Brand",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="products",
    )
    heat_level = models.CharField(max_length=50, blank=True, null=True)
    chilli_types = models.ManyToManyField(ChilliType, blank=True, related_name="products")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["brand", "slug"]),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(currency__in=["GBP", "EUR", "USD"]),
                name="products_currency_supported",
            ),
        ]

    def __str__(self):
        return self.name
