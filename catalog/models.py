"""
Model registry entry point for the catalog app.
"""
from catalog.infrastructure.models import Category, ChilliType, Product  # noqa: F401
