"""
Model registry entry point for the brands app.
"""
from brands.infrastructure.models import ApiKey, Brand  # noqa: F401
