"""
Catalog module - products, the shopper catalog and the admin workflow.

This module handles:
- Product, Category and ChilliType entities
- The catalog query engine used by the shop front
- Product validation and the create/update/delete workflow
- Caching and invalidation of rendered admin views
"""
