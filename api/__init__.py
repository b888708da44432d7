"""
API module - REST endpoints.

This module exposes:
- The public catalog (search, category filter, reveal window)
- The admin console: product CRUD, image uploads, form options, dashboard
"""
