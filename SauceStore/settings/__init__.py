"""
Django settings module.

This package contains environment-specific settings:
- base.py: settings shared across all environments
- dev.py: development environment settings
- test.py: test environment settings
- prod.py: production environment settings
"""
