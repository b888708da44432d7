"""
Brands module - brands and shop-owner access.

This module handles:
- Brand entity and repository (port + Django ORM adapter)
- Shop-owner API keys
- The admin authorization gate
"""
