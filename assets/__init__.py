"""
Assets module - product image uploads.

This module handles:
- Naming uploaded images with collision-resistant keys
- Writing image bytes to the blob store
- Returning the public URL of an uploaded image
"""
