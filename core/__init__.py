"""
Core module for shared domain infrastructure.

This module contains:
- Domain events, exceptions and value objects
- Cache and event bus infrastructure
- Middleware, instrumentation and metrics
"""
