"""
Prometheus metrics for the storefront.

Custom metrics for catalog behaviour and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Catalog metrics
product_mutations_total = Counter(
    "product_mutations_total",
    "Admin product mutations by operation and outcome",
    ["operation", "outcome"],
)

catalog_queries_total = Counter(
    "catalog_queries_total",
    "Shopper catalog filter evaluations",
    ["sort_option"],
)

view_invalidations_total = Counter(
    "view_invalidations_total",
    "Invalidation signals sent for cached views",
)

# Asset metrics
asset_uploads_total = Counter(
    "asset_uploads_total",
    "Image uploads by outcome",
    ["outcome"],
)

# Cache metrics
cache_hits_total = Counter(
    "cache_hits_total",
    "Total cache hits",
    ["cache_key"],
)

cache_misses_total = Counter(
    "cache_misses_total",
    "Total cache misses",
    ["cache_key"],
)
