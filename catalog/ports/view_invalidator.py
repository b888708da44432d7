"""
View invalidator port (interface).

After a successful catalog mutation the rendered views that showed the
old data are marked stale, keyed by their path.
"""
from abc import ABC, abstractmethod


class ViewInvalidator(ABC):
    """Fire-and-forget invalidation of cached views."""

    @abstractmethod
    def invalidate(self, path: str) -> None:
        """
        Signal that the view cached for ``path`` is stale.

        Implementations must not block on the invalidation completing.

        Args:
            path: Rendered path, e.g. ``/en/admin/products``
        """
        pass
