"""
Celery implementation of the ViewInvalidator port.
"""
import logging

from catalog.ports.view_invalidator import ViewInvalidator
from core.metrics import view_invalidations_total

logger = logging.getLogger(__name__)


class CeleryViewInvalidator(ViewInvalidator):
    """
    Queues a cache drop per path and returns immediately.

    A broker outage is logged; the mutation that triggered the signal
    has already been committed and the cached view expires on its own.
    """

    def invalidate(self, path: str) -> None:
        from catalog.tasks import invalidate_view_task

        view_invalidations_total.inc()
        try:
            invalidate_view_task.delay(path)
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Could not queue invalidation of %s: %s", path, e, exc_info=True)
