"""
Event handlers for domain events.

These handlers process catalog events for side effects
like audit logging.
"""

import logging

from catalog.domain.events import ProductCreated, ProductDeleted, ProductUpdated
from core.domain.events import DomainEvent, EventHandler
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class AuditLogEventHandler(EventHandler):
    """Writes every catalog mutation to the audit log stream."""

    async def handle(self, event: DomainEvent) -> None:
        logger.info(
            "Audit log: %s - %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": str(event.event_id),
                "event_type": event.event_type,
                "aggregate_id": event.aggregate_id,
                "occurred_at": event.occurred_at.isoformat(),
                "payload": event.to_dict(),
            },
        )


def register_event_handlers() -> None:
    """Subscribe the audit handler to every catalog event."""
    audit_handler = AuditLogEventHandler()
    for event_type in (ProductCreated, ProductUpdated, ProductDeleted):
        event_bus.subscribe(event_type, audit_handler)
    logger.info("Event handlers registered")
