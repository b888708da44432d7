"""
Domain events base classes.

Domain events represent something that happened in the domain.
They decouple the catalog workflow from side effects such as audit logging.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict
from uuid import UUID


class DomainEvent(ABC):
    """
    Base class for all domain events.

    Domain events are immutable records of something that
    happened in the domain.
    """

    def __init__(
        self,
        event_id: UUID,
        occurred_at: datetime,
        aggregate_id: str,
        event_type: str,
    ):
        self.event_id = event_id
        self.occurred_at = occurred_at
        self.aggregate_id = aggregate_id
        self.event_type = event_type

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
        }


class EventHandler(ABC):
    """Base class for event handlers."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        """
        Handle a domain event.

        Args:
            event: The domain event to handle
        """
        pass


class EventBus(ABC):
    """
    Abstract event bus for publishing and subscribing to domain events.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event.

        Args:
            event: The domain event to publish
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """
        Subscribe to a domain event type.

        Args:
            event_type: The type of event to subscribe to
            handler: The handler to call when event is published
        """
        pass
