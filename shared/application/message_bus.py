"""
Message Bus

Routes domain events to their handlers. Events are fanned out to every
handler registered for their type.
"""

from typing import Callable, Dict, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class MessageBus:
    """Message bus for domain events (1:N event -> handlers)"""

    def __init__(self):
        self._event_handlers: Dict[Type[DomainEvent], List[Callable]] = {}

    def register_event_handler(
        self,
        event_type: Type[DomainEvent],
        handler: Callable[[DomainEvent], None]
    ):
        """
        Register an event handler

        Multiple handlers can be registered for the same event type;
        registering the same handler twice is ignored.
        """
        handlers = self._event_handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug("Registered event handler for %s", event_type.__name__)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Callable]:
        return list(self._event_handlers.get(event_type, []))

    def publish_events(self, events: List[DomainEvent]):
        """
        Publish domain events

        Errors in handlers are logged but don't stop other handlers.
        """
        for event in events:
            handlers = self._event_handlers.get(type(event), [])

            if not handlers:
                logger.debug("No handlers registered for event %s", event.event_type)
                continue

            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.error(
                        "Error in event handler %s for event %s",
                        getattr(handler, '__name__', handler),
                        event.event_type,
                        exc_info=True,
                    )


# Global message bus instance
message_bus = MessageBus()
