"""
Unit of Work Pattern

Manages database transactions and ensures that domain events
are published only after a successful commit.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __init__(self, bus=None):
        self._events: List[DomainEvent] = []
        self._bus = bus

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    def add_event(self, event: DomainEvent):
        """Queue an event for publication after commit"""
        self._events.append(event)

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    def rollback(self):
        """Rollback changes and discard events"""
        if self._events:
            logger.warning("Rolling back transaction, discarding %d events", len(self._events))
        self._events.clear()

    def _drain_events(self) -> List[DomainEvent]:
        events = self._events.copy()
        self._events.clear()
        return events

    def _publish_events(self, events: List[DomainEvent]):
        """
        Publish collected events to the message bus

        Failures are logged; the data is already committed.
        """
        if self._bus is None:
            from shared.application.message_bus import message_bus

            self._bus = message_bus

        logger.debug("Publishing %d domain events after commit", len(events))
        try:
            self._bus.publish_events(events)
        except Exception:
            logger.error("Error publishing events", exc_info=True)


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Every write issued inside the block shares one database transaction,
    so a batch insert that fails half way leaves nothing behind.

    Usage:
        with DjangoUnitOfWork() as uow:
            bookings = booking_repo.insert_batch(units)
            uow.add_event(BookingsReserved(...))
        # Events are published after commit
    """

    def __init__(self, bus=None):
        super().__init__(bus)
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            if self._transaction:
                self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def commit(self):
        """
        Schedule event publishing with transaction.on_commit() so that
        events only go out once the database commit succeeds.
        """
        events = self._drain_events()
        if events:
            transaction.on_commit(lambda: self._publish_events(events))
