"""
Audit trail

Every domain event that reaches the bus is written as one structured log
line on the `audit` logger.
"""

import structlog

from shared.domain.base import DomainEvent

audit_logger = structlog.get_logger("audit")


def audit_event(event: DomainEvent) -> None:
    payload = event.to_dict()
    event_type = payload.pop("event_type")
    audit_logger.info(event_type, **payload)


def register_audit_handlers(bus, event_types) -> None:
    for event_type in event_types:
        bus.register_event_handler(event_type, audit_event)
