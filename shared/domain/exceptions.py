"""
Domain exceptions

Services raise these; the API exception handler turns them into the
`{"success": false, "message": ...}` envelope with the carried status code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from shared.domain.value_objects import SlotIdentity


class DomainError(Exception):
    """Base class for errors the API reports to the caller."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"message": self.message}


class InvalidRequest(DomainError):
    """Malformed or out-of-range input that passed field validation."""


class NotFound(DomainError):
    status_code = 404


class SlotUnavailable(DomainError):
    """A requested slot is already booked or closed."""

    def __init__(self, slot: "SlotIdentity", reason: str = "booked"):
        self.slot = slot
        self.reason = reason
        if reason == "closed":
            message = f"{slot.court} is closed at {slot.start_time}"
        else:
            message = f"{slot.court} is already booked at {slot.start_time}"
        super().__init__(message)

    def to_payload(self) -> dict:
        return {
            "message": self.message,
            "slot": {
                "date": self.slot.date.isoformat(),
                "startTime": self.slot.start_time,
                "courtId": self.slot.court,
                "reason": self.reason,
            },
        }


class ClosureConflict(DomainError):
    """The slot already carries a closure."""

    def __init__(self, slot: "SlotIdentity"):
        self.slot = slot
        super().__init__(f"{slot.court} is already closed at {slot.start_time}")


class DuplicateSlot(Exception):
    """
    Raised by repositories when the store rejects a write on its uniqueness
    constraint. `slot` is the first conflicting slot when it can be determined.
    """

    def __init__(self, slot: "SlotIdentity | None" = None):
        self.slot = slot
        super().__init__(f"Slot already taken: {slot}" if slot else "Slot already taken")
