"""
Common Value Objects

Value objects used across the booking, closure and pricing contexts:
- HourRange: A run of consecutive whole hours (start inclusive, end exclusive)
- SlotIdentity: The (date, start time, court) triple that is the unit of contention
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from shared.domain.base import ValueObject


def format_hour(hour: int) -> str:
    """13 -> '13:00'"""
    return f"{hour:02d}:00"


def parse_hour(value: str) -> int:
    """
    '13:00' -> 13

    Only whole hours are accepted; sub-hour times are rejected.
    """
    try:
        hours, minutes = value.split(':')
        hour, minute = int(hours), int(minutes)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time '{value}'. Use HH:00") from None
    if minute != 0 or not 0 <= hour <= 24:
        raise ValueError(f"Invalid time '{value}'. Use HH:00")
    return hour


@dataclass(frozen=True)
class HourRange(ValueObject):
    """
    Hour range value object

    Represents whole hours from start_hour (inclusive) to end_hour (exclusive).
    A booking from 09:00 to 12:00 occupies the 09:00, 10:00 and 11:00 slots.
    """
    start_hour: int
    end_hour: int

    def __post_init__(self):
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"End time ({format_hour(self.end_hour)}) must be after "
                f"start time ({format_hour(self.start_hour)})"
            )

    @classmethod
    def from_times(cls, start_time: str, end_time: str) -> 'HourRange':
        return cls(parse_hour(start_time), parse_hour(end_time))

    @classmethod
    def starting_at(cls, start_time: str, hours: int) -> 'HourRange':
        start_hour = parse_hour(start_time)
        return cls(start_hour, start_hour + hours)

    def start_times(self) -> Iterator[str]:
        for hour in range(self.start_hour, self.end_hour):
            yield format_hour(hour)

    def __len__(self) -> int:
        return self.end_hour - self.start_hour

    def __str__(self):
        return f"{format_hour(self.start_hour)}-{format_hour(self.end_hour)}"


@dataclass(frozen=True)
class SlotIdentity(ValueObject):
    """
    One court for one hour on one day.

    At most one booking and at most one closure may exist per slot.
    """
    date: date
    start_time: str
    court: str

    @property
    def end_time(self) -> str:
        return format_hour(parse_hour(self.start_time) + 1)

    @property
    def key(self) -> tuple[str, str]:
        """Lookup key within a single day."""
        return (self.start_time, self.court)

    def __str__(self):
        return f"{self.court} on {self.date.isoformat()} at {self.start_time}"
