"""
Domain models for working hours, slots and booking results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .exceptions import ConfigError


def format_time_12h(hour: int, minute: int) -> str:
    """
    Format a 24-hour clock time as a 12-hour label.

    Example: (0, 0) -> "12:00 AM", (12, 0) -> "12:00 PM", (13, 30) -> "1:30 PM"
    """
    period = "PM" if hour >= 12 else "AM"
    if hour == 0:
        display_hour = 12
    elif hour > 12:
        display_hour = hour - 12
    else:
        display_hour = hour
    return f"{display_hour}:{minute:02d} {period}"


def format_slot_id(hour: int, minute: int) -> str:
    """Format a canonical slot id: zero-padded 24-hour HH:MM."""
    return f"{hour:02d}:{minute:02d}"


@dataclass(frozen=True)
class WorkingHours:
    """
    Immutable working-hours configuration for the slot grid.

    Invariant: 0 <= start_hour < end_hour <= 24 and slot_duration_minutes
    is positive and divides the working window evenly.
    """
    start_hour: int = 9
    end_hour: int = 17
    slot_duration_minutes: int = 30

    def __post_init__(self):
        for name in ("start_hour", "end_hour", "slot_duration_minutes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ConfigError(
                f"Working hours must satisfy 0 <= start < end <= 24, "
                f"got start={self.start_hour} end={self.end_hour}"
            )
        if self.slot_duration_minutes <= 0:
            raise ConfigError(
                f"slot_duration_minutes must be greater than zero, got {self.slot_duration_minutes}"
            )
        window = self.end_minute - self.start_minute
        if window % self.slot_duration_minutes != 0:
            raise ConfigError(
                f"slot_duration_minutes ({self.slot_duration_minutes}) must divide "
                f"the working window of {window} minutes evenly"
            )

    @property
    def start_minute(self) -> int:
        """Minute of day at which the first slot starts."""
        return self.start_hour * 60

    @property
    def end_minute(self) -> int:
        """Minute of day at which working hours end (exclusive)."""
        return self.end_hour * 60

    def is_aligned(self, minute_of_day: int) -> bool:
        """Check whether a minute of day falls on a slot boundary."""
        return (minute_of_day - self.start_minute) % self.slot_duration_minutes == 0

    def describe(self) -> str:
        """Short human readable window, e.g. ``9:00-17:00``."""
        return f"{self.start_hour}:00-{self.end_hour}:00"


@dataclass(frozen=True)
class TimeSlot:
    """
    A single bookable slot, identified by its 24-hour start time.
    """
    id: str
    display_label: str

    @property
    def hour(self) -> int:
        return int(self.id[:2])

    @property
    def minute(self) -> int:
        return int(self.id[3:])

    @property
    def minute_of_day(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return self.display_label


@dataclass(frozen=True)
class SlotCatalog:
    """
    The ordered sequence of all slots for one working-hours configuration.
    """
    slots: Tuple[TimeSlot, ...]

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[TimeSlot]:
        return iter(self.slots)

    def __getitem__(self, index: int) -> TimeSlot:
        return self.slots[index]

    def ids(self) -> List[str]:
        """Return slot ids in catalog order."""
        return [slot.id for slot in self.slots]

    def find(self, slot_id: str) -> TimeSlot | None:
        """Find a slot by id. Returns None if the id is not in the catalog."""
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        return None


class BookingSource(str, Enum):
    """Entry point through which a booking was made."""
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class BookingResult:
    """
    Outcome of a successful booking request.
    """
    slot: TimeSlot
    source: BookingSource

    @property
    def message(self) -> str:
        """Confirmation text for the caller to display."""
        if self.source is BookingSource.ADMIN:
            return f"Admin: Pre-booked slot for {self.slot.display_label}"
        return f"Appointment booked for {self.slot.display_label}!"
