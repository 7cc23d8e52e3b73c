"""
Domain-specific exception hierarchy for the slot booking application.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import TimeSlot


class SlotBookerError(Exception):
    """Base class for all application-level errors."""


class ConfigError(SlotBookerError, ValueError):
    """Raised when the working-hours configuration is invalid or unreadable."""


class InvalidDayError(SlotBookerError, ValueError):
    """Raised when a selected day cannot be parsed."""


class BookingError(SlotBookerError):
    """Base class for recoverable booking failures. Ledger state is untouched."""


class MalformedTimeError(BookingError):
    """Raised when admin input is not a 24-hour H:MM / HH:MM time."""

    def __init__(self, raw_text: object):
        self.raw_text = raw_text
        super().__init__("Please enter a valid time in HH:MM format (e.g., 14:00)")


class OutOfRangeError(BookingError):
    """Raised when an admin time parses but lies outside the slot grid."""


class UnknownSlotError(BookingError):
    """Raised when a slot id is not part of the current catalog."""

    def __init__(self, slot_id: object):
        self.slot_id = slot_id
        super().__init__(f"Slot {slot_id!r} is not recognized for the selected day")


class AlreadyBookedError(BookingError):
    """Raised when the requested slot is already taken."""

    def __init__(self, slot: "TimeSlot"):
        self.slot = slot
        super().__init__(f"This slot ({slot.display_label}) is already booked.")
