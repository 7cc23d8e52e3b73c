"""
Domain layer - Pure business logic without external dependencies.
"""

from .exceptions import (
    AlreadyBookedError,
    BookingError,
    ConfigError,
    InvalidDayError,
    MalformedTimeError,
    OutOfRangeError,
    SlotBookerError,
    UnknownSlotError,
)
from .ledger import BookingLedger
from .models import BookingResult, BookingSource, SlotCatalog, TimeSlot, WorkingHours, format_time_12h
from .slot_generator import generate_slots, is_valid_slot_id

__all__ = [
    "AlreadyBookedError",
    "BookingError",
    "BookingLedger",
    "BookingResult",
    "BookingSource",
    "ConfigError",
    "InvalidDayError",
    "MalformedTimeError",
    "OutOfRangeError",
    "SlotBookerError",
    "SlotCatalog",
    "TimeSlot",
    "UnknownSlotError",
    "WorkingHours",
    "format_time_12h",
    "generate_slots",
    "is_valid_slot_id",
]
