"""
Per-day booking state.

The ledger holds the booked slot ids for the currently selected day and is
the only place they can change. Both entry points validate before touching
state, so a raised error always leaves the ledger as it was.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import FrozenSet, List, Set

from .exceptions import AlreadyBookedError, MalformedTimeError, OutOfRangeError, UnknownSlotError
from .models import BookingResult, BookingSource, SlotCatalog, TimeSlot, WorkingHours, format_slot_id
from .slot_generator import generate_slots, is_valid_slot_id

logger = logging.getLogger(__name__)

# 24-hour H:MM or HH:MM, minutes 00-59
ADMIN_TIME_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):([0-5][0-9])")


class BookingLedger:
    """
    Booked slots for a single day, validated against the slot catalog.

    Two ways in:
    1. ``request_booking`` - a slot id picked from the rendered grid
    2. ``request_admin_booking`` - free-text 24-hour time typed by an admin

    They validate differently on purpose: the user path only checks catalog
    membership, the admin path parses and range-checks the raw text and
    reports more specific errors.
    """

    def __init__(self, working_hours: WorkingHours, day: date | None = None):
        self._working_hours = working_hours
        self._catalog = generate_slots(working_hours)
        self._day = day
        self._booked: Set[str] = set()

    @property
    def day(self) -> date | None:
        return self._day

    @property
    def working_hours(self) -> WorkingHours:
        return self._working_hours

    @property
    def catalog(self) -> SlotCatalog:
        return self._catalog

    @property
    def booked_slot_ids(self) -> FrozenSet[str]:
        """Snapshot of booked ids. Mutating it does not affect the ledger."""
        return frozenset(self._booked)

    def __len__(self) -> int:
        return len(self._booked)

    def is_booked(self, slot_id: str) -> bool:
        return slot_id in self._booked

    def booked_slots(self) -> List[TimeSlot]:
        """Booked slots in catalog order."""
        return [slot for slot in self._catalog if slot.id in self._booked]

    def available_slots(self) -> List[TimeSlot]:
        """Free slots in catalog order."""
        return [slot for slot in self._catalog if slot.id not in self._booked]

    def request_booking(self, slot_id: str) -> BookingResult:
        """
        Book a slot chosen from the grid.

        Args:
            slot_id: Canonical ``HH:MM`` slot id

        Returns:
            BookingResult for the newly booked slot

        Raises:
            UnknownSlotError: If the id is not in the current catalog
            AlreadyBookedError: If the slot is already booked
        """
        if not is_valid_slot_id(self._catalog, slot_id):
            logger.debug("Rejected unknown slot %r for %s", slot_id, self._day)
            raise UnknownSlotError(slot_id)

        slot = self._catalog.find(slot_id)
        return self._insert(slot, BookingSource.USER)

    def request_admin_booking(self, raw_time_text: str) -> BookingResult:
        """
        Pre-book a slot from a typed 24-hour time.

        Args:
            raw_time_text: ``H:MM`` or ``HH:MM`` text, e.g. ``"9:00"`` or ``"14:30"``

        Returns:
            BookingResult for the newly booked slot

        Raises:
            MalformedTimeError: If the text is not a valid 24-hour time
            OutOfRangeError: If the time is outside working hours or off the grid
            AlreadyBookedError: If the slot is already booked
        """
        text = raw_time_text if isinstance(raw_time_text, str) else ""
        match = ADMIN_TIME_PATTERN.fullmatch(text)
        if not match:
            logger.debug("Rejected malformed admin time %r", raw_time_text)
            raise MalformedTimeError(raw_time_text)

        hours = int(match.group(1))
        minutes = int(match.group(2))
        wh = self._working_hours

        if (
            hours < wh.start_hour
            or hours >= wh.end_hour
            or not wh.is_aligned(hours * 60 + minutes)
        ):
            logger.debug("Rejected out-of-range admin time %r", raw_time_text)
            raise OutOfRangeError(
                f"Time must be within working hours ({wh.describe()}) "
                f"and align with {wh.slot_duration_minutes}-minute slots"
            )

        slot = self._catalog.find(format_slot_id(hours, minutes))
        return self._insert(slot, BookingSource.ADMIN)

    def reset_for_day(self, new_day: date | None, working_hours: WorkingHours | None = None) -> None:
        """
        Drop all bookings and switch to ``new_day``.

        The catalog is regenerated only when a different configuration is given.
        """
        dropped = len(self._booked)
        self._booked = set()
        self._day = new_day

        if working_hours is not None and working_hours != self._working_hours:
            self._working_hours = working_hours
            self._catalog = generate_slots(working_hours)
            logger.info("Slot catalog rebuilt for %s (%d slots)", working_hours.describe(), len(self._catalog))

        logger.info("Ledger reset for %s, discarded %d booking(s)", new_day, dropped)

    def _insert(self, slot: TimeSlot, source: BookingSource) -> BookingResult:
        # check-and-insert must stay one uninterrupted step
        if slot.id in self._booked:
            logger.debug("Slot %s already booked on %s", slot.id, self._day)
            raise AlreadyBookedError(slot)

        self._booked.add(slot.id)
        logger.info("Booked %s on %s via %s path", slot.id, self._day, source.value)
        return BookingResult(slot=slot, source=source)
