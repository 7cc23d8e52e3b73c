"""
Application service for a single booking session.

The service owns the selected day and the active working hours and holds
exactly one ``BookingLedger``. The CLI talks to this class only; it never
touches the ledger's state directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import FrozenSet, List, Tuple

import pendulum
from pendulum import Date

from ..domain.exceptions import InvalidDayError
from ..domain.ledger import BookingLedger
from ..domain.models import BookingResult, SlotCatalog, TimeSlot, WorkingHours

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySummary:
    """Counts and booked labels for one day."""
    day: Date
    total_slots: int
    booked_labels: List[str]

    @property
    def booked_count(self) -> int:
        return len(self.booked_labels)

    @property
    def available_count(self) -> int:
        return self.total_slots - self.booked_count


def parse_day(value: date | str) -> Date:
    """
    Normalize a day to a pendulum ``Date``.

    Args:
        value: A date/datetime or ``YYYY-MM-DD`` text

    Raises:
        InvalidDayError: If text does not parse as a calendar date
    """
    if isinstance(value, str):
        try:
            return pendulum.from_format(value.strip(), "YYYY-MM-DD").date()
        except ValueError as exc:
            raise InvalidDayError(f"Invalid date '{value}', expected YYYY-MM-DD") from exc

    if isinstance(value, datetime):
        value = value.date()

    return pendulum.date(value.year, value.month, value.day)


class BookingService:
    """
    Session facade over the booking ledger.

    Re-selecting the same day keeps bookings; selecting a different day or
    changing the working hours starts from an empty ledger.
    """

    def __init__(
        self,
        working_hours: WorkingHours,
        day: date | str | None = None,
        timezone: str = "UTC",
    ) -> None:
        self._timezone = timezone
        self._day = parse_day(day) if day is not None else pendulum.today(timezone).date()
        self._ledger = BookingLedger(working_hours, day=self._day)

    @property
    def day(self) -> Date:
        return self._day

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def working_hours(self) -> WorkingHours:
        return self._ledger.working_hours

    @property
    def catalog(self) -> SlotCatalog:
        return self._ledger.catalog

    @property
    def booked_slot_ids(self) -> FrozenSet[str]:
        return self._ledger.booked_slot_ids

    def select_day(self, day: date | str) -> Date:
        """
        Switch the selected day, clearing bookings if it changed.

        Returns:
            The normalized selected day
        """
        new_day = parse_day(day)
        if new_day != self._day:
            self._day = new_day
            self._ledger.reset_for_day(new_day)
        return self._day

    def reconfigure(self, working_hours: WorkingHours) -> None:
        """Apply new working hours; the current day's bookings are dropped."""
        self._ledger.reset_for_day(self._day, working_hours=working_hours)

    def book(self, slot_id: str) -> BookingResult:
        """Book a slot from the grid (user path)."""
        return self._ledger.request_booking(slot_id)

    def admin_book(self, raw_time_text: str) -> BookingResult:
        """Pre-book a slot from typed 24-hour text (admin path)."""
        return self._ledger.request_admin_booking(raw_time_text)

    def grid(self) -> List[Tuple[TimeSlot, bool]]:
        """Every slot of the day paired with its booked flag."""
        return [(slot, self._ledger.is_booked(slot.id)) for slot in self._ledger.catalog]

    def summary(self) -> DaySummary:
        return DaySummary(
            day=self._day,
            total_slots=len(self._ledger.catalog),
            booked_labels=[slot.display_label for slot in self._ledger.booked_slots()],
        )
