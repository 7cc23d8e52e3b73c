"""
Slot grid generation.

Pure domain logic: turns a working-hours configuration into the ordered
catalog of bookable slots. No state, no I/O.
"""

import re
from typing import List

from .models import SlotCatalog, TimeSlot, WorkingHours, format_slot_id, format_time_12h

SLOT_ID_PATTERN = re.compile(r"\d{2}:\d{2}")


def generate_slots(working_hours: WorkingHours) -> SlotCatalog:
    """
    Generate every slot between start and end of working hours.

    Steps from ``start_hour * 60`` (inclusive) to ``end_hour * 60``
    (exclusive) by ``slot_duration_minutes``.

    Args:
        working_hours: Validated working-hours configuration

    Returns:
        SlotCatalog in strictly increasing time order
    """
    slots: List[TimeSlot] = []

    for minute_of_day in range(
        working_hours.start_minute,
        working_hours.end_minute,
        working_hours.slot_duration_minutes,
    ):
        hour, minute = divmod(minute_of_day, 60)
        slots.append(
            TimeSlot(
                id=format_slot_id(hour, minute),
                display_label=format_time_12h(hour, minute),
            )
        )

    return SlotCatalog(slots=tuple(slots))


def is_valid_slot_id(catalog: SlotCatalog, slot_id: object) -> bool:
    """Check that ``slot_id`` is a canonical HH:MM id present in ``catalog``."""
    if not isinstance(slot_id, str) or not SLOT_ID_PATTERN.fullmatch(slot_id):
        return False
    return catalog.find(slot_id) is not None
