"""
Tests for domain models.
"""

import pytest

from slotbooker.domain.exceptions import ConfigError
from slotbooker.domain.models import (
    BookingResult,
    BookingSource,
    TimeSlot,
    WorkingHours,
    format_slot_id,
    format_time_12h,
)


class TestWorkingHours:
    """Tests for WorkingHours model."""

    def test_create_valid_working_hours(self):
        """Test creating a valid configuration."""
        wh = WorkingHours(start_hour=9, end_hour=17, slot_duration_minutes=30)

        assert wh.start_minute == 540
        assert wh.end_minute == 1020
        assert wh.describe() == "9:00-17:00"

    def test_full_day_is_allowed(self):
        """Test that 0-24 is a valid window."""
        wh = WorkingHours(start_hour=0, end_hour=24, slot_duration_minutes=60)

        assert wh.end_minute == 1440

    @pytest.mark.parametrize(
        "start, end",
        [(17, 9), (9, 9), (-1, 10), (9, 25)],
    )
    def test_invalid_hours_raise_config_error(self, start, end):
        """Test that hours outside 0 <= start < end <= 24 are rejected."""
        with pytest.raises(ConfigError, match="Working hours must satisfy"):
            WorkingHours(start_hour=start, end_hour=end, slot_duration_minutes=30)

    def test_non_positive_duration_raises_config_error(self):
        """Test that zero duration is rejected."""
        with pytest.raises(ConfigError, match="greater than zero"):
            WorkingHours(start_hour=9, end_hour=17, slot_duration_minutes=0)

    def test_duration_must_divide_window(self):
        """Test that a duration leaving a partial slot is rejected."""
        with pytest.raises(ConfigError, match="divide"):
            WorkingHours(start_hour=9, end_hour=17, slot_duration_minutes=50)

    @pytest.mark.parametrize(
        "start, end, duration",
        [(9.5, 17, 30), (9, 17.0, 30), (9, 17, 7.5), ("9", 17, 30), (True, 17, 30), (9, 17, None)],
    )
    def test_non_integer_fields_raise_config_error(self, start, end, duration):
        """Test that only plain ints are accepted for hours and duration."""
        with pytest.raises(ConfigError, match="must be an integer"):
            WorkingHours(start_hour=start, end_hour=end, slot_duration_minutes=duration)

    def test_config_error_is_value_error(self):
        """ConfigError doubles as ValueError so validators can surface it."""
        with pytest.raises(ValueError):
            WorkingHours(start_hour=10, end_hour=9)

    def test_is_aligned_relative_to_start(self):
        """Test alignment is measured from the start of working hours."""
        wh = WorkingHours(start_hour=9, end_hour=18, slot_duration_minutes=90)

        assert wh.is_aligned(9 * 60)
        assert wh.is_aligned(10 * 60 + 30)
        assert not wh.is_aligned(10 * 60)


class TestTimeFormatting:
    """Tests for 12-hour label and slot id formatting."""

    def test_midnight_is_12_am(self):
        assert format_time_12h(0, 0) == "12:00 AM"

    def test_noon_is_12_pm(self):
        assert format_time_12h(12, 0) == "12:00 PM"

    def test_afternoon_hours_subtract_twelve(self):
        assert format_time_12h(13, 0) == "1:00 PM"
        assert format_time_12h(23, 30) == "11:30 PM"

    def test_morning_hours_unchanged(self):
        assert format_time_12h(9, 5) == "9:05 AM"
        assert format_time_12h(11, 59) == "11:59 AM"

    def test_slot_id_is_zero_padded(self):
        assert format_slot_id(9, 0) == "09:00"
        assert format_slot_id(16, 30) == "16:30"


class TestTimeSlot:
    """Tests for TimeSlot model."""

    def test_components(self):
        slot = TimeSlot(id="14:30", display_label="2:30 PM")

        assert slot.hour == 14
        assert slot.minute == 30
        assert slot.minute_of_day == 870
        assert str(slot) == "2:30 PM"


class TestBookingResult:
    """Tests for BookingResult messages."""

    def test_user_message(self):
        result = BookingResult(
            slot=TimeSlot(id="09:00", display_label="9:00 AM"),
            source=BookingSource.USER,
        )

        assert result.message == "Appointment booked for 9:00 AM!"

    def test_admin_message(self):
        result = BookingResult(
            slot=TimeSlot(id="14:00", display_label="2:00 PM"),
            source=BookingSource.ADMIN,
        )

        assert result.message == "Admin: Pre-booked slot for 2:00 PM"
