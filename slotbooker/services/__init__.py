"""
Service layer helpers that orchestrate domain logic for the presentation layer.
"""

from .booking_service import BookingService, DaySummary, parse_day

__all__ = ["BookingService", "DaySummary", "parse_day"]
