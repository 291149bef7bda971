"""Pydantic models for the calendar server."""

from adecal.models.document import CalendarDocument
from adecal.models.feed import CalendarFeed, ExportInfo
from adecal.models.tracked import TrackedCalendar

__all__ = [
    "CalendarDocument",
    "CalendarFeed",
    "ExportInfo",
    "TrackedCalendar",
]
