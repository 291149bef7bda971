"""Shared constants for the calendar server."""

# Export layout written by the ADE exporter
EXPORT_DIRNAME = "export"
ICS_EXTENSION = ".ics"

# Date-range folders look like 2025-01-01_to_2025-01-07
DATE_RANGE_SEPARATOR = "-"

# Event block markers
BEGIN_EVENT = "BEGIN:VEVENT"
END_EVENT = "END:VEVENT"
BEGIN_CALENDAR = "BEGIN:VCALENDAR"

# Header/event properties
UID_PROPERTY = "UID"
CALNAME_PROPERTY = "X-WR-CALNAME"

# HTTP
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 6845
CALENDAR_CONTENT_TYPE = "text/calendar; charset=utf-8"
NO_CACHE = "no-cache, no-store, must-revalidate"
