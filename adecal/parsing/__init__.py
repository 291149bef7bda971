"""Parsing of exported calendar documents."""

from adecal.parsing.ics_blocks import (
    extract_uid,
    parse_document,
    parse_events,
    set_calendar_name,
)

__all__ = [
    "extract_uid",
    "parse_document",
    "parse_events",
    "set_calendar_name",
]
