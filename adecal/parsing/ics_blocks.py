"""Line-oriented splitting of calendar documents into event blocks.

The exporter's files are served and merged as text rather than through a
full iCalendar round trip, so that unknown properties, timezone blocks and
line endings reach subscribers exactly as exported.
"""

import re

from icalendar import vText

from adecal.constants import (
    BEGIN_CALENDAR,
    BEGIN_EVENT,
    CALNAME_PROPERTY,
    END_EVENT,
    UID_PROPERTY,
)
from adecal.models.document import CalendarDocument

# Folded content lines continue with a single space or tab (RFC 5545 3.1)
_FOLD_RE = re.compile(r"\r?\n[ \t]")
_UID_RE = re.compile(rf"^{UID_PROPERTY}:([^\r\n]*)", re.MULTILINE)
_CALNAME_RE = re.compile(
    rf"^({CALNAME_PROPERTY}(?:;[^:\r\n]*)?:)[^\r\n]*(?:\r?\n[ \t][^\r\n]*)*",
    re.MULTILINE,
)


def _scan(lines: list[str]) -> tuple[list[tuple[int, int]], list[str]]:
    """Find closed event blocks as (begin, end) line index pairs."""
    spans = []
    begin = None
    for index, line in enumerate(lines):
        marker = line.strip()
        if marker == BEGIN_EVENT:
            # An unclosed block is dropped when a new one starts
            begin = index
        elif marker == END_EVENT and begin is not None:
            spans.append((begin, index))
            begin = None
    events = ["\n".join(lines[start : end + 1]) for start, end in spans]
    return spans, events


def parse_events(text: str) -> list[str]:
    """
    Split document text into VEVENT blocks.

    Each block runs from its BEGIN:VEVENT line through the matching
    END:VEVENT line, markers included, with the original line breaks.
    An event that never closes is dropped.

    Args:
        text: Raw calendar document

    Returns:
        Event blocks in document order
    """
    _, events = _scan(text.split("\n"))
    return events


def parse_document(text: str) -> CalendarDocument:
    """
    Split document text into header, event blocks and footer.

    For a document whose events are adjacent, ``parse_document(text).render()``
    returns ``text`` unchanged. A document without events is all header.
    """
    lines = text.split("\n")
    spans, events = _scan(lines)
    if not spans:
        return CalendarDocument(header=text)

    first_begin = spans[0][0]
    last_end = spans[-1][1]
    header = "\n".join(lines[:first_begin]) + "\n" if first_begin else ""
    footer = ""
    if last_end < len(lines) - 1:
        footer = "\n" + "\n".join(lines[last_end + 1 :])
    return CalendarDocument(header=header, events=events, footer=footer)


def extract_uid(event: str) -> str | None:
    """Return the UID of an event block, or None if it has none."""
    match = _UID_RE.search(_FOLD_RE.sub("", event))
    if not match:
        return None
    uid = match.group(1).strip()
    return uid or None


def set_calendar_name(header: str, name: str) -> str:
    """
    Set the calendar title (X-WR-CALNAME) in a document header.

    The first X-WR-CALNAME line gets the new value, keeping its parameters
    and line ending; continuation lines of a folded old title are dropped.
    When the header has none, a line is added after BEGIN:VCALENDAR, or at
    the top if there is no such line. Every other header line is left
    untouched.

    Args:
        header: Header text (everything before the first event)
        name: New calendar title

    Returns:
        Updated header text
    """
    value = vText(name).to_ical().decode("utf-8")

    if _CALNAME_RE.search(header):
        return _CALNAME_RE.sub(lambda m: m.group(1) + value, header, count=1)

    lines = header.split("\n")
    for index, line in enumerate(lines):
        if line.strip() == BEGIN_CALENDAR:
            newline = "\r" if line.endswith("\r") else ""
            lines.insert(index + 1, f"{CALNAME_PROPERTY}:{value}{newline}")
            return "\n".join(lines)

    newline = "\r\n" if "\r\n" in header else "\n"
    return f"{CALNAME_PROPERTY}:{value}{newline}{header}"
