"""Merge several exported calendars into one virtual calendar."""

import logging
import uuid

from adecal.models.document import CalendarDocument
from adecal.parsing.ics_blocks import extract_uid, parse_document, set_calendar_name

logger = logging.getLogger(__name__)


def deduplicate_events(events: list[str]) -> list[str]:
    """
    Keep the first event for each UID, in encounter order.

    Events without a UID get a unique key of their own, so they are never
    treated as duplicates, even of an identical block.

    Args:
        events: Event blocks, highest priority source first

    Returns:
        Surviving event blocks
    """
    unique: dict[str, str] = {}
    for event in events:
        uid = extract_uid(event)
        if uid is None:
            unique[f"no-uid-{uuid.uuid4()}"] = event
        elif uid not in unique:
            unique[uid] = event
    return list(unique.values())


def merge_documents(documents: list[str], merged_name: str) -> str:
    """
    Merge calendar documents into one, de-duplicating events by UID.

    The header and footer come from the first document that has events and
    a header; its calendar title is replaced by ``merged_name``. Events keep
    source order and the earliest source wins on a UID conflict.

    Args:
        documents: Raw documents in merge priority order
        merged_name: Title of the merged calendar

    Returns:
        Merged document text

    Raises:
        ValueError: If no documents are given
    """
    if not documents:
        raise ValueError("At least one calendar document is required to merge")

    parsed = [parse_document(text) for text in documents]

    frame: CalendarDocument | None = None
    all_events: list[str] = []
    for document in parsed:
        all_events.extend(document.events)
        if frame is None and document.events and document.header:
            frame = document
    if frame is None:
        # A document without events is all header
        with_events = [document for document in parsed if document.events]
        frame = with_events[0] if with_events else parsed[0]

    events = deduplicate_events(all_events)
    logger.debug(
        f"Merged {len(documents)} calendars into '{merged_name}': "
        f"{len(all_events)} events, {len(all_events) - len(events)} duplicates dropped"
    )

    merged = CalendarDocument(
        header=set_calendar_name(frame.header, merged_name),
        events=events,
        footer=frame.footer,
    )
    return merged.render()
