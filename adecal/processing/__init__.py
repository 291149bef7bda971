"""Processing of calendar documents."""

from adecal.processing.calendar_merger import deduplicate_events, merge_documents

__all__ = [
    "deduplicate_events",
    "merge_documents",
]
