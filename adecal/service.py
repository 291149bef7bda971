"""Resolve calendar names to servable feeds."""

import logging

from adecal.config import ServerConfig
from adecal.exceptions import CalendarNotFoundError, MergedCalendarNotFoundError
from adecal.models.feed import CalendarFeed
from adecal.processing.calendar_merger import merge_documents
from adecal.storage.export_locator import ExportLocator

logger = logging.getLogger(__name__)


class CalendarFeedService:
    """Serve real and merged calendars from the export tree."""

    def __init__(self, config: ServerConfig, locator: ExportLocator | None = None):
        """
        Initialize service.

        Args:
            config: Server configuration (merge mapping, export directory)
            locator: ExportLocator instance (defaults to one on config.export_dir)
        """
        self.config = config
        self.locator = locator or ExportLocator(config.export_dir)

    def merge_names(self) -> list[str]:
        return list(self.config.calendar_merges)

    def sources_for(self, name: str) -> list[str] | None:
        """Get the source calendars of a merged calendar, or None."""
        sources = self.config.calendar_merges.get(name)
        return list(sources) if sources is not None else None

    def get_feed(self, name: str) -> CalendarFeed:
        """
        Resolve a calendar name to a feed.

        Merged calendar names are checked before exported calendars.

        Args:
            name: Calendar or merged calendar name

        Returns:
            CalendarFeed with the document to serve

        Raises:
            MergedCalendarNotFoundError: No source of a merged calendar has an export
            CalendarNotFoundError: No export exists for the calendar
        """
        sources = self.sources_for(name)
        if sources is not None:
            return self._merged_feed(name, sources)

        content = self.locator.find_latest(name)
        if content is None:
            raise CalendarNotFoundError(name)
        return CalendarFeed(name=name, content=content, sources=[name])

    def _merged_feed(self, name: str, sources: list[str]) -> CalendarFeed:
        if self.locator.locate(name) is not None:
            logger.warning(
                f"Merged calendar '{name}' shadows an exported calendar of the same name"
            )

        documents = []
        found = []
        missing = []
        for source in sources:
            content = self.locator.find_latest(source)
            if content is None:
                missing.append(source)
            else:
                documents.append(content)
                found.append(source)

        if not documents:
            raise MergedCalendarNotFoundError(name, sources)
        if missing:
            logger.warning(
                f"Merged calendar '{name}' is missing sources: {', '.join(missing)}"
            )

        return CalendarFeed(
            name=name,
            content=merge_documents(documents, name),
            merged=True,
            sources=found,
            missing=missing,
        )
