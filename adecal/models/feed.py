"""Models describing resolved exports and served feeds."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel


class ExportInfo(BaseModel):
    """Location of the export file currently authoritative for a calendar."""

    calendar: str
    path: Path
    date_range: str | None = None  # None for direct export folders
    modified: datetime
    size: int


class CalendarFeed(BaseModel):
    """Calendar document resolved for a (real or merged) calendar name."""

    name: str
    content: str
    merged: bool = False
    sources: list[str] = []  # source calendars actually used
    missing: list[str] = []  # merge sources with no export

    @property
    def filename(self) -> str:
        return f"{self.name}.ics"
