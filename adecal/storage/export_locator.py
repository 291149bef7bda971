"""Locate the freshest export file for a calendar."""

import logging
from datetime import datetime
from pathlib import Path

from adecal.constants import DATE_RANGE_SEPARATOR, ICS_EXTENSION
from adecal.models.feed import ExportInfo

logger = logging.getLogger(__name__)


class ExportLocator:
    """Find exported calendar files in the exporter's output tree.

    Two layouts are supported::

        export/<calendar>/<file>.ics
        export/<start>_to_<end>/<calendar>/<file>.ics

    A direct folder always beats the dated ones; among dated folders the
    lexicographically greatest name (the most recent ISO date range) wins.
    Nothing is cached: every lookup reads the filesystem again.
    """

    def __init__(self, export_dir: Path):
        """
        Initialize locator.

        Args:
            export_dir: Root of the export tree
        """
        self.export_dir = export_dir

    def find_latest(self, name: str) -> str | None:
        """
        Get the content of the authoritative export for a calendar.

        Args:
            name: Calendar name (case-sensitive)

        Returns:
            Document text, or None if no readable export exists
        """
        info = self.locate(name)
        if info is None:
            return None

        try:
            # Decode raw bytes so CRLF line endings are kept
            return info.path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read export {info.path}: {e}")
            return None

    def locate(self, name: str) -> ExportInfo | None:
        """Find the export file for a calendar without reading it."""
        if not self._is_safe_name(name):
            logger.debug(f"Rejected calendar name: {name!r}")
            return None

        try:
            path = self._pick_file(self.export_dir / name)
            if path is not None:
                return self._info(name, path, None)

            for date_range in self.date_range_dirs():
                path = self._pick_file(date_range / name)
                if path is not None:
                    return self._info(name, path, date_range.name)
        except OSError as e:
            logger.error(f"Error reading export directory {self.export_dir}: {e}")

        return None

    def date_range_dirs(self) -> list[Path]:
        """Get date-range folders, most recent first."""
        if not self.export_dir.is_dir():
            return []
        dirs = [
            path
            for path in self.export_dir.iterdir()
            if path.is_dir() and DATE_RANGE_SEPARATOR in path.name
        ]
        return sorted(dirs, key=lambda path: path.name, reverse=True)

    def list_calendars(self) -> list[str]:
        """List every calendar name that currently has an export."""
        names = set()
        try:
            if not self.export_dir.is_dir():
                return []
            for path in self.export_dir.iterdir():
                if not path.is_dir():
                    continue
                if self._pick_file(path) is not None:
                    names.add(path.name)
                elif DATE_RANGE_SEPARATOR in path.name:
                    names.update(
                        child.name
                        for child in path.iterdir()
                        if child.is_dir() and self._pick_file(child) is not None
                    )
        except OSError as e:
            logger.error(f"Error listing export directory {self.export_dir}: {e}")
        return sorted(names)

    def _pick_file(self, calendar_dir: Path) -> Path | None:
        """Get the most recently modified export in a calendar folder."""
        if not calendar_dir.is_dir():
            return None
        files = [
            path
            for path in calendar_dir.iterdir()
            if path.suffix == ICS_EXTENSION and path.is_file()
        ]
        if not files:
            return None
        return max(files, key=lambda path: (path.stat().st_mtime, path.name))

    def _info(self, name: str, path: Path, date_range: str | None) -> ExportInfo:
        stat = path.stat()
        return ExportInfo(
            calendar=name,
            path=path,
            date_range=date_range,
            modified=datetime.fromtimestamp(stat.st_mtime),
            size=stat.st_size,
        )

    @staticmethod
    def _is_safe_name(name: str) -> bool:
        # Names come straight from request paths
        if not name or name in (".", ".."):
            return False
        return "/" not in name and "\\" not in name and "\x00" not in name
