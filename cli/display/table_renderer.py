"""Table renderer for exports, merges and events."""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from adecal.models.feed import ExportInfo
from cli.display.console import console
from cli.display.formatters import (
    format_event_time,
    format_file_size,
    format_path,
    format_relative_time,
)


@dataclass
class EventRow:
    """A calendar event for display."""

    summary: str
    start: datetime | date | None
    end: datetime | date | None = None
    location: str | None = None
    uid: str | None = None


class TableRenderer:
    """Render tables for calendar listings.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_export_list(
        self, exports: list[ExportInfo], export_dir: Path, tracked: dict[str, str]
    ) -> None:
        """Render the exported calendars as a table.

        Args:
            exports: Authoritative export per calendar.
            export_dir: Root of the export tree.
            tracked: Tracked calendar name -> navigation breadcrumb.
        """
        console.print(f"Exports at {escape(str(export_dir.resolve()))}:")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("NAME", style="cyan")
        table.add_column("RANGE", style="dim")
        table.add_column("UPDATED", style="dim")
        table.add_column("SIZE", justify="right", style="dim")
        table.add_column("PATH", style="dim")

        for info in exports:
            name_display = escape(info.calendar)
            if info.calendar not in tracked:
                name_display += " [dim](untracked)[/dim]"
            table.add_row(
                name_display,
                escape(info.date_range or "-"),
                format_relative_time(info.modified),
                format_file_size(info.size),
                escape(format_path(info.path)),
            )

        console.print(table)

    def render_merge_list(
        self, merges: dict[str, list[str]], available: set[str]
    ) -> None:
        """Render merged calendars and the availability of their sources."""
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("MERGED", style="cyan")
        table.add_column("SOURCES")

        for name, sources in merges.items():
            parts = [
                escape(source)
                if source in available
                else f"[red]{escape(source)} (missing)[/red]"
                for source in sources
            ]
            table.add_row(escape(name), ", ".join(parts))

        console.print(table)

    def render_event_list(self, events: list[EventRow], calendar_name: str) -> None:
        """Render calendar events as a table."""
        console.print(f"Events in '{escape(calendar_name)}' ({len(events)} total):")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("START", style="cyan")
        table.add_column("END", style="dim")
        table.add_column("SUMMARY")
        table.add_column("LOCATION", style="dim italic")
        table.add_column("UID", style="dim")

        for event in events:
            table.add_row(
                format_event_time(event.start),
                format_event_time(event.end),
                escape(event.summary),
                escape(event.location or ""),
                escape(event.uid or ""),
            )

        console.print(table)

    def render_empty(self, message: str) -> None:
        """Render an empty state message.

        Args:
            message: Message to display.
        """
        console.print(f"[dim]{escape(message)}[/dim]")
