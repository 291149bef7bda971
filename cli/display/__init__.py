"""Display module for rendering CLI output."""

from cli.display.console import console
from cli.display.formatters import (
    format_event_time,
    format_file_size,
    format_path,
    format_relative_time,
)
from cli.display.table_renderer import EventRow, TableRenderer

__all__ = [
    "console",
    "TableRenderer",
    "EventRow",
    "format_event_time",
    "format_file_size",
    "format_path",
    "format_relative_time",
]
