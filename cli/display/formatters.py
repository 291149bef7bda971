"""Pure formatting functions for display output."""

from datetime import date, datetime, timezone
from pathlib import Path


def format_relative_time(dt: datetime) -> str:
    """Format datetime as relative time.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted time string (e.g., "2h ago", "1w ago", "3mo ago", "1y ago").
    """
    if dt.tzinfo is None:
        # Naive timestamps are local file times
        dt = dt.astimezone()

    now = datetime.now(timezone.utc)
    time_diff = now - dt

    if time_diff.days < 0:
        return "just now"
    if time_diff.days == 0:
        if time_diff.seconds < 60:
            return "just now"
        elif time_diff.seconds < 3600:
            minutes = time_diff.seconds // 60
            return f"{minutes}m ago"
        else:
            hours = time_diff.seconds // 3600
            return f"{hours}h ago"
    elif time_diff.days < 7:
        return f"{time_diff.days}d ago"
    elif time_diff.days < 30:
        weeks = time_diff.days // 7
        return f"{weeks}w ago"
    elif time_diff.days < 365:
        months = time_diff.days // 30
        return f"{months}mo ago"
    else:
        years = time_diff.days // 365
        return f"{years}y ago"


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes.

    Returns:
        Formatted size string (e.g., "1.5KB", "2.3MB").
    """
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f}{unit}"
        size /= 1024.0
    return f"{size:.1f}TB"


def format_event_time(value: datetime | date | None) -> str:
    """Format an event start or end for a table cell."""
    if value is None:
        return "-"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return value.strftime("%Y-%m-%d")


def format_path(path: Path) -> str:
    """Format path relative to cwd when possible."""
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path.resolve())
