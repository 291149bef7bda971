"""List the events of a calendar feed."""

from datetime import date, datetime, time, timezone

import typer
from icalendar import Calendar
from rich.markup import escape
from typing_extensions import Annotated

from adecal.exceptions import CalendarError
from cli.context import get_context
from cli.display import console
from cli.display.table_renderer import EventRow, TableRenderer


def _sort_key(value: datetime | date | None) -> datetime:
    if value is None:
        return datetime.min
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _event_rows(calendar: Calendar) -> list[EventRow]:
    rows = []
    for component in calendar.walk("VEVENT"):
        dtstart = component.get("dtstart")
        dtend = component.get("dtend")
        location = component.get("location")
        uid = component.get("uid")
        rows.append(
            EventRow(
                summary=str(component.get("summary", "")),
                start=dtstart.dt if dtstart else None,
                end=dtend.dt if dtend else None,
                location=str(location) if location else None,
                uid=str(uid) if uid else None,
            )
        )
    return rows


def events(
    name: Annotated[
        str,
        typer.Argument(help="Calendar or merged calendar name"),
    ],
    chronological: Annotated[
        bool,
        typer.Option("--sort/--no-sort", help="Sort events by start time"),
    ] = True,
) -> None:
    """Show the events served for a calendar."""
    ctx = get_context()
    renderer = TableRenderer()

    try:
        feed = ctx.service.get_feed(name)
    except CalendarError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        calendar = Calendar.from_ical(feed.content)
    except ValueError as e:
        console.print(
            f"[red]Failed to parse calendar '{escape(name)}': {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)

    rows = _event_rows(calendar)
    if not rows:
        renderer.render_empty(f"No events in calendar '{name}'")
        return

    if chronological:
        rows.sort(key=lambda row: _sort_key(row.start))
    renderer.render_event_list(rows, name)
