"""Print or save the feed served for a calendar."""

import logging
from pathlib import Path

import typer
from rich.markup import escape
from typing_extensions import Annotated

from adecal.exceptions import CalendarError
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def show(
    name: Annotated[
        str,
        typer.Argument(help="Calendar or merged calendar name"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the feed to this file"),
    ] = None,
) -> None:
    """Print the calendar document that /calendar/NAME would serve."""
    ctx = get_context()

    try:
        feed = ctx.service.get_feed(name)
    except CalendarError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if feed.missing:
        typer.echo(f"Warning: missing sources: {', '.join(feed.missing)}", err=True)

    if output is None:
        typer.echo(feed.content, nl=False)
        return

    # Keep the exporter's line endings
    output.write_bytes(feed.content.encode("utf-8"))
    logger.info(f"Wrote {feed.filename} to {output}")
    console.print(f"Calendar written to {escape(str(output))}")
