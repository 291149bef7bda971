"""List exported and merged calendars."""

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from cli.display.table_renderer import TableRenderer


def ls(
    show_merges: Annotated[
        bool,
        typer.Option("--merges/--no-merges", help="Also list merged calendars"),
    ] = True,
) -> None:
    """List calendars that currently have an export.

    Tracked calendars without any export are reported as missing.
    """
    ctx = get_context()
    config = ctx.config
    locator = ctx.locator
    renderer = TableRenderer()

    names = locator.list_calendars()
    exports = [info for info in map(locator.locate, names) if info is not None]
    tracked = {calendar.name: calendar.breadcrumb for calendar in config.tracked_calendars}

    if exports:
        renderer.render_export_list(exports, config.export_dir, tracked)
    else:
        renderer.render_empty(f"No exports found in {config.export_dir}")

    missing = [name for name in tracked if name not in names]
    if missing:
        console.print()
        console.print(
            f"[yellow]Tracked but not exported: {escape(', '.join(missing))}[/yellow]"
        )

    if show_merges and config.calendar_merges:
        console.print()
        renderer.render_merge_list(config.calendar_merges, set(names))
