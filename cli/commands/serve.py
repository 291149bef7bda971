"""Run the calendar HTTP server."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from adecal import create_app, describe_calendars
from cli.context import get_context
from cli.display import console

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind (default: SERVER_HOST config)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: SERVER_PORT config)"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Run Flask in debug mode"),
    ] = False,
) -> None:
    """Serve calendar feeds at /calendar/NAME."""
    ctx = get_context()
    config = ctx.config
    host = host or config.host
    port = port or config.port

    app = create_app(config)
    base_url = f"http://{'localhost' if host == '0.0.0.0' else host}:{port}"

    logger.info(f"Starting calendar server on {host}:{port} (exports: {config.export_dir})")
    console.print(f"Calendar server running at {escape(base_url)}")
    console.print()
    console.print(escape(describe_calendars(ctx.service, base_url)))
    console.print()
    console.print("Use these URLs to subscribe in Google or Proton Calendar")

    app.run(host=host, port=port, debug=debug)
