"""CLI argument parsing and command routing."""

import pydantic
import typer
from rich.markup import escape
from typing_extensions import Annotated

from adecal.exceptions import ConfigurationError
from cli import setup_logging
from cli.commands import events, ls, serve, show
from cli.context import CLIContext, set_context
from cli.display import console

app = typer.Typer(
    help="Serve ADE timetable exports as subscribable calendar feeds.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    try:
        config = ctx.config
    except (ConfigurationError, pydantic.ValidationError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=config)


app.command("serve")(serve)
app.command("ls")(ls)
app.command("show")(show)
app.command("events")(events)
