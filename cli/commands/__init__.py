"""CLI commands package."""

from cli.commands.events import events
from cli.commands.ls import ls
from cli.commands.serve import serve
from cli.commands.show import show

__all__ = [
    "events",
    "ls",
    "serve",
    "show",
]
