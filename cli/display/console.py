"""Shared Rich console instance for terminal output."""

from rich.console import Console

# Calendar names are mostly digits and capitals; keep them unhighlighted
console = Console(highlight=False)
