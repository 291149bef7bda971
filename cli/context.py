"""Shared CLI context with lazy-initialized dependencies."""

from adecal.config import ServerConfig
from adecal.service import CalendarFeedService
from adecal.storage.export_locator import ExportLocator


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        names = ctx.locator.list_calendars()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: ServerConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Preloaded configuration (loaded from env when omitted)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: ServerConfig | None = config
        self._locator: ExportLocator | None = None
        self._service: CalendarFeedService | None = None

    @property
    def config(self) -> ServerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = ServerConfig.from_env()
        return self._config

    @property
    def locator(self) -> ExportLocator:
        """Get export locator (lazy-loaded)."""
        if self._locator is None:
            self._locator = ExportLocator(self.config.export_dir)
        return self._locator

    @property
    def service(self) -> CalendarFeedService:
        """Get feed service (lazy-loaded)."""
        if self._service is None:
            self._service = CalendarFeedService(self.config, self.locator)
        return self._service


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
