"""CLI package for the calendar server."""

import logging
import sys

from adecal.config import ServerConfig

# Handlers installed by setup_logging, replaced on the next call
_HANDLER_NAMES = ("adecal-file", "adecal-console")


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: ServerConfig | None = None
) -> None:
    """Send server logs to the log file and to stderr.

    The file keeps everything, tagged with the timetable database the
    exports come from. Flask's request lines (the ``werkzeug`` logger) are
    written to the file too, but only reach the console with ``verbose``.

    Args:
        verbose: Show INFO messages and request lines on the console
        quiet: Show only errors on the console
        config: Log directory/filename settings, read from the environment
            when omitted
    """
    if config is None:
        config = ServerConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(
        config.log_dir / config.log_filename, encoding="utf-8"
    )
    file_handler.set_name("adecal-file")
    file_handler.setFormatter(
        logging.Formatter(
            f"%(asctime)s [{config.database_name}] %(name)s %(levelname)s: %(message)s"
        )
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name("adecal-console")
    console_handler.setFormatter(logging.Formatter("adecal %(levelname)s: %(message)s"))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # werkzeug logs each request at INFO
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
