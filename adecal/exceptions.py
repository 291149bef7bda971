"""Exception hierarchy for calendar server operations."""


class CalendarError(Exception):
    """Base exception for calendar operations."""

    pass


class CalendarNotFoundError(CalendarError):
    """No export exists for the requested calendar."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f'Calendar "{name}" not found')


class MergedCalendarNotFoundError(CalendarNotFoundError):
    """None of the sources of a merged calendar could be resolved."""

    def __init__(self, name: str, sources: list[str]):
        self.sources = sources
        super().__init__(name, f'No calendars found for merged calendar "{name}"')


class ConfigurationError(CalendarError):
    """Configuration file could not be loaded."""

    pass
