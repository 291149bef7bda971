"""Tracked calendar model."""

from pydantic import BaseModel, Field


class TrackedCalendar(BaseModel):
    """A calendar exported from the timetable application.

    The path is the list of labels walked in the application's resource tree
    to reach the calendar (e.g. Trainees > UFR Informatique > M1 MIAGE).
    The server only uses it for display.
    """

    name: str = Field(min_length=1)
    path: list[str] = []

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def breadcrumb(self) -> str:
        return " > ".join(self.path)
