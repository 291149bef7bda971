"""Configuration for the calendar server."""

import json
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from adecal.constants import DEFAULT_HOST, DEFAULT_PORT, EXPORT_DIRNAME
from adecal.exceptions import ConfigurationError
from adecal.models.tracked import TrackedCalendar


DEFAULT_TRACKED_CALENDARS = [
    TrackedCalendar(
        name="IMMFA1TD01",
        path=["Trainees", "UFR Informatique", "M1 MIAGE", "IMMFA1TD", "IMMFA1TD01"],
    ),
    TrackedCalendar(
        name="IMMFA1CM01",
        path=["Trainees", "UFR Informatique", "M1 MIAGE", "IMMFA1CM", "IMMFA1CM01"],
    ),
]

# Virtual calendar name -> source calendars, first source wins on UID conflicts
DEFAULT_CALENDAR_MERGES = {
    "GroupeIMP": ["IMMFA1TD01", "IMMFA1CM01"],
}


class ServerConfig(BaseModel):
    """Server configuration with Pydantic validation.

    Loaded once at startup and immutable afterwards.
    """

    # Export tree written by the exporter
    export_dir: Path = Field(default=Path(EXPORT_DIRNAME))

    # HTTP
    host: str = Field(default=DEFAULT_HOST)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="calendar_server.log")

    # Timetable application
    database_name: str = Field(default="ADEPROD_2025-2026")
    tracked_calendars: list[TrackedCalendar] = Field(
        default_factory=lambda: list(DEFAULT_TRACKED_CALENDARS)
    )
    calendar_merges: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_CALENDAR_MERGES.items()}
    )

    class Config:
        """Pydantic config."""

        frozen = True

    @model_validator(mode="after")
    def check_merges(self) -> "ServerConfig":
        tracked = {calendar.name for calendar in self.tracked_calendars}
        for name, sources in self.calendar_merges.items():
            if not sources:
                raise ValueError(f"Merged calendar '{name}' has no source calendars")
            if name in tracked:
                raise ValueError(
                    f"Merged calendar '{name}' collides with a tracked calendar name"
                )
        return self

    @property
    def tracked_names(self) -> list[str]:
        return [calendar.name for calendar in self.tracked_calendars]

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables and .env file."""
        load_dotenv()

        config_dict = {}

        if "EXPORT_DIR" in os.environ:
            config_dict["export_dir"] = Path(os.environ["EXPORT_DIR"])

        if "SERVER_HOST" in os.environ:
            config_dict["host"] = os.environ["SERVER_HOST"]
        if "SERVER_PORT" in os.environ:
            try:
                config_dict["port"] = int(os.environ["SERVER_PORT"])
            except ValueError:
                pass  # Keep default if invalid

        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        if "ADE_DATABASE" in os.environ:
            config_dict["database_name"] = os.environ["ADE_DATABASE"]

        if "TRACKED_CALENDARS_FILE" in os.environ:
            config_dict["tracked_calendars"] = _load_json(
                Path(os.environ["TRACKED_CALENDARS_FILE"]), list
            )
        if "CALENDAR_MERGES_FILE" in os.environ:
            config_dict["calendar_merges"] = _load_json(
                Path(os.environ["CALENDAR_MERGES_FILE"]), dict
            )

        return cls(**config_dict)


def _load_json(path: Path, expected: type):
    """Read a JSON configuration file and check its top-level type."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Failed to read {path}: {e}") from e
    if not isinstance(data, expected):
        raise ConfigurationError(
            f"{path} must contain a JSON {expected.__name__}, got {type(data).__name__}"
        )
    return data
