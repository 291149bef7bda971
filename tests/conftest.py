import os

import pytest

from adecal import create_app
from adecal.config import ServerConfig


def _make_ics(calname, events, crlf=False, header_extra=()):
    """Build an exporter-style calendar document.

    events is a list of (uid, summary) pairs; a uid of None omits the UID line.
    """
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//ADE/version 6.0//EN",
        f"X-WR-CALNAME:{calname}",
        "X-WR-TIMEZONE:Europe/Paris",
        *header_extra,
    ]
    for day, (uid, summary) in enumerate(events, start=6):
        lines.append("BEGIN:VEVENT")
        if uid is not None:
            lines.append(f"UID:{uid}")
        lines.extend(
            [
                f"DTSTART:202501{day:02d}T080000Z",
                f"DTEND:202501{day:02d}T100000Z",
                f"SUMMARY:{summary}",
                "LOCATION:Amphi A",
                "END:VEVENT",
            ]
        )
    lines.append("END:VCALENDAR")
    newline = "\r\n" if crlf else "\n"
    return newline.join(lines) + newline


@pytest.fixture
def make_ics():
    """Factory for calendar documents."""
    return _make_ics


@pytest.fixture
def export_dir(tmp_path):
    """Empty export tree."""
    path = tmp_path / "export"
    path.mkdir()
    return path


@pytest.fixture
def write_export(export_dir):
    """Write an export file and return its path.

    Usage: write_export("FOO", content, date_range="2025-01-01_to_2025-01-07")
    """

    def _write(name, content, date_range=None, filename="calendar.ics", mtime=None):
        base = export_dir / date_range if date_range else export_dir
        calendar_dir = base / name
        calendar_dir.mkdir(parents=True, exist_ok=True)
        path = calendar_dir / filename
        path.write_bytes(content.encode("utf-8"))
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def config(export_dir, tmp_path):
    """Server configuration pointing at the temporary export tree."""
    return ServerConfig(export_dir=export_dir, log_dir=tmp_path / "logs")


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()
