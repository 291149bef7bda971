"""Tests for the command line interface."""

import logging

import pytest
from flask import Flask
from typer.testing import CliRunner

from adecal.config import ServerConfig
from cli import setup_logging
from cli.parser import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, export_dir, tmp_path):
    """Point the CLI at the temporary export tree and restore logging after."""
    monkeypatch.setenv("EXPORT_DIR", str(export_dir))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CALENDAR_MERGES_FILE", raising=False)
    monkeypatch.delenv("TRACKED_CALENDARS_FILE", raising=False)

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_ls_lists_exports_and_merges(write_export, make_ics):
    write_export("IMMFA1TD01", make_ics("IMMFA1TD01", []))

    result = runner.invoke(app, ["ls"])

    assert result.exit_code == 0
    assert "IMMFA1TD01" in result.output
    assert "Tracked but not exported: IMMFA1CM01" in result.output
    assert "GroupeIMP" in result.output


def test_ls_without_exports(export_dir):
    result = runner.invoke(app, ["ls", "--no-merges"])

    assert result.exit_code == 0
    assert "No exports found" in result.output
    assert "GroupeIMP" not in result.output


def test_show_prints_feed(write_export, make_ics):
    content = make_ics("IMMFA1TD01", [("u1", "Algo")])
    write_export("IMMFA1TD01", content)

    result = runner.invoke(app, ["show", "IMMFA1TD01"])

    assert result.exit_code == 0
    assert result.output == content


def test_show_writes_merged_feed(write_export, make_ics, tmp_path):
    write_export("IMMFA1TD01", make_ics("IMMFA1TD01", [("u1", "td")], crlf=True))
    write_export("IMMFA1CM01", make_ics("IMMFA1CM01", [("u1", "cm")], crlf=True))
    output = tmp_path / "merged.ics"

    result = runner.invoke(app, ["show", "GroupeIMP", "-o", str(output)])

    assert result.exit_code == 0
    data = output.read_bytes()
    assert b"X-WR-CALNAME:GroupeIMP\r\n" in data
    assert data.count(b"BEGIN:VEVENT") == 1


def test_show_unknown_calendar_fails():
    result = runner.invoke(app, ["show", "NOPE"])

    assert result.exit_code == 1
    assert 'Calendar "NOPE" not found' in result.output


def test_events_lists_events(write_export, make_ics):
    write_export(
        "IMMFA1TD01", make_ics("IMMFA1TD01", [("u2", "Reseaux"), ("u1", "[CM] Algo")])
    )

    result = runner.invoke(app, ["events", "IMMFA1TD01"])

    assert result.exit_code == 0
    assert "2 total" in result.output
    assert "[CM] Algo" in result.output
    assert "Reseaux" in result.output
    assert result.output.index("Reseaux") < result.output.index("Algo")


@pytest.mark.parametrize("summary", ["Cours [/b] x", "[bold]TD Algo"])
def test_events_shows_bracketed_text_verbatim(write_export, make_ics, summary):
    write_export("IMMFA1TD01", make_ics("IMMFA1TD01", [("[u1]", summary)]))

    result = runner.invoke(app, ["events", "IMMFA1TD01"])

    assert result.exit_code == 0
    assert summary in result.output
    assert "[u1]" in result.output


def test_ls_shows_bracketed_calendar_names(write_export, make_ics):
    write_export("[TP]G1", make_ics("[TP]G1", []))

    result = runner.invoke(app, ["ls"])

    assert result.exit_code == 0
    assert "[TP]G1" in result.output


def test_events_for_merged_calendar_without_sources():
    result = runner.invoke(app, ["events", "GroupeIMP"])

    assert result.exit_code == 1
    assert "No calendars found" in result.output


def test_invalid_configuration_exits(monkeypatch, tmp_path):
    monkeypatch.setenv("CALENDAR_MERGES_FILE", str(tmp_path / "missing.json"))

    result = runner.invoke(app, ["ls"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_serve_runs_flask(monkeypatch):
    calls = {}

    def fake_run(self, host=None, port=None, debug=None, **options):
        calls.update(host=host, port=port, debug=debug)

    monkeypatch.setattr(Flask, "run", fake_run)

    result = runner.invoke(app, ["serve", "--port", "7000"])

    assert result.exit_code == 0
    assert calls == {"host": "0.0.0.0", "port": 7000, "debug": False}
    assert "Calendar server running at http://localhost:7000" in result.output
    assert "http://localhost:7000/calendar/GroupeIMP" in result.output


def test_setup_logging_writes_tagged_file(tmp_path):
    config = ServerConfig(log_dir=tmp_path / "logs", database_name="ADEPROD_TEST")

    setup_logging(config=config)
    setup_logging(verbose=True, config=config)
    logging.getLogger("adecal.test").info("served IMMFA1TD01")

    names = [handler.get_name() for handler in logging.getLogger().handlers]
    assert names.count("adecal-file") == 1
    assert names.count("adecal-console") == 1
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_text = (tmp_path / "logs" / config.log_filename).read_text(encoding="utf-8")
    assert "[ADEPROD_TEST] adecal.test INFO: served IMMFA1TD01" in log_text
