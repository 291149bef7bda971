"""Tests for merging calendars."""

import pytest

from adecal.parsing.ics_blocks import extract_uid, parse_document, parse_events
from adecal.processing.calendar_merger import deduplicate_events, merge_documents


def test_merge_first_source_wins_on_uid_conflict(make_ics):
    """A {u1, u2} + B {u2, u3} gives u1, u2 and u3 with A's copy of u2."""
    source_a = make_ics("IMMFA1TD01", [("u1", "A one"), ("u2", "A two")])
    source_b = make_ics("IMMFA1CM01", [("u2", "B two"), ("u3", "B three")])

    merged = merge_documents([source_a, source_b], "GroupeIMP")

    events = parse_events(merged)
    assert [extract_uid(event) for event in events] == ["u1", "u2", "u3"]
    assert "SUMMARY:A two" in merged
    assert "SUMMARY:B two" not in merged
    a_events = parse_events(source_a)
    b_events = parse_events(source_b)
    assert events == [a_events[0], a_events[1], b_events[1]]


def test_merge_priority_follows_source_order(make_ics):
    source_a = make_ics("A", [("u2", "A two")])
    source_b = make_ics("B", [("u2", "B two")])

    merged = merge_documents([source_b, source_a], "AB")

    assert "SUMMARY:B two" in merged
    assert "SUMMARY:A two" not in merged


def test_merge_keeps_events_without_uid(make_ics):
    """Identical UID-less events are never deduplicated."""
    source_a = make_ics("A", [(None, "Same"), (None, "Same")])
    source_b = make_ics("B", [(None, "Same")])

    merged = merge_documents([source_a, source_b], "AB")

    assert len(parse_events(merged)) == 3


def test_merge_sets_virtual_calendar_name(make_ics):
    source_a = make_ics("A", [("u1", "x")])
    source_b = make_ics("B", [("u2", "y")])

    merged = merge_documents([source_a, source_b], "GroupeIMP")

    assert merged.count("X-WR-CALNAME:") == 1
    assert "X-WR-CALNAME:GroupeIMP" in merged
    assert "X-WR-TIMEZONE:Europe/Paris" in merged


def test_merge_uses_first_header_and_footer(make_ics):
    source_a = make_ics("A", [("u1", "x")], crlf=True, header_extra=["X-SOURCE:a"])
    source_b = make_ics("B", [("u2", "y")], header_extra=["X-SOURCE:b"])

    document = parse_document(merge_documents([source_a, source_b], "AB"))

    assert "X-SOURCE:a" in document.header
    assert "X-SOURCE:b" not in document.header
    assert document.footer == "\nEND:VCALENDAR\r\n"


def test_merge_skips_documents_without_events_for_header(make_ics):
    empty = make_ics("Empty", [], header_extra=["X-SOURCE:empty"])
    source = make_ics("B", [("u1", "x")], header_extra=["X-SOURCE:b"])

    merged = merge_documents([empty, source], "AB")

    assert "X-SOURCE:b" in merged
    assert "X-SOURCE:empty" not in merged
    assert len(parse_events(merged)) == 1


def test_merge_without_any_events(make_ics):
    merged = merge_documents([make_ics("A", []), make_ics("B", [])], "AB")

    assert merged == make_ics("AB", [])


def test_merge_single_document_renames_only(make_ics):
    source = make_ics("A", [("u1", "x"), ("u1", "dup")])

    merged = merge_documents([source], "Solo")

    assert merged == make_ics("Solo", [("u1", "x")])


def test_merge_requires_documents():
    with pytest.raises(ValueError):
        merge_documents([], "Nothing")


def test_deduplicate_events_keeps_first_occurrence():
    events = [
        "BEGIN:VEVENT\nUID:a\nSUMMARY:1\nEND:VEVENT",
        "BEGIN:VEVENT\nSUMMARY:2\nEND:VEVENT",
        "BEGIN:VEVENT\nUID:a\nSUMMARY:3\nEND:VEVENT",
        "BEGIN:VEVENT\nSUMMARY:2\nEND:VEVENT",
    ]

    assert deduplicate_events(events) == [events[0], events[1], events[3]]
