from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from agentic_todos.services import DueDateResolver
from agentic_todos.services.due_dates import WEEKDAYS

from conftest import FIXED_NOW, ZONE

NOWS = [
    FIXED_NOW,
    datetime(2026, 10, 19, 0, 0, tzinfo=ZONE),
    datetime(2026, 10, 25, 23, 59, tzinfo=ZONE),
    # Saturday night before daylight saving time ends.
    datetime(2026, 10, 31, 23, 30, tzinfo=ZONE),
    # 02:00 UTC on Thursday is still Wednesday evening locally.
    datetime(2026, 10, 22, 2, 0, tzinfo=timezone.utc),
]


@pytest.fixture
def resolver() -> DueDateResolver:
    return DueDateResolver(zone=ZONE, default_hour=9)


@pytest.mark.parametrize("now", NOWS)
@pytest.mark.parametrize("name", list(WEEKDAYS))
def test_weekday_resolves_to_next_occurrence_at_nine(resolver, name, now):
    due = resolver.resolve(name, now=now)
    local_now = now.astimezone(ZONE)

    assert due.strftime("%A").lower() == name
    assert (due.hour, due.minute, due.second) == (9, 0, 0)
    assert due.tzinfo == ZONE
    assert 0 <= (due.date() - local_now.date()).days <= 6


def test_weekday_match_includes_today(resolver):
    due = resolver.resolve("Wednesday", now=FIXED_NOW)

    assert due == datetime(2026, 10, 21, 9, 0, tzinfo=ZONE)


@pytest.mark.parametrize("text", ["friday", "FRIDAY", "  Friday  ", "fRiDaY"])
def test_weekday_match_ignores_case_and_padding(resolver, text):
    assert resolver.resolve(text, now=FIXED_NOW) == datetime(2026, 10, 23, 9, 0, tzinfo=ZONE)


def test_weekday_across_daylight_saving_change_keeps_local_nine(resolver):
    due = resolver.resolve("Sunday", now=datetime(2026, 10, 31, 23, 30, tzinfo=ZONE))

    assert due == datetime(2026, 11, 1, 9, 0, tzinfo=ZONE)
    assert due.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("text", ["", "   ", None, "tomorrow", "tomorrow 2pm", "Fri", "next week", "someday"])
def test_unparseable_text_falls_back_to_tomorrow_at_nine(resolver, text):
    assert resolver.resolve(text, now=FIXED_NOW) == datetime(2026, 10, 22, 9, 0, tzinfo=ZONE)


def test_empty_text_matches_fallback_for_free_text(resolver):
    assert resolver.resolve("", now=FIXED_NOW) == resolver.resolve("tomorrow-fallback", now=FIXED_NOW)


def test_literal_with_time_keeps_time(resolver):
    due = resolver.resolve("2026-11-05 14:15", now=FIXED_NOW)

    assert due == datetime(2026, 11, 5, 14, 15, tzinfo=ZONE)


def test_date_only_literal_is_midnight(resolver):
    due = resolver.resolve("2026-12-24", now=FIXED_NOW)

    assert due == datetime(2026, 12, 24, 0, 0, tzinfo=ZONE)


def test_literal_with_offset_is_converted_into_zone(resolver):
    due = resolver.resolve("2026-10-23T18:00:00+00:00", now=FIXED_NOW)

    assert due == datetime(2026, 10, 23, 14, 0, tzinfo=ZONE)
    assert due.tzinfo == ZONE


def test_time_only_literal_is_today(resolver):
    due = resolver.resolve("4:45 PM", now=FIXED_NOW)

    assert due == datetime(2026, 10, 21, 16, 45, tzinfo=ZONE)


def test_invalid_literal_falls_back(resolver):
    assert resolver.resolve("2026-13-45", now=FIXED_NOW) == datetime(2026, 10, 22, 9, 0, tzinfo=ZONE)


@pytest.mark.parametrize("text", ["9999-12-31T23:00-12:00", "0001-01-01T00:00+14:00"])
def test_literal_outside_calendar_range_after_conversion_falls_back(resolver, text):
    assert resolver.resolve(text, now=FIXED_NOW) == datetime(2026, 10, 22, 9, 0, tzinfo=ZONE)


def test_default_hour_is_configurable():
    resolver = DueDateResolver(zone=ZONE, default_hour=7)

    assert resolver.resolve("", now=FIXED_NOW).hour == 7
    assert resolver.resolve("Monday", now=FIXED_NOW).hour == 7


def test_now_uses_injected_clock():
    resolver = DueDateResolver(zone=ZONE, clock=lambda: datetime(2026, 10, 22, 2, 0, tzinfo=timezone.utc))

    assert resolver.now() == datetime(2026, 10, 21, 22, 0, tzinfo=ZONE)
    assert resolver.resolve("") == datetime(2026, 10, 22, 9, 0, tzinfo=ZONE)
