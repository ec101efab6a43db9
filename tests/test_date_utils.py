from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from smartdate.utils.date_utils import (
    epoch_ms,
    format_pattern,
    human_distance,
    instant_from_epoch_ms,
    is_valid_instant,
    local_calendar_date,
    parse_freeform,
    to_instant,
    to_iso_utc,
)


def test_parse_freeform_iso_and_garbage() -> None:
    parsed = parse_freeform("2023-05-15T14:30:00.000Z")
    assert parsed == datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc)

    assert parse_freeform("invalid-date") is None
    assert parse_freeform("") is None


def test_to_instant_truncates_to_milliseconds() -> None:
    instant = to_instant(datetime(2023, 5, 15, 14, 30, 0, 123456))
    assert instant.microsecond == 123000
    assert instant.utcoffset() == timedelta(0)


def test_to_instant_promotes_plain_date_to_midnight() -> None:
    instant = to_instant(date(2023, 5, 15))
    assert (instant.hour, instant.minute) == (0, 0)
    assert is_valid_instant(instant)


def test_epoch_round_trip() -> None:
    instant = instant_from_epoch_ms(1684161000123)
    assert epoch_ms(instant) == 1684161000123
    assert to_iso_utc(instant) == "2023-05-15T14:30:00.123Z"


def test_epoch_out_of_range_or_not_finite() -> None:
    assert instant_from_epoch_ms(float("nan")) is None
    assert instant_from_epoch_ms(float("inf")) is None
    assert instant_from_epoch_ms(1e20) is None


def test_local_calendar_date_rolls_over_like_a_calendar() -> None:
    assert local_calendar_date(2023, 5, 15).date() == date(2023, 5, 15)
    assert local_calendar_date(2023, 2, 30).date() == date(2023, 3, 2)
    assert local_calendar_date(2023, 13, 1).date() == date(2024, 1, 1)
    assert local_calendar_date(2023, 3, 0).date() == date(2023, 2, 28)


def test_is_valid_instant_requires_aware_datetime() -> None:
    assert not is_valid_instant(None)
    assert not is_valid_instant(datetime(2023, 5, 15))
    assert not is_valid_instant("2023-05-15")
    assert is_valid_instant(datetime(2023, 5, 15, tzinfo=timezone.utc))


def test_format_pattern_tokens_and_literals() -> None:
    instant = datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc)
    assert format_pattern(instant, "YYYY-MM-DD") == "2023-05-15"
    assert format_pattern(instant, "dddd, MMMM Do YYYY") == "Monday, May 15th 2023"
    assert format_pattern(instant, "[Week of] MMM D") == "Week of May 15"


def test_format_pattern_locale() -> None:
    instant = datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc)
    assert format_pattern(instant, "MMMM", locale="fr") == "mai"


def test_format_pattern_rejects_unknown_tokens() -> None:
    instant = datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        format_pattern(instant, "yyyy-qq")


def test_human_distance_direction() -> None:
    now = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)

    assert human_distance(now - timedelta(hours=1), now) == "1 hour ago"
    assert human_distance(now + timedelta(days=3), now) == "in 3 days"
    assert human_distance(now - timedelta(hours=2), now, add_suffix=False) == "2 hours"
