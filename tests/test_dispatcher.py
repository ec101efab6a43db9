from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from smartdate.models.formats import OutputFormat
from smartdate.models.options import DateOptions
from smartdate.models.result import ErrorKind
from smartdate.services.dispatcher import FormatDispatcher

INSTANT = datetime(2023, 5, 15, 14, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("ISO", "2023-05-15T14:30:00.000Z"),
        ("YYYY-MM-DD", "2023-05-15"),
        ("YYYY-MM-DD HH:MM", "2023-05-15 14:30"),
        ("MMM D, YYYY", "May 15, 2023"),
        ("MMMM D, YYYY", "May 15, 2023"),
        ("MMM D, HH:mm", "May 15, 14:30"),
        ("MMM D YYYY, HH:mm", "May 15, 2023, 14:30"),
        ("timestamp-seconds", 1684161000),
        ("timestamp-ms", 1684161000000),
        ("month-day", "May 15"),
    ],
)
def test_named_formats(fmt: str, expected) -> None:
    result = FormatDispatcher().render(INSTANT, fmt)
    assert result.success
    assert result.value == expected
    assert result.date == INSTANT


def test_day_is_not_zero_padded_and_month_name_is_full() -> None:
    instant = datetime(2023, 1, 3, 9, 5, tzinfo=timezone.utc)
    dispatcher = FormatDispatcher()
    assert dispatcher.render(instant, OutputFormat.LONG_MONTH_YEAR).value == "January 3, 2023"
    assert dispatcher.render(instant, OutputFormat.SHORT_MONTH_TIME).value == "Jan 3, 09:05"


def test_timestamp_seconds_floors() -> None:
    instant = datetime(2023, 5, 15, 14, 30, 0, 999000, tzinfo=timezone.utc)
    assert FormatDispatcher().render(instant, "timestamp-seconds").value == 1684161000


def test_relative_reads_clock_at_render_time() -> None:
    now = [INSTANT + timedelta(hours=1)]
    dispatcher = FormatDispatcher(clock=lambda: now[0])
    assert dispatcher.render(INSTANT, "relative").value == "1 hour ago"

    now[0] = INSTANT + timedelta(hours=3)
    assert dispatcher.render(INSTANT, "relative").value == "3 hours ago"

    now[0] = INSTANT - timedelta(days=2)
    assert dispatcher.render(INSTANT, "relative").value == "in 2 days"


def test_custom_format() -> None:
    options = DateOptions(custom_format="dddd, MMMM Do YYYY [at] HH:mm")
    result = FormatDispatcher().render(INSTANT, OutputFormat.CUSTOM, options)
    assert result.success
    assert result.value == "Monday, May 15th 2023 at 14:30"


def test_custom_format_uses_locale() -> None:
    options = DateOptions(custom_format="D MMMM YYYY", locale="de")
    assert FormatDispatcher().render(INSTANT, "custom", options).value == "15 Mai 2023"


def test_custom_format_missing() -> None:
    for options in (None, DateOptions(), DateOptions(custom_format="")):
        result = FormatDispatcher().render(INSTANT, "custom", options)
        assert not result.success
        assert result.error_kind == ErrorKind.MISSING_CUSTOM_FORMAT
        assert result.error == "Custom format requires 'customFormat' option to be provided"


def test_custom_format_rejected() -> None:
    result = FormatDispatcher().render(INSTANT, "custom", DateOptions(custom_format="yyyy-qq"))
    assert not result.success
    assert result.error_kind == ErrorKind.INVALID_CUSTOM_FORMAT
    assert "yyyy-qq" in result.error


def test_custom_format_unknown_locale() -> None:
    options = DateOptions(custom_format="MMMM", locale="xx-not-a-locale")
    result = FormatDispatcher().render(INSTANT, "custom", options)
    assert result.error_kind == ErrorKind.INVALID_CUSTOM_FORMAT


def test_unsupported_output_format() -> None:
    result = FormatDispatcher().render(INSTANT, "DD/MM/YYYY")
    assert not result.success
    assert result.error_kind == ErrorKind.UNSUPPORTED_OUTPUT_FORMAT
    assert result.error == "Unsupported output format: DD/MM/YYYY"


def test_every_format_has_a_renderer() -> None:
    options = DateOptions(custom_format="YYYY")
    dispatcher = FormatDispatcher(clock=lambda: INSTANT)
    for fmt in OutputFormat:
        assert dispatcher.render(INSTANT, fmt, options).success, fmt


def test_explicit_now_overrides_clock() -> None:
    dispatcher = FormatDispatcher(clock=lambda: INSTANT + timedelta(days=400))
    result = dispatcher.render(INSTANT, "relative", now=INSTANT + timedelta(hours=2))
    assert result.value == "2 hours ago"
