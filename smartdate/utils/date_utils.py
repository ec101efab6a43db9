"""Date parsing and formatting utilities."""

import math
import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

import pendulum
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

# Tokens the pattern formatter understands. Bracketed text and backslash
# escapes are literals.
_PATTERN_TOKEN_RE = re.compile(
    r"\[[^\[]*\]|\\."
    r"|LTS|LT|LL?L?L?"
    r"|YYYY|YY|Y"
    r"|Qo?|Mo|MM?M?M?"
    r"|Do|DDDo|DD?D?D?"
    r"|do|dd?d?d?|E{1,4}"
    r"|wo|ww?|Wo|WW?"
    r"|a|A|hh?|HH?|kk?|mm?|ss?|S{1,9}"
    r"|x|X|zz?|ZZ?"
)
_LETTER_RE = re.compile(r"[A-Za-z]")


def parse_freeform(date_string: str) -> Optional[datetime]:
    """
    Parse a date string into a datetime.
    Handles ISO-8601 and the looser formats dateutil recognizes.

    Args:
        date_string: Date string in various formats (ISO, US, etc.)

    Returns:
        datetime (naive or aware, as parsed) or None if parsing fails
    """
    if not date_string:
        return None

    try:
        # Use dateutil for flexible parsing
        return date_parser.parse(date_string)
    except (ValueError, OverflowError, TypeError):
        return None


def to_instant(value: Union[date, datetime]) -> Optional[datetime]:
    """
    Convert a date or datetime to an aware local-time instant with
    millisecond precision.

    Naive datetimes are read as local wall time and plain dates as local
    midnight. Returns None if the value cannot be placed in the local zone.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())

    try:
        local = value.astimezone()
    except (OverflowError, ValueError, OSError):
        return None
    return local.replace(microsecond=local.microsecond // 1000 * 1000)


def instant_from_epoch_ms(ms: float) -> Optional[datetime]:
    """Instant for a millisecond epoch offset, or None if it is out of range."""
    if not math.isfinite(ms):
        return None

    try:
        utc = EPOCH + timedelta(milliseconds=int(ms))
    except OverflowError:
        return None
    return to_instant(utc)


def epoch_ms(instant: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return (instant - EPOCH) // ONE_MS


def local_calendar_date(year: int, month: int, day: int) -> Optional[datetime]:
    """
    Local midnight for year/month/day.

    Out-of-range months and days roll over into neighbouring months the way a
    calendar constructor does, e.g. (2023, 2, 30) -> March 2nd and
    (2023, 13, 1) -> January 1st 2024.

    Raises:
        ValueError: if the year itself is outside the supported range
    """
    start = datetime(year, 1, 1)
    return to_instant(start + relativedelta(months=month - 1, days=day - 1))


def now_local() -> datetime:
    """Return the current time as an aware local datetime."""
    return datetime.now().astimezone()


def is_valid_instant(instant) -> bool:
    """True for an aware datetime that maps to a real point in time."""
    if not isinstance(instant, datetime) or instant.utcoffset() is None:
        return False

    try:
        instant.timestamp()
    except (OverflowError, ValueError, OSError):
        return False
    return True


def to_iso_utc(instant: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2023-05-15T14:30:00.000Z"""
    utc = instant.astimezone(timezone.utc)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def check_pattern(pattern: str) -> None:
    """
    Reject patterns containing letters that are not formatting tokens.

    Raises:
        ValueError: if an unescaped letter is not a known token
    """
    leftover = _PATTERN_TOKEN_RE.sub("", pattern)
    unknown = _LETTER_RE.findall(leftover)
    if unknown:
        raise ValueError(f"Unrecognized token(s) {''.join(sorted(set(unknown)))!r} in pattern {pattern!r}")


def format_pattern(instant: datetime, pattern: str, locale: Optional[str] = None) -> str:
    """
    Format an instant with a token pattern such as "dddd, MMMM Do YYYY".

    Args:
        instant: Aware datetime to format
        pattern: Token pattern; wrap literal text in [brackets]
        locale: Locale for month and weekday names (default: "en")

    Returns:
        Formatted date string

    Raises:
        ValueError: if the pattern has unknown tokens or the locale is unknown
    """
    check_pattern(pattern)
    return pendulum.instance(instant).format(pattern, locale=locale or "en")


def human_distance(instant: datetime, other: datetime, add_suffix: bool = True) -> str:
    """
    Human-readable distance between two instants, e.g. "3 hours".

    With add_suffix the result reads relative to ``other``:
    "3 hours ago" when instant is earlier, "in 3 hours" when it is later.
    """
    distance = pendulum.instance(instant).diff_for_humans(
        pendulum.instance(other), absolute=True, locale="en"
    )
    if not add_suffix:
        return distance
    return f"{distance} ago" if instant <= other else f"in {distance}"
