"""
Input normalization: turns datetimes, epoch numbers and date strings into a
single aware instant.
"""

import logging
import numbers
import re
from datetime import date, datetime
from typing import Union

from smartdate.config import config
from smartdate.models.options import TimestampUnit
from smartdate.models.result import DateError, ErrorKind
from smartdate.utils.date_utils import (
    instant_from_epoch_ms,
    is_valid_instant,
    local_calendar_date,
    parse_freeform,
    to_instant,
)

logger = logging.getLogger(__name__)

DateInput = Union[datetime, date, int, float, str]

# Seconds-based timestamps never get this large; anything above is milliseconds
MILLISECONDS_THRESHOLD = 10_000_000_000

BARE_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class InputNormalizer:
    """
    Converts any accepted input shape into a normalized instant.

    Failures are returned as DateError values rather than raised.
    """

    def __init__(self, timestamp_unit: TimestampUnit = None):
        """
        Initialize the InputNormalizer.

        Args:
            timestamp_unit: "seconds" or "milliseconds" for numeric input
        """
        self.timestamp_unit = timestamp_unit or config.get_timestamp_unit()

    def normalize(self, value: DateInput) -> Union[datetime, DateError]:
        """
        Normalize a raw input value.

        Args:
            value: datetime, date, epoch number or date string

        Returns:
            Aware local datetime with millisecond precision, or a DateError
        """
        try:
            if isinstance(value, (datetime, date)):
                instant = to_instant(value)
            elif is_number(value):
                instant = self._from_timestamp(value)
            elif isinstance(value, str):
                instant = self._from_text(value)
            else:
                logger.debug(f"Unsupported input type {type(value).__name__}")
                return DateError(ErrorKind.UNSUPPORTED_INPUT, "Unsupported input format.")

            if not is_valid_instant(instant):
                logger.debug(f"Invalid date: {value!r}")
                return DateError(ErrorKind.INVALID_DATE, "Invalid date.")

            return instant

        except Exception as e:
            logger.debug(f"Error normalizing {value!r}: {e}")
            return DateError(ErrorKind.PARSING_ERROR, f"Date parsing error: {e}")

    def is_milliseconds(self, value: float) -> bool:
        """
        Whether a numeric timestamp should be read as milliseconds.

        A value above MILLISECONDS_THRESHOLD is always milliseconds, even when
        the configured unit is seconds.
        """
        return value > MILLISECONDS_THRESHOLD or self.timestamp_unit == "milliseconds"

    def _from_timestamp(self, value: float):
        ms = value if self.is_milliseconds(value) else value * 1000
        return instant_from_epoch_ms(ms)

    def _from_text(self, text: str):
        parsed = parse_freeform(text)
        instant = to_instant(parsed) if parsed is not None else None

        if not is_valid_instant(instant):
            # Bare YYYY-MM-DD that the parser rejected, e.g. an overflowing day
            match = BARE_DATE_RE.fullmatch(text)
            if match:
                year, month, day = (int(part) for part in match.groups())
                instant = local_calendar_date(year, month, day)

        return instant
