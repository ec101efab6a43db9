"""
Public date conversion functions.

Each call builds its own normalizer and dispatcher, so calls share no state.

Example:
    >>> format_date("2023-01-03T12:30:45.000Z", "YYYY-MM-DD").value
    '2023-01-03'
    >>> convert_date(1684150200, "timestamp-ms")
    1684150200000
"""

import logging
from typing import Any, Mapping, Optional, Union

from smartdate.config import config
from smartdate.models.formats import OutputFormat
from smartdate.models.options import DateOptions
from smartdate.models.result import DateError, DateResult, ErrorKind, RenderedValue
from smartdate.services.dispatcher import FormatDispatcher
from smartdate.services.normalizer import DateInput, InputNormalizer
from smartdate.services.smart_selector import SmartSelector

logger = logging.getLogger(__name__)

OptionsArg = Union[DateOptions, Mapping[str, Any], None]


def format_date(
    value: DateInput,
    output_format: Union[OutputFormat, str] = None,
    options: OptionsArg = None,
) -> DateResult:
    """
    Convert a date-like value to the requested output format.

    Args:
        value: datetime, date, epoch timestamp (seconds or ms) or date string
        output_format: Format name (default: ISO, or SMARTDATE_DEFAULT_FORMAT)
        options: DateOptions or dict with locale / timestamp_unit / custom_format

    Returns:
        DateResult; never raises
    """
    try:
        opts = DateOptions.coerce(options)
        instant = InputNormalizer(opts.timestamp_unit).normalize(value)
        if isinstance(instant, DateError):
            return DateResult.fail(instant)

        fmt = config.get_output_format() if output_format is None else output_format
        return FormatDispatcher().render(instant, fmt, opts)

    except Exception as e:
        logger.debug(f"Date conversion failed for {value!r}: {e}")
        return DateResult.failure(ErrorKind.PARSING_ERROR, f"Date parsing error: {e}")


def convert_date(
    value: DateInput,
    output_format: Union[OutputFormat, str] = None,
    options: OptionsArg = None,
) -> Optional[RenderedValue]:
    """
    Simplified format_date: the rendered value, or None if conversion fails.
    Use format_date when the reason for a failure matters.
    """
    return format_date(value, output_format, options).unwrap_or_none()


def get_smart_date(value: DateInput, options: OptionsArg = None) -> Optional[RenderedValue]:
    """
    Format a date in the style that fits how long ago it was.

    - Within 24 hours: relative time ("3 hours ago")
    - Same year: month, day and time ("Jun 15, 14:30")
    - Different year: full date and time ("Jun 15, 2020, 14:30")

    Returns:
        Formatted string, or None if the input cannot be formatted
    """
    try:
        opts = DateOptions.coerce(options)
    except ValueError as e:
        logger.debug(f"Invalid smart date options: {e}")
        return None

    return SmartSelector(normalizer=InputNormalizer(opts.timestamp_unit)).render(value, opts)
