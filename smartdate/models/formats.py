"""Named output formats understood by the format dispatcher."""

from enum import Enum
from typing import Union


class OutputFormat(str, Enum):
    """
    Closed set of output formats.

    Values are the format names callers pass as plain strings, e.g.
    ``format_date(value, "YYYY-MM-DD")``.
    """

    ISO = "ISO"  # '2023-01-03T00:00:00.000Z'
    PLAIN_DATE = "YYYY-MM-DD"  # '2023-01-03'
    DATE_TIME = "YYYY-MM-DD HH:MM"  # '2023-01-03 12:30'
    SHORT_MONTH_YEAR = "MMM D, YYYY"  # 'Jan 3, 2023'
    LONG_MONTH_YEAR = "MMMM D, YYYY"  # 'January 3, 2023'
    SHORT_MONTH_TIME = "MMM D, HH:mm"  # 'Jan 3, 14:30'
    FULL_DATE_TIME = "MMM D YYYY, HH:mm"  # 'Jan 3, 2023, 14:30'
    TIMESTAMP_SECONDS = "timestamp-seconds"
    TIMESTAMP_MS = "timestamp-ms"
    RELATIVE = "relative"  # '2 hours ago', 'in 3 days'
    MONTH_DAY = "month-day"  # 'Jan 3'
    CUSTOM = "custom"  # pattern from DateOptions.custom_format

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def resolve(cls, value: Union["OutputFormat", str]) -> "OutputFormat":
        """
        Look up a format by member or name.

        Raises:
            ValueError: if the name is not one of the supported formats
        """
        if isinstance(value, cls):
            return value
        return cls(value)
