"""Normalize date-like values and render them in named or smart formats."""

from .api import convert_date, format_date, get_smart_date
from .models import DateError, DateOptions, DateResult, ErrorKind, OutputFormat

__all__ = [
    "convert_date",
    "format_date",
    "get_smart_date",
    "DateError",
    "DateOptions",
    "DateResult",
    "ErrorKind",
    "OutputFormat",
]
