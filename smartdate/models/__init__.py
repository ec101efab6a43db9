"""Data models for the smartdate library."""

from .formats import OutputFormat
from .options import DateOptions, TimestampUnit
from .result import DateError, DateResult, ErrorKind, RenderedValue

__all__ = [
    "OutputFormat",
    "DateOptions",
    "TimestampUnit",
    "DateError",
    "DateResult",
    "ErrorKind",
    "RenderedValue",
]
