"""
Result and error values passed between the normalizer, the dispatcher
and the public API.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

RenderedValue = Union[str, int]


class ErrorKind(str, Enum):
    """Reasons a conversion can fail."""

    UNSUPPORTED_INPUT = "unsupported_input"
    INVALID_DATE = "invalid_date"
    MISSING_CUSTOM_FORMAT = "missing_custom_format"
    INVALID_CUSTOM_FORMAT = "invalid_custom_format"
    UNSUPPORTED_OUTPUT_FORMAT = "unsupported_output_format"
    PARSING_ERROR = "parsing_error"


@dataclass(frozen=True)
class DateError:
    """A failed step: what went wrong and a message for humans."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class DateResult:
    """
    Outcome of a conversion.

    On success ``value`` holds the rendered output and ``date`` the normalized
    instant it was rendered from. On failure ``error`` and ``error_kind`` are
    set and the other fields are None.
    """

    success: bool
    value: Optional[RenderedValue] = None
    error: Optional[str] = None
    date: Optional[datetime] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, value: RenderedValue, instant: datetime) -> "DateResult":
        return cls(success=True, value=value, date=instant)

    @classmethod
    def fail(cls, error: DateError) -> "DateResult":
        return cls(success=False, error=error.message, error_kind=error.kind)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "DateResult":
        return cls.fail(DateError(kind, message))

    def unwrap_or_none(self) -> Optional[RenderedValue]:
        """Rendered value on success, None otherwise."""
        return self.value if self.success else None
