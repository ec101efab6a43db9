"""Per-call options for date conversion."""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional, Union

from smartdate.config import TIMESTAMP_UNITS, config

TimestampUnit = Literal["seconds", "milliseconds"]


@dataclass(frozen=True)
class DateOptions:
    """
    Optional settings for a single conversion call.

    Fields:
        locale: Locale for custom pattern rendering (e.g. "en", "fr", "de")
        timestamp_unit: How to read numeric input when its magnitude is ambiguous
            (default: SMARTDATE_TIMESTAMP_UNIT, or "seconds")
        custom_format: Pattern string, required for the "custom" output format

    Raises:
        ValueError: if timestamp unit is not "seconds" or "milliseconds"
    """

    locale: Optional[str] = None
    timestamp_unit: TimestampUnit = field(default_factory=config.get_timestamp_unit)
    custom_format: Optional[str] = None

    def __post_init__(self):
        if self.timestamp_unit not in TIMESTAMP_UNITS:
            raise ValueError(
                f"timestamp unit must be 'seconds' or 'milliseconds', got {self.timestamp_unit!r}"
            )

    @property
    def is_milliseconds(self) -> bool:
        return self.timestamp_unit == "milliseconds"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DateOptions":
        """
        Build options from a plain dict.

        Accepts snake_case keys as well as the camelCase spelling used by
        JSON payloads ("timestampUnit", "customFormat").
        """
        unit = values.get("timestamp_unit", values.get("timestampUnit")) or config.get_timestamp_unit()
        return cls(
            locale=values.get("locale"),
            timestamp_unit=unit,
            custom_format=values.get("custom_format", values.get("customFormat")),
        )

    @classmethod
    def coerce(cls, options: Union["DateOptions", Mapping[str, Any], None]) -> "DateOptions":
        """Return options as a DateOptions instance, applying configured defaults."""
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options or {})
