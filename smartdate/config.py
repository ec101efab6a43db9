"""
Configuration management for the smartdate library.
Loads defaults from environment variables with sensible fallbacks.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

TIMESTAMP_UNITS = ("seconds", "milliseconds")


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


class Config:
    """Library defaults loaded from environment variables."""

    # Output format used when the caller does not name one
    DEFAULT_OUTPUT_FORMAT: str = os.environ.get("SMARTDATE_DEFAULT_FORMAT", "ISO")

    # How bare numbers are interpreted ("seconds" or "milliseconds")
    DEFAULT_TIMESTAMP_UNIT: str = os.environ.get("SMARTDATE_TIMESTAMP_UNIT", "seconds").lower()

    # Locale for custom pattern rendering (named formats are always English)
    DEFAULT_LOCALE: str = os.environ.get("SMARTDATE_LOCALE", "en")

    # Smart formatting: instants up to this many hours old render as relative time
    RELATIVE_WINDOW_HOURS: int = _int_from_env("SMARTDATE_RELATIVE_WINDOW_HOURS", 24)

    DEBUG: bool = os.environ.get("DEBUG", "false").lower() == "true"

    @classmethod
    def get_timestamp_unit(cls) -> str:
        """Configured timestamp unit, falling back to seconds if unrecognized."""
        if cls.DEFAULT_TIMESTAMP_UNIT in TIMESTAMP_UNITS:
            return cls.DEFAULT_TIMESTAMP_UNIT
        return "seconds"

    @classmethod
    def get_output_format(cls) -> str:
        """Configured default output format, falling back to ISO if unrecognized."""
        from smartdate.models.formats import OutputFormat

        try:
            return OutputFormat(cls.DEFAULT_OUTPUT_FORMAT).value
        except ValueError:
            return OutputFormat.ISO.value

    @classmethod
    def validate(cls) -> list[str]:
        """Validate configuration. Returns list of problems found."""
        from smartdate.models.formats import OutputFormat

        problems = []
        if cls.DEFAULT_TIMESTAMP_UNIT not in TIMESTAMP_UNITS:
            problems.append(
                f"SMARTDATE_TIMESTAMP_UNIT must be one of {', '.join(TIMESTAMP_UNITS)}, "
                f"got '{cls.DEFAULT_TIMESTAMP_UNIT}'"
            )
        if cls.DEFAULT_OUTPUT_FORMAT not in OutputFormat.names():
            problems.append(f"SMARTDATE_DEFAULT_FORMAT '{cls.DEFAULT_OUTPUT_FORMAT}' is not a known format")
        if cls.RELATIVE_WINDOW_HOURS < 0:
            problems.append("SMARTDATE_RELATIVE_WINDOW_HOURS must not be negative")
        return problems


# Singleton instance
config = Config()
