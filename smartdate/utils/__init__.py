"""Utility functions for the smartdate library."""

from .date_utils import (
    epoch_ms,
    format_pattern,
    human_distance,
    instant_from_epoch_ms,
    is_valid_instant,
    local_calendar_date,
    now_local,
    parse_freeform,
    to_instant,
    to_iso_utc,
)

__all__ = [
    "epoch_ms",
    "format_pattern",
    "human_distance",
    "instant_from_epoch_ms",
    "is_valid_instant",
    "local_calendar_date",
    "now_local",
    "parse_freeform",
    "to_instant",
    "to_iso_utc",
]
