"""
Smart date formatting: picks an output format from how far the instant is
from now.

- Within the relative window (24 hours by default): relative time, "3 hours ago"
- Same calendar year: month, day and time, "Jun 15, 14:30"
- Different year: full date and time, "Jun 15, 2023, 14:30"
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from smartdate.config import config
from smartdate.models.formats import OutputFormat
from smartdate.models.options import DateOptions
from smartdate.models.result import DateError, RenderedValue
from smartdate.services.dispatcher import Clock, FormatDispatcher
from smartdate.services.normalizer import DateInput, InputNormalizer
from smartdate.utils.date_utils import now_local

logger = logging.getLogger(__name__)

ONE_HOUR = timedelta(hours=1)


class SmartSelector:
    """Chooses a format for an instant and renders it."""

    def __init__(
        self,
        normalizer: InputNormalizer = None,
        dispatcher: FormatDispatcher = None,
        clock: Clock = None,
        relative_window_hours: float = None,
    ):
        self.clock = clock or now_local
        self.normalizer = normalizer or InputNormalizer()
        self.dispatcher = dispatcher or FormatDispatcher(clock=self.clock)
        if relative_window_hours is None:
            relative_window_hours = config.RELATIVE_WINDOW_HOURS
        self.relative_window_hours = relative_window_hours

    def select_format(self, instant: datetime, now: datetime) -> OutputFormat:
        """
        Pick the output format for an instant relative to now.

        Future instants have negative elapsed time and so always fall inside
        the relative window.
        """
        elapsed_hours = (now - instant) / ONE_HOUR
        if elapsed_hours <= self.relative_window_hours:
            return OutputFormat.RELATIVE
        if instant.year == now.year:
            return OutputFormat.SHORT_MONTH_TIME
        return OutputFormat.FULL_DATE_TIME

    def render(self, value: DateInput, options: Optional[DateOptions] = None) -> Optional[RenderedValue]:
        """
        Normalize, choose a format and render.

        Returns:
            Rendered value, or None if the input could not be formatted
        """
        options = options or DateOptions(timestamp_unit=self.normalizer.timestamp_unit)

        try:
            instant = self.normalizer.normalize(value)
            if isinstance(instant, DateError):
                return None

            now = self.clock()
            fmt = self.select_format(instant, now)
            return self.dispatcher.render(instant, fmt, options, now=now).unwrap_or_none()

        except Exception as e:
            logger.exception(f"Smart date formatting error: {e}")
            return None
