"""
Format dispatch: renders a normalized instant into one of the named output
formats or a caller-supplied pattern.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Union

from smartdate.config import config
from smartdate.models.formats import OutputFormat
from smartdate.models.options import DateOptions
from smartdate.models.result import DateResult, ErrorKind, RenderedValue
from smartdate.utils.date_utils import (
    epoch_ms,
    format_pattern,
    human_distance,
    now_local,
    to_iso_utc,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# str.format templates for the fixed formats; {d} is the instant.
# Month names come from %b/%B, the day is never zero-padded.
NAMED_TEMPLATES = {
    OutputFormat.PLAIN_DATE: "{d.year:04d}-{d:%m-%d}",
    OutputFormat.DATE_TIME: "{d.year:04d}-{d:%m-%d %H:%M}",
    OutputFormat.SHORT_MONTH_YEAR: "{d:%b} {d.day}, {d.year:04d}",
    OutputFormat.LONG_MONTH_YEAR: "{d:%B} {d.day}, {d.year:04d}",
    OutputFormat.SHORT_MONTH_TIME: "{d:%b} {d.day}, {d:%H:%M}",
    OutputFormat.FULL_DATE_TIME: "{d:%b} {d.day}, {d.year:04d}, {d:%H:%M}",
    OutputFormat.MONTH_DAY: "{d:%b} {d.day}",
}


class FormatDispatcher:
    """
    Renders instants by output format name.

    Every OutputFormat member has exactly one renderer; unknown names are
    reported as errors instead of falling back to a default.
    """

    def __init__(self, clock: Clock = None, locale: str = None):
        """
        Initialize the FormatDispatcher.

        Args:
            clock: Returns the current instant, read when rendering "relative"
            locale: Default locale for custom patterns
        """
        self.clock = clock or now_local
        self.locale = locale or config.DEFAULT_LOCALE
        self._renderers: dict[OutputFormat, Callable[[datetime, DateOptions, datetime], Union[RenderedValue, DateResult]]] = {
            OutputFormat.ISO: lambda d, _, now: to_iso_utc(d),
            OutputFormat.TIMESTAMP_SECONDS: lambda d, _, now: epoch_ms(d) // 1000,
            OutputFormat.TIMESTAMP_MS: lambda d, _, now: epoch_ms(d),
            OutputFormat.RELATIVE: lambda d, _, now: human_distance(d, now, add_suffix=True),
            OutputFormat.CUSTOM: self._render_custom,
        }
        for fmt, template in NAMED_TEMPLATES.items():
            self._renderers[fmt] = lambda d, _, now, template=template: template.format(d=d)

        missing = set(OutputFormat) - set(self._renderers)
        if missing:
            raise RuntimeError(f"No renderer for output formats: {sorted(f.value for f in missing)}")

    def render(
        self,
        instant: datetime,
        output_format: Union[OutputFormat, str],
        options: Optional[DateOptions] = None,
        now: Optional[datetime] = None,
    ) -> DateResult:
        """
        Render a normalized instant.

        Args:
            instant: Aware datetime produced by the InputNormalizer
            output_format: OutputFormat member or its name, e.g. "YYYY-MM-DD"
            options: Per-call options (custom_format, locale)
            now: Current instant for "relative"; read from the clock once if omitted

        Returns:
            DateResult with the rendered value and the instant, or an error
        """
        options = options or DateOptions()

        try:
            fmt = OutputFormat.resolve(output_format)
        except ValueError:
            return DateResult.failure(
                ErrorKind.UNSUPPORTED_OUTPUT_FORMAT,
                f"Unsupported output format: {getattr(output_format, 'value', output_format)}",
            )

        rendered = self._renderers[fmt](instant, options, now if now is not None else self.clock())
        if isinstance(rendered, DateResult):
            return rendered
        return DateResult.ok(rendered, instant)

    def _render_custom(self, instant: datetime, options: DateOptions, now: datetime) -> Union[RenderedValue, DateResult]:
        pattern = options.custom_format
        if not pattern:
            return DateResult.failure(
                ErrorKind.MISSING_CUSTOM_FORMAT,
                "Custom format requires 'customFormat' option to be provided",
            )

        try:
            return format_pattern(instant, pattern, locale=options.locale or self.locale)
        except (ValueError, KeyError) as e:
            logger.debug(f"Rejected custom format {pattern!r}: {e}")
            return DateResult.failure(ErrorKind.INVALID_CUSTOM_FORMAT, f"Invalid custom format: {pattern}")
