#!/usr/bin/env python3
"""
Debug script to show how an input value renders in every output format.

Usage:
    python debug_formats.py 1684150200
    python debug_formats.py "2023-05-15T14:30:00.000Z" --ms
"""

import logging
import sys
from dotenv import load_dotenv

load_dotenv()

from smartdate import OutputFormat, format_date, get_smart_date
from smartdate.config import config

logging.basicConfig(
    level=logging.DEBUG if config.DEBUG else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def parse_value(raw: str):
    """Command-line values are numbers when they look like numbers."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def main():
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if not args:
        print("ERROR: pass a date value, e.g. 1684150200 or 2023-05-15")
        return

    problems = config.validate()
    if problems:
        print(f"Configuration problems: {'; '.join(problems)}\n")

    value = parse_value(args[0])
    options = {
        "timestamp_unit": "milliseconds" if "--ms" in sys.argv else config.get_timestamp_unit(),
        "custom_format": "dddd, MMMM Do YYYY [at] HH:mm",
    }

    print(f"Input: {value!r}\n")
    print("=" * 50)
    for fmt in OutputFormat:
        result = format_date(value, fmt, options)
        shown = result.value if result.success else f"ERROR ({result.error_kind.value}): {result.error}"
        print(f"  {fmt.value:<20} {shown}")
    print("=" * 50)
    print(f"  {'smart':<20} {get_smart_date(value, options)}")


if __name__ == "__main__":
    main()
