"""
Date and Time Validators

A value is valid only if it parses under the format AND formatting the parsed
result gives back the exact same string. The round trip rejects values a
lenient parser would normalise, such as unpadded fields.
"""

from datetime import datetime
from typing import Any

from ..config.options import CheckOptions
from ..utils.date_formats import DIRECTIVE_PATTERN
from .base import Kind, Outcome, Rule, as_text


def format_datetime(moment: datetime, fmt: str) -> str:
    """
    Format ``moment`` under ``fmt`` with ``%Y`` always four digits wide.

    The C library's strftime leaves years below 1000 unpadded, while strptime
    only reads four-digit years.
    """

    def expand(match):
        if match.group(1) == "Y":
            return f"{moment.year:04d}"
        return match.group(0)

    return moment.strftime(DIRECTIVE_PATTERN.sub(expand, fmt))


def round_trips(text: str, fmt: str) -> bool:
    """Whether ``text`` parses under ``fmt`` and formats back unchanged."""
    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError:
        return False
    return format_datetime(parsed, fmt) == text


class _TemporalRule(Rule):
    """Round-trip check against the ``format`` option or a default format"""

    def __init__(self, default_format: str):
        super().__init__()
        self.default_format = default_format

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text is None:
            return

        fmt = options.format or self.default_format
        if round_trips(text, fmt):
            outcome.valid = True


class DateRule(_TemporalRule):
    kind = Kind.DATE


class TimeRule(_TemporalRule):
    kind = Kind.TIME
