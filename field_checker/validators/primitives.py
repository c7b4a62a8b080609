"""
Primitive Validators

This module provides the text kinds: free text with length and pattern
constraints, letters-and-digits checks, and bare pattern matching.
"""

from typing import Any

from ..config.options import CheckOptions
from .base import Kind, Outcome, Rule, as_text


class TextRule(Rule):
    """Any string, optionally bounded in length and matched against a pattern"""

    kind = Kind.TEXT

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        # Only real strings count as text; numbers are not coerced here
        if not isinstance(value, str):
            return

        outcome.valid = True
        outcome.length = len(value)

        if options.min_length is not None and len(value) < options.min_length:
            outcome.valid = False

        if options.max_length is not None and len(value) > options.max_length:
            outcome.valid = False

        if options.pattern is not None and not options.pattern.search(value):
            outcome.valid = False


class AlphanumericRule(Rule):
    """Non-empty, ASCII letters and digits only"""

    kind = Kind.ALPHANUMERIC

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text and text.isascii() and text.isalnum():
            outcome.valid = True
            outcome.length = len(text)


class AlphabeticRule(Rule):
    """Non-empty, ASCII letters only"""

    kind = Kind.ALPHABETIC

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text and text.isascii() and text.isalpha():
            outcome.valid = True
            outcome.length = len(text)


class PatternRule(Rule):
    """Value must contain a match for the ``pattern`` option"""

    kind = Kind.PATTERN

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        if options.pattern is None:
            return

        text = as_text(value)
        if text is not None and options.pattern.search(text):
            outcome.valid = True
            outcome.length = len(text)
