"""
Security-Sensitive Validators

Password strength and payment card numbers.
"""

import re
from typing import Any

from ..config.options import CheckOptions
from .base import Kind, Outcome, Rule, as_text

SPECIAL_CHAR_PATTERN = re.compile(r"[\W_]")
DIGIT_PATTERN = re.compile(r"[0-9]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")

VISA_PATTERN = re.compile(r"4[0-9]{12}(?:[0-9]{3})?")


class PasswordRule(Rule):
    """
    Password that passes every requested strength check.

    A ``require_*`` check runs whenever its option is set, even to False:
    ``{"require_numbers": False}`` still demands a digit.
    """

    kind = Kind.PASSWORD

    CHARACTER_CHECKS = (
        ("require_special_chars", SPECIAL_CHAR_PATTERN),
        ("require_numbers", DIGIT_PATTERN),
        ("require_uppercase", UPPERCASE_PATTERN),
        ("require_lowercase", LOWERCASE_PATTERN),
    )

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text is None:
            return

        outcome.valid = True

        if options.min_length is not None and len(text) < options.min_length:
            outcome.valid = False

        if options.max_length is not None and len(text) > options.max_length:
            outcome.valid = False

        for option_name, pattern in self.CHARACTER_CHECKS:
            if getattr(options, option_name) is not None and not pattern.search(text):
                outcome.valid = False


class CreditCardRule(Rule):
    """Visa card number: 13 or 16 digits starting with 4"""

    kind = Kind.CREDIT_CARD

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text is not None and VISA_PATTERN.fullmatch(text):
            outcome.valid = True
            outcome.card_type = "Visa"
