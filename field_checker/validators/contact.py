"""
Contact Validators

Email addresses, phone numbers and mobile numbers. Besides the verdict,
these split a valid value into its parts (username and domain, country code
and subscriber number).
"""

import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from ..config.options import CheckOptions
from .base import Kind, Outcome, Rule, as_text

PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")
MOBILE_PATTERN = re.compile(r"\+?[1-9][0-9]{1,14}")

# Subscriber numbers are the trailing ten digits; anything before is the
# country code, including a leading '+'
SUBSCRIBER_DIGITS = 10


class EmailRule(Rule):
    """Email address, optionally restricted to one domain"""

    kind = Kind.EMAIL

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if not text or text != text.strip():
            return

        try:
            # Grammar only: no DNS lookups, no internationalized local parts
            validate_email(text, check_deliverability=False, allow_smtputf8=False)
        except EmailNotValidError as e:
            self.logger.debug(f"Rejected email address: {e}")
            return

        username, _, domain = text.rpartition("@")
        outcome.valid = True
        outcome.username = username
        outcome.domain = domain
        outcome.length = len(text)

        if options.domain is not None and options.domain != domain:
            outcome.valid = False


class _NumberRule(Rule):
    """Shared splitting for phone and mobile numbers"""

    pattern: "re.Pattern[str]"
    number_field: str

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        text = as_text(value)
        if text is None or not self.pattern.fullmatch(text):
            return

        outcome.valid = True
        outcome.length = len(text)
        outcome.country_code = text[:-SUBSCRIBER_DIGITS]
        setattr(outcome, self.number_field, text[-SUBSCRIBER_DIGITS:])


class PhoneRule(_NumberRule):
    """10 to 15 digits with an optional leading '+'"""

    kind = Kind.PHONE
    pattern = PHONE_PATTERN
    number_field = "phone_number"


class MobileRule(_NumberRule):
    """E.164-style number: optional '+', non-zero first digit, up to 15 digits"""

    kind = Kind.MOBILE
    pattern = MOBILE_PATTERN
    number_field = "mobile_number"
