"""
Validators Package

One rule per kind, grouped by family. The Validator in
``field_checker.core.validator`` maps each Kind to its rule.
"""

# Base classes
from .base import Kind, Outcome, Rule, as_text

# Contact validators
from .contact import EmailRule, MobileRule, PhoneRule

# File validators
from .files import FileSizeRule, FileSystem, FileTypeRule, LocalFileSystem, extension_of

# Numeric validators
from .numeric import (
    BooleanRule,
    FloatRule,
    IntegerRule,
    MultipleOfRule,
    NumericRule,
    RangeRule,
    is_multiple,
    parse_number,
)

# Primitive validators
from .primitives import AlphabeticRule, AlphanumericRule, PatternRule, TextRule

# Security validators
from .security import CreditCardRule, PasswordRule

# Date and time validators
from .temporal import DateRule, TimeRule, round_trips

# URL validators
from .url import URLRule, validate_url_format

__all__ = [
    # Base classes
    "Kind",
    "Outcome",
    "Rule",
    "as_text",
    # Contact
    "EmailRule",
    "PhoneRule",
    "MobileRule",
    # Files
    "FileSystem",
    "LocalFileSystem",
    "FileTypeRule",
    "FileSizeRule",
    "extension_of",
    # Numeric
    "NumericRule",
    "BooleanRule",
    "IntegerRule",
    "FloatRule",
    "RangeRule",
    "MultipleOfRule",
    "is_multiple",
    "parse_number",
    # Primitives
    "TextRule",
    "AlphanumericRule",
    "AlphabeticRule",
    "PatternRule",
    # Security
    "PasswordRule",
    "CreditCardRule",
    # Date and time
    "DateRule",
    "TimeRule",
    "round_trips",
    # URL
    "URLRule",
    "validate_url_format",
]
