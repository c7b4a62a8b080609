"""
Utility modules for the Field Checker.

This package contains the error hierarchy, date format handling and
logging setup shared by the validators.
"""

from .date_formats import normalize_format, translate_php_format
from .error_handler import (
    ConfigurationError,
    ErrorKind,
    FieldCheckerError,
    FileAccessError,
    InvalidOptionError,
)
from .logging_setup import setup_logging

__all__ = [
    # Errors
    "ErrorKind",
    "FieldCheckerError",
    "InvalidOptionError",
    "FileAccessError",
    "ConfigurationError",
    # Date formats
    "normalize_format",
    "translate_php_format",
    # Logging
    "setup_logging",
]
