"""
Error Hierarchy for the Field Checker

A failed check is never an exception: it is reported through
``Outcome.valid``. The exceptions below are reserved for callers that
misconfigure the validator, so that "bad input" can always be told apart
from "bad validator setup".
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Categories of fatal errors raised by the validator."""

    INVALID_OPTION = "invalid_option"  # Malformed per-call options
    FILE_ACCESS = "file_access"  # Filesystem refused a lookup
    CONFIGURATION = "configuration"  # Settings file or model is unusable


# ============================================================================
# Unified Exception Hierarchy for Field Checker
# ============================================================================
# All custom exceptions for the field checker are defined here.
# Import these exceptions from field_checker.utils.error_handler
# ============================================================================


class FieldCheckerError(Exception):
    """Base exception for all field checker errors."""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


# ============================================================================
# Option Errors
# ============================================================================


class InvalidOptionError(FieldCheckerError):
    """Options passed to a check are malformed (bad regex, unknown key, ...)."""

    kind = ErrorKind.INVALID_OPTION


# ============================================================================
# Filesystem Errors
# ============================================================================


class FileAccessError(FieldCheckerError):
    """The filesystem refused to report on a path for a reason other than absence."""

    kind = ErrorKind.FILE_ACCESS

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, {"path": path} if path is not None else None)
        self.path = path


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(FieldCheckerError):
    """Validator settings could not be loaded or validated."""

    kind = ErrorKind.CONFIGURATION
