"""
Field Checker

Stateless, per-field input validation: check a raw value against a kind
(email, phone, date, password, ...) and get back whether it conforms plus
the facts derived from it.
"""

from .config.options import CheckOptions
from .config.pydantic_config import ConfigurationManager, ValidatorSettings
from .core.validator import Validator, check, get_default_validator
from .utils.error_handler import (
    ConfigurationError,
    ErrorKind,
    FieldCheckerError,
    FileAccessError,
    InvalidOptionError,
)
from .validators.base import Kind, Outcome
from .validators.files import FileSystem, LocalFileSystem

__version__ = "1.0.0"

__all__ = [
    "check",
    "Validator",
    "get_default_validator",
    "Kind",
    "Outcome",
    "CheckOptions",
    "ValidatorSettings",
    "ConfigurationManager",
    "FileSystem",
    "LocalFileSystem",
    "ErrorKind",
    "FieldCheckerError",
    "InvalidOptionError",
    "FileAccessError",
    "ConfigurationError",
]
