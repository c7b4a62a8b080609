"""Configuration for the Field Checker: per-call options and validator settings."""

from .options import CheckOptions
from .pydantic_config import (
    ConfigurationManager,
    ValidatorSettings,
    format_config_error,
)

__all__ = [
    "CheckOptions",
    "ConfigurationManager",
    "ValidatorSettings",
    "format_config_error",
]
