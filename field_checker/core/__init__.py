"""Core validation entry point."""

from .validator import (
    Validator,
    build_rule_table,
    check,
    get_default_validator,
    is_empty,
)

__all__ = [
    "Validator",
    "build_rule_table",
    "check",
    "get_default_validator",
    "is_empty",
]
