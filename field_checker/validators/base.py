"""
Base Validation Classes

This module provides the foundation for every kind of check: the closed set
of kinds, the Outcome returned to callers, and the Rule base class each kind
implements.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..config.options import CheckOptions


class Kind(str, Enum):
    """The fixed set of kinds a value can be checked against"""

    EMAIL = "email"
    PHONE = "phone"
    MOBILE = "mobile"
    TEXT = "text"
    URL = "url"
    DATE = "date"
    TIME = "time"
    ALPHANUMERIC = "alphanumeric"
    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    RANGE = "range"
    PATTERN = "pattern"
    PASSWORD = "password"
    FILE_TYPE = "file_type"
    FILE_SIZE = "file_size"
    CREDIT_CARD = "credit_card"
    MULTIPLE_OF = "multiple_of"

    @classmethod
    def lookup(cls, kind: Any) -> Optional["Kind"]:
        """Return the Kind named by ``kind``, or None if it names no kind."""
        if isinstance(kind, cls):
            return kind
        if not isinstance(kind, str):
            return None
        try:
            return cls(kind)
        except ValueError:
            return None


@dataclass
class Outcome:
    """Result of one check, with the facts derived from a valid value"""

    valid: bool = False
    required: bool = True

    # Derived fields, left as None when a kind does not produce them
    username: Optional[str] = None
    domain: Optional[str] = None
    length: Optional[int] = None
    country_code: Optional[str] = None
    phone_number: Optional[str] = None
    mobile_number: Optional[str] = None
    value: Optional[Union[bool, int, float]] = None
    file_extension: Optional[str] = None
    file_size: Optional[int] = None
    card_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return valid/required plus every derived field that was set"""
        result: Dict[str, Any] = {"valid": self.valid, "required": self.required}
        for item in fields(self):
            if item.name in result:
                continue
            field_value = getattr(self, item.name)
            if field_value is not None:
                result[item.name] = field_value
        return result

    def derived(self) -> Dict[str, Any]:
        """Return only the derived fields that were set"""
        result = self.to_dict()
        del result["valid"]
        del result["required"]
        return result


def as_text(value: Any) -> Optional[str]:
    """
    Render a scalar input the way the text-based kinds read it.

    Args:
        value: Raw caller-supplied value

    Returns:
        The text form, or None for values with no text form (containers,
        arbitrary objects, ints too long for decimal conversion)
    """
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, (int, float)):
        try:
            return str(value)
        except ValueError:
            # sys.get_int_max_str_digits() exceeded
            return None
    return None


class Rule(ABC):
    """Abstract base class for the check behind one kind"""

    kind: Kind

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        """
        Check a value, recording the verdict and derived fields on ``outcome``

        Args:
            value: Value to check
            options: Validated per-call options
            outcome: Outcome to fill in; arrives with ``valid`` False
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r})"
