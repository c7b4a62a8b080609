"""
Per-call options for a single check.

Every option is optional. Unknown keys, values of the wrong type and
settings that cannot be honoured (an invalid regular expression, a zero
divisor) raise InvalidOptionError instead of failing the check silently.
"""

import logging
import math
import re
from typing import Any, Mapping, Optional, Pattern, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.date_formats import normalize_format
from ..utils.error_handler import InvalidOptionError
from .pydantic_config import format_config_error

logger = logging.getLogger(__name__)


class CheckOptions(BaseModel):
    """Options tuning how a kind is checked."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: bool = Field(
        default=False, description="Whether an empty value must still be checked"
    )

    # email
    domain: Optional[str] = Field(
        default=None, description="Domain an email address must belong to"
    )

    # text / password
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)

    # text / pattern
    pattern: Optional[Pattern[str]] = Field(
        default=None, description="Regular expression searched for in the value"
    )

    # date / time
    format: Optional[str] = Field(
        default=None, description="strftime or PHP date() format"
    )

    # range
    min: Optional[float] = None
    max: Optional[float] = None

    # file_type / file_size
    allowed_types: Tuple[str, ...] = ()
    max_size: Optional[int] = Field(default=None, ge=0)

    # multiple_of
    multiple: Union[int, float] = 1

    # password: a check runs whenever its key is set, whatever the value
    require_special_chars: Optional[bool] = None
    require_numbers: Optional[bool] = None
    require_uppercase: Optional[bool] = None
    require_lowercase: Optional[bool] = None

    @field_validator("pattern", mode="before")
    @classmethod
    def validate_pattern(cls, v):
        """Compile the pattern so a bad expression is reported up front."""
        if v is None or isinstance(v, re.Pattern):
            return v
        if not isinstance(v, str):
            raise ValueError("Pattern must be a string")
        try:
            return re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression: {e}") from e

    @field_validator("format")
    @classmethod
    def validate_format(cls, v):
        """Translate PHP-style formats and reject unsupported directives."""
        if v is None:
            return v
        return normalize_format(v)

    @field_validator("min", "max")
    @classmethod
    def validate_bound(cls, v):
        if v is not None and math.isnan(v):
            raise ValueError("Range bound cannot be NaN")
        return v

    @field_validator("multiple")
    @classmethod
    def validate_multiple(cls, v):
        """A multiple must be a finite, non-zero number."""
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("Multiple must be a finite number")
        if v == 0:
            raise ValueError("Multiple cannot be zero")
        return v

    @classmethod
    def from_mapping(
        cls, options: Union["CheckOptions", Mapping[str, Any], None]
    ) -> "CheckOptions":
        """
        Build options from whatever the caller passed.

        Args:
            options: A CheckOptions instance, a mapping of option names, or None

        Returns:
            Validated CheckOptions

        Raises:
            InvalidOptionError: If the options cannot be validated
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise InvalidOptionError(
                f"Options must be a mapping, got {type(options).__name__}"
            )

        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            message = format_config_error(e)
            logger.warning(f"Rejected check options: {message}")
            raise InvalidOptionError(message, {"options": dict(options)}) from e
