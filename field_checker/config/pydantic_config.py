"""
Pydantic-based configuration system for the Field Checker.

Validator-wide defaults live in ``ValidatorSettings``. They can be loaded
from a TOML or JSON file and overridden from the environment through
``ConfigurationManager``.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Literal, Optional

import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.date_formats import normalize_format
from ..utils.error_handler import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "FIELD_CHECKER_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ValidatorSettings(BaseModel):
    """Defaults applied when a check does not override them."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date_format: str = Field(
        default="%Y-%m-%d",
        description="Format used by the 'date' kind when no format option is given",
    )
    time_format: str = Field(
        default="%H:%M:%S",
        description="Format used by the 'time' kind when no format option is given",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Level applied to the field_checker logger by setup_logging",
    )

    @field_validator("date_format", "time_format")
    @classmethod
    def validate_format(cls, v):
        """Translate PHP-style formats and reject unsupported directives."""
        return normalize_format(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


class ConfigurationManager:
    """Manages loading and validation of settings from multiple sources."""

    DEFAULT_FILENAMES = ("field_checker.toml", "field_checker.json")

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to configuration file (TOML or JSON)
        """
        self._config: Optional[ValidatorSettings] = None
        self._load_configuration(Path(config_path) if config_path else None)

    def _get_default_config_paths(self) -> List[Path]:
        """Get list of default configuration file paths to try."""
        return [Path.cwd() / name for name in self.DEFAULT_FILENAMES]

    def _load_configuration(self, config_path: Optional[Path] = None) -> None:
        """Load configuration from file or use defaults."""
        config_data: Dict = {}

        if config_path:
            config_data = self._load_config_file(config_path)
        else:
            for path in self._get_default_config_paths():
                if path.exists():
                    logger.info(f"Loading validator settings from {path}")
                    config_data = self._load_config_file(path)
                    break

        self._load_overrides_from_env(config_data)

        try:
            self._config = ValidatorSettings(**config_data)
        except ValidationError as e:
            message = format_config_error(e)
            logger.warning(message)
            raise ConfigurationError(message) from e

    def _load_config_file(self, config_path: Path) -> Dict:
        """Load configuration from TOML or JSON file."""
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in (".toml", ".json"):
            raise ConfigurationError(
                f"Unsupported configuration file format: {config_path.suffix}"
            )

        try:
            if suffix == ".toml":
                data = toml.load(config_path)
            else:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
        except (OSError, ValueError, toml.TomlDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {config_path} must be a table of settings"
            )

        # Settings may sit at the top level or under a [field_checker] table
        return dict(data.get("field_checker", data))

    def _load_overrides_from_env(self, config_data: Dict) -> None:
        """Apply FIELD_CHECKER_* environment variables over file values."""
        for field_name in ValidatorSettings.model_fields:
            env_value = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if env_value:
                config_data[field_name] = env_value

    @property
    def config(self) -> ValidatorSettings:
        """Get the current configuration."""
        if not self._config:
            raise RuntimeError("Configuration not loaded")
        return self._config

    def create_sample_config(self, output_path: Path, format: str = "toml") -> None:
        """Create a sample configuration file."""
        sample_config = {
            "field_checker": {
                "date_format": "%Y-%m-%d",
                "time_format": "%H:%M:%S",
                "log_level": "WARNING",
            }
        }

        if format.lower() == "toml":
            with open(output_path, "w", encoding="utf-8") as f:
                toml.dump(sample_config, f)
        elif format.lower() == "json":
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(sample_config, f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {format}")


class ConfigurationErrorFormatter:
    """Formats Pydantic validation errors into readable messages."""

    @staticmethod
    def format_validation_error(error: ValidationError) -> str:
        """
        Convert Pydantic ValidationError into one line per problem.

        Args:
            error: Pydantic ValidationError instance

        Returns:
            Formatted error message
        """
        error_messages = []

        for error_detail in error.errors():
            location = ConfigurationErrorFormatter._format_error_location(
                error_detail["loc"]
            )
            error_messages.append(
                ConfigurationErrorFormatter._format_by_error_type(
                    location,
                    error_detail["type"],
                    error_detail,
                    error_detail.get("input", "N/A"),
                )
            )

        return "\n".join(error_messages)

    @staticmethod
    def _format_error_location(location: tuple) -> str:
        """Format the error location path."""
        if not location:
            return "options"

        path_parts = []
        for part in location:
            if isinstance(part, str):
                path_parts.append(part)
            else:
                path_parts.append(f"[{part}]")

        return ".".join(path_parts)

    @staticmethod
    def _format_by_error_type(
        location: str, error_type: str, error_detail: dict, input_value
    ) -> str:
        """Format error message based on Pydantic error type."""
        if error_type == "extra_forbidden":
            return f"{location}: Unknown option"

        elif error_type == "value_error":
            msg = error_detail.get("msg", "Invalid value")
            msg = msg.replace("Value error, ", "", 1)
            return f"{location}: {msg} (got: {input_value!r})"

        elif error_type in [
            "greater_than_equal",
            "less_than_equal",
            "greater_than",
            "less_than",
        ]:
            limit = error_detail.get("ctx", {}).get(
                "ge", error_detail.get("ctx", {}).get("le", "limit")
            )
            operator = {
                "greater_than_equal": ">=",
                "less_than_equal": "<=",
                "greater_than": ">",
                "less_than": "<",
            }.get(error_type, "?")
            return (
                f"{location}: Value must be {operator} {limit} "
                f"(got: {input_value!r})"
            )

        elif error_type == "literal_error":
            expected = error_detail.get("ctx", {}).get("expected", "valid option")
            return f"{location}: Must be one of {expected} (got: {input_value!r})"

        else:
            msg = error_detail.get("msg", "Invalid value")
            return f"{location}: {msg} (got: {input_value!r})"


def format_config_error(error: Exception) -> str:
    """
    Format any configuration-related error into a readable message.

    Args:
        error: Exception that occurred while building options or settings

    Returns:
        Formatted error message
    """
    if isinstance(error, ValidationError):
        return ConfigurationErrorFormatter.format_validation_error(error)

    return f"{type(error).__name__}: {error}"
