"""
Logging configuration for the Field Checker.

The library itself only creates loggers under the ``field_checker``
namespace; applications that want to see them call ``setup_logging``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config=None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the ``field_checker`` logger hierarchy.

    Args:
        config: Optional ValidatorSettings; its ``log_level`` is applied
        log_file: Optional log file path; parent directories are created

    Returns:
        The configured ``field_checker`` package logger
    """
    log_level = config.log_level if config is not None else "WARNING"

    package_logger = logging.getLogger("field_checker")
    package_logger.setLevel(getattr(logging, log_level.upper()))

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.debug(f"Logging configured - level: {log_level}")

    return package_logger
