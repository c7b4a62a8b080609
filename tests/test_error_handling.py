"""
Tests for the error hierarchy and logging setup.
"""

import logging

import pytest

from field_checker import (
    ConfigurationError,
    ErrorKind,
    FieldCheckerError,
    FileAccessError,
    InvalidOptionError,
    ValidatorSettings,
    check,
)
from field_checker.utils.logging_setup import setup_logging


class TestErrorHierarchy:
    """Test the exception classes."""

    @pytest.mark.parametrize(
        "error_class,kind",
        [
            (InvalidOptionError, ErrorKind.INVALID_OPTION),
            (FileAccessError, ErrorKind.FILE_ACCESS),
            (ConfigurationError, ErrorKind.CONFIGURATION),
        ],
    )
    def test_kinds(self, error_class, kind):
        """Each error carries its ErrorKind and shares one base class."""
        error = error_class("boom")

        assert error.kind is kind
        assert isinstance(error, FieldCheckerError)
        assert str(error) == f"[{kind.value}] boom"

    def test_file_access_error_keeps_path(self):
        """The offending path is available to callers."""
        error = FileAccessError("denied", "/etc/shadow")

        assert error.path == "/etc/shadow"
        assert error.context == {"path": "/etc/shadow"}

    def test_invalid_option_is_not_a_validation_failure(self):
        """Bad configuration raises while bad input does not."""
        assert check("abc", "pattern", {"pattern": "^a"}).valid is True
        assert check("xyz", "pattern", {"pattern": "^a"}).valid is False

        with pytest.raises(InvalidOptionError):
            check("abc", "pattern", {"pattern": "^(a"})


class TestLoggingSetup:
    """Test setup_logging."""

    def teardown_method(self):
        package_logger = logging.getLogger("field_checker")
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)

    def test_default_level(self):
        """Without settings the package logs warnings and above."""
        logger = setup_logging()

        assert logger.name == "field_checker"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_level_from_settings(self):
        """The settings' log level is applied."""
        logger = setup_logging(ValidatorSettings(log_level="debug"))

        assert logger.level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self):
        """Calling setup twice replaces the handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Check logs reach the log file."""
        log_path = tmp_path / "logs" / "checks.log"
        setup_logging(ValidatorSettings(log_level="DEBUG"), log_file=str(log_path))

        check("hello", "no_such_kind")
        for handler in logging.getLogger("field_checker").handlers:
            handler.flush()

        content = log_path.read_text(encoding="utf-8")
        assert "Unknown kind 'no_such_kind'" in content
        assert " - DEBUG - " in content

    def test_rejected_options_are_logged(self, caplog):
        """Configuration errors are logged before being raised."""
        with caplog.at_level(logging.WARNING, logger="field_checker"):
            with pytest.raises(InvalidOptionError):
                check("abc", "text", {"bogus": True})

        assert "Rejected check options" in caplog.text
