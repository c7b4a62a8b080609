"""
Tests for the date and time kinds and for format handling.
"""

from datetime import datetime, time

import pytest

from field_checker import InvalidOptionError, Validator, ValidatorSettings, check
from field_checker.utils.date_formats import normalize_format, translate_php_format
from field_checker.validators.temporal import format_datetime


class TestDate:
    """Test the date kind."""

    def test_default_format(self):
        """The default format is year-month-day."""
        outcome = check("2024-03-15", "date")

        assert outcome.to_dict() == {"valid": True, "required": True}

    @pytest.mark.parametrize(
        "value",
        ["2023-02-29", "2024-02-30", "2024-13-01", "2024-3-15", "15/03/2024", "2024-03-15 "],
    )
    def test_invalid_dates(self, value):
        """Impossible dates and anything that does not round-trip fail."""
        assert check(value, "date").valid is False

    def test_leap_day(self):
        """February 29th exists in leap years."""
        assert check("2024-02-29", "date").valid is True

    def test_custom_strftime_format(self):
        """A strftime format option overrides the default."""
        assert check("15/03/2024", "date", {"format": "%d/%m/%Y"}).valid is True
        assert check("2024-03-15", "date", {"format": "%d/%m/%Y"}).valid is False

    def test_php_style_format(self):
        """PHP date() notation is translated."""
        assert check("15.03.2024", "date", {"format": "d.m.Y"}).valid is True
        assert check("Mar 15, 2024", "date", {"format": "M d, Y"}).valid is True

    @pytest.mark.parametrize(
        "fmt", ["%Y-%m-%d", "%d/%m/%Y", "%B %d, %Y", "%a %d %b %Y", "%Y%m%d", "Y-m-d", "D, d M Y"]
    )
    def test_round_trip(self, fmt):
        """Any date formatted under F re-validates under F."""
        strftime_format = normalize_format(fmt)
        for moment in (datetime(2024, 2, 29), datetime(1999, 12, 31), datetime(2031, 7, 4)):
            formatted = moment.strftime(strftime_format)
            assert check(formatted, "date", {"format": fmt}).valid is True, formatted

    def test_years_before_1000(self):
        """Four-digit zero-padded years below 1000 round-trip."""
        assert check("0999-01-05", "date").valid is True
        assert check("05.01.0999", "date", {"format": "d.m.Y"}).valid is True
        assert check("0001-01-01", "date").valid is True
        assert check("999-01-05", "date").valid is False

    def test_format_datetime_pads_year(self):
        """%Y is always four digits; literal %% is left alone."""
        moment = datetime(999, 1, 5)

        assert format_datetime(moment, "%Y-%m-%d") == "0999-01-05"
        assert format_datetime(moment, "%%Y %Y") == "%Y 0999"
        assert format_datetime(datetime(2024, 3, 15), "%d/%m/%Y") == "15/03/2024"

    def test_unsupported_directive(self):
        """Directives that cannot round-trip are configuration errors."""
        with pytest.raises(InvalidOptionError):
            check("2024-03-15", "date", {"format": "%Y-%m-%d %Z"})

    def test_unsupported_php_token(self):
        """PHP tokens without a padded strftime equivalent are rejected."""
        with pytest.raises(InvalidOptionError):
            check("3/15/2024", "date", {"format": "n/j/Y"})

    def test_settings_default_format(self):
        """ValidatorSettings changes the default date format."""
        validator = Validator(settings=ValidatorSettings(date_format="d/m/Y"))

        assert validator.check("15/03/2024", "date").valid is True
        assert validator.check("2024-03-15", "date").valid is False

    def test_non_text_input(self):
        """Containers are never dates."""
        assert check(["2024-03-15"], "date").valid is False


class TestTime:
    """Test the time kind."""

    def test_default_format(self):
        """The default format is hours:minutes:seconds."""
        assert check("13:45:00", "time").valid is True

    @pytest.mark.parametrize("value", ["24:00:00", "12:60:00", "1:02:03", "12:30", "noon"])
    def test_invalid_times(self, value):
        """Out-of-range fields, unpadded fields and wrong shapes fail."""
        assert check(value, "time").valid is False

    def test_php_style_format(self):
        """H:i is hours and minutes."""
        assert check("09:30", "time", {"format": "H:i"}).valid is True

    def test_twelve_hour_clock(self):
        """12-hour formats with AM/PM round-trip."""
        assert check("09:30 PM", "time", {"format": "%I:%M %p"}).valid is True

    @pytest.mark.parametrize("fmt", ["%H:%M:%S", "%H:%M", "H:i:s", "%I:%M:%S %p"])
    def test_round_trip(self, fmt):
        """Any time formatted under F re-validates under F."""
        strftime_format = normalize_format(fmt)
        for moment in (time(0, 0, 0), time(9, 5, 7), time(23, 59, 59)):
            formatted = moment.strftime(strftime_format)
            assert check(formatted, "time", {"format": fmt}).valid is True, formatted


class TestDateFormats:
    """Test format normalisation."""

    @pytest.mark.parametrize(
        "php,expected",
        [
            ("Y-m-d", "%Y-%m-%d"),
            ("H:i:s", "%H:%M:%S"),
            ("d/m/y", "%d/%m/%y"),
            ("l, F d Y", "%A, %B %d %Y"),
            ("h:i A", "%I:%M %p"),
            ("Y\\Wm", "%YW%m"),
            ("Y%m", "%Y%%%m"),
        ],
    )
    def test_translate_php_format(self, php, expected):
        """Tokens map to strftime directives; escapes and % stay literal."""
        assert translate_php_format(php) == expected

    def test_strftime_format_passes_through(self):
        """Formats containing % are used as given."""
        assert normalize_format("%d.%m.%Y") == "%d.%m.%Y"

    @pytest.mark.parametrize("fmt", ["", "%Q", "%Y-%", "Y-m-\\", "G:i"])
    def test_rejected_formats(self, fmt):
        """Empty formats, unknown directives and dangling escapes raise."""
        with pytest.raises(ValueError):
            normalize_format(fmt)
