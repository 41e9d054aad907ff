"""
Tests for DateParser.
"""
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from src.exceptions import TimestampParseError
from src.traversal.date_parser import DateParser


@pytest.mark.unit
class TestParseTimestamp:
    """Test DateParser.parse_timestamp()."""

    def test_twitter_format(self):
        parser = DateParser()
        parsed = parser.parse_timestamp("Wed Oct 10 20:19:24 +0000 2018")
        assert parsed == datetime(2018, 10, 10, 20, 19, 24, tzinfo=timezone.utc)

    def test_twitter_format_with_offset(self):
        parser = DateParser()
        parsed = parser.parse_timestamp("Wed Oct 10 20:19:24 +0200 2018")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_aware_datetime_passthrough(self):
        parser = DateParser()
        value = datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert parser.parse_timestamp(value) is value

    def test_naive_datetime_made_utc(self):
        parser = DateParser()
        parsed = parser.parse_timestamp(datetime(2020, 1, 1, 8, 30))
        assert parsed == datetime(2020, 1, 1, 8, 30, tzinfo=timezone.utc)

    def test_none_returns_none(self):
        assert DateParser().parse_timestamp(None) is None

    def test_empty_string_returns_none(self):
        assert DateParser().parse_timestamp("   ") is None

    def test_dateparser_fallback_used(self):
        parser = DateParser()
        fallback = datetime(2019, 5, 1, tzinfo=timezone.utc)
        with patch("src.traversal.date_parser.dateparser.parse", return_value=fallback) as mock_parse:
            assert parser.parse_timestamp("2019-05-01") == fallback
            mock_parse.assert_called_once()

    def test_unparseable_returns_none(self):
        parser = DateParser()
        with patch("src.traversal.date_parser.dateparser.parse", return_value=None):
            assert parser.parse_timestamp("not a date") is None

    @pytest.mark.parametrize("raw", ["x 1990", "2010", "N/A", "1", "Mon"])
    def test_partial_values_not_completed(self, raw):
        """Fragments must not be filled in from the current date."""
        assert DateParser().parse_timestamp(raw) is None

    def test_full_date_parsed_by_fallback(self):
        parsed = DateParser().parse_timestamp("2019-05-01")
        assert (parsed.year, parsed.month, parsed.day) == (2019, 5, 1)
        assert parsed.tzinfo is not None

    def test_dateparser_exception_returns_none(self):
        parser = DateParser()
        with patch("src.traversal.date_parser.dateparser.parse", side_effect=ValueError("boom")):
            assert parser.parse_timestamp("not a date") is None


@pytest.mark.unit
class TestParseStrict:
    """Test DateParser.parse_strict()."""

    def test_strict_rejects_other_formats(self):
        with pytest.raises(TimestampParseError):
            DateParser().parse_strict("2018-10-10T20:19:24Z")

    def test_custom_format(self):
        parser = DateParser(timestamp_format="%Y-%m-%d %H:%M:%S%z")
        parsed = parser.parse_strict("2018-10-10 20:19:24+0000")
        assert parsed.year == 2018


@pytest.mark.unit
class TestFormatLocal:
    """Test DateParser.format_local()."""

    def test_format_matches_display_pattern(self):
        value = datetime(2018, 10, 10, 20, 19, 24, tzinfo=timezone.utc)
        expected = value.astimezone().strftime("%d.%m.%y %H:%M:%S")
        assert DateParser.format_local(value) == expected

    def test_none_placeholder(self):
        assert DateParser.format_local(None) == "??.??.?? ??:??:??"
