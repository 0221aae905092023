"""
Test suite for registry filter parsing.

System role: Verification of date filter normalisation
"""

from datetime import datetime, timezone

import pytest

from acquirer_backend.application.services.merchant_service import parse_filter_day


class TestParseFilterDay:
    """Test suite for parse_filter_day()."""

    def test_should_parse_plain_date_as_utc_midnight(self) -> None:
        assert parse_filter_day("2024-05-01") == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_should_convert_offsets_to_utc(self) -> None:
        parsed = parse_filter_day("2024-05-01T01:30:00+08:00")

        assert parsed == datetime(2024, 4, 30, 17, 30, tzinfo=timezone.utc)

    def test_should_treat_naive_datetime_as_utc(self) -> None:
        parsed = parse_filter_day("2024-05-01T10:00:00")

        assert parsed.tzinfo == timezone.utc
        assert parsed.hour == 10

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2024-13-40"])
    def test_should_ignore_unparseable_values(self, value) -> None:
        assert parse_filter_day(value) is None
