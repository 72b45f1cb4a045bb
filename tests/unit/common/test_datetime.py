"""Tests for common.datetime module."""

from datetime import datetime, timedelta, timezone

import pytest

from common.datetime import parse_pub_date


class TestParsePubDate:
    def test_none_returns_none(self) -> None:
        assert parse_pub_date(None) is None

    def test_rfc822_string(self) -> None:
        result = parse_pub_date("Sat, 01 Mar 2025 09:00:00 -0500")
        assert result == datetime(2025, 3, 1, 14, 0, 0, tzinfo=timezone.utc)
        assert result.utcoffset() == timedelta(hours=-5)

    def test_iso_string_with_z_suffix(self) -> None:
        result = parse_pub_date("2024-01-01T12:00:00Z")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_naive_string_assumed_utc(self) -> None:
        result = parse_pub_date("2024-01-01 12:00:00")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_datetime_passthrough(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert parse_pub_date(dt) is dt

    def test_naive_datetime_gets_utc(self) -> None:
        result = parse_pub_date(datetime(2024, 1, 1, 12, 0, 0))
        assert result.tzinfo is timezone.utc

    @pytest.mark.parametrize("value", ["", "   ", "pas une date", "2024-13-45", 1700000000, ["2024-01-01"]])
    def test_unparsable_returns_none(self, value) -> None:
        assert parse_pub_date(value) is None

    def test_out_of_range_offset_returns_none(self) -> None:
        assert parse_pub_date("2025-03-01T10:00:00+99:00") is None

    def test_missing_parts_do_not_come_from_today(self) -> None:
        assert parse_pub_date("10") == datetime(1970, 1, 10, tzinfo=timezone.utc)
        assert parse_pub_date("March 5") == datetime(1970, 3, 5, tzinfo=timezone.utc)
