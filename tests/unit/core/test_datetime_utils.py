"""Tests for datetime utilities."""

from datetime import datetime, timedelta, timezone

import pytest

from productive.core.datetime_utils import (
    current_time_for,
    parse_iso_datetime,
    whole_days,
    whole_days_between,
)


class TestParseIsoDatetime:
    """Tests for parse_iso_datetime function."""

    def test_date_only_is_naive(self):
        assert parse_iso_datetime("2024-03-05") == datetime(2024, 3, 5)

    def test_z_suffix_is_utc(self):
        result = parse_iso_datetime("2024-03-05T10:30:00Z")
        assert result == datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)

    def test_explicit_offset(self):
        result = parse_iso_datetime("2024-03-05T10:30:00+02:00")
        assert result.utcoffset() == timedelta(hours=2)

    def test_invalid_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_iso_datetime("not-a-date")


class TestCurrentTimeFor:
    """Tests for current_time_for function."""

    def test_naive_value_gives_naive_now(self):
        assert current_time_for(datetime(2024, 1, 1)).tzinfo is None

    def test_aware_value_gives_aware_now(self):
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert current_time_for(value).tzinfo is timezone.utc


class TestWholeDays:
    """Tests for whole_days function."""

    def test_positive_partial_day_truncates(self):
        assert whole_days(timedelta(days=7, hours=23)) == 7

    def test_negative_partial_day_truncates_toward_zero(self):
        """-12h is zero whole days, not -1 as timedelta.days reports."""
        assert timedelta(hours=-12).days == -1
        assert whole_days(timedelta(hours=-12)) == 0

    def test_negative_days(self):
        assert whole_days(timedelta(days=-2, hours=-1)) == -2

    def test_exact_days(self):
        assert whole_days(timedelta(days=3)) == 3

    def test_zero(self):
        assert whole_days(timedelta(0)) == 0


class TestWholeDaysBetween:
    """Tests for whole_days_between function."""

    def test_later_minus_earlier(self):
        assert whole_days_between(datetime(2024, 3, 12), datetime(2024, 3, 5)) == 7

    def test_earlier_minus_later_is_negative(self):
        assert whole_days_between(datetime(2024, 3, 5), datetime(2024, 3, 12)) == -7

    def test_mixed_naive_and_aware_raises(self):
        with pytest.raises(TypeError):
            whole_days_between(
                datetime(2024, 3, 5), datetime(2024, 3, 5, tzinfo=timezone.utc)
            )
