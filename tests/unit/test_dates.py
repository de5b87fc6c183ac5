"""Unit tests for calendar-date helpers."""

from datetime import UTC, date, datetime

import pytest

from src.core import dates
from src.core.config import settings


@pytest.mark.unit
class TestFormatDate:
    """Tests for format_date function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-01-05", "5 Jan"),
            ("2024-12-31", "31 Dec"),
            ("2024-03-13T10:30:00", "13 Mar"),
            (date(2024, 2, 29), "29 Feb"),
            (datetime(2024, 9, 1, 23, 59), "1 Sep"),
        ],
    )
    def test_formats_day_and_month(self, value, expected):
        assert dates.format_date(value) == expected

    def test_aware_string_uses_local_date(self, monkeypatch):
        """An offset timestamp is shown on its local calendar date."""
        monkeypatch.setattr(settings, "timezone", "America/New_York")

        assert dates.format_date("2024-01-06T02:00:00+00:00") == "5 Jan"

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            dates.format_date("not a date")


@pytest.mark.unit
class TestLocalDates:
    """Tests for local-date conversion."""

    def test_naive_datetime_taken_as_local(self):
        assert dates.to_local_date(datetime(2024, 3, 13, 23, 59)) == date(2024, 3, 13)

    def test_date_passes_through(self):
        assert dates.to_local_date(date(2024, 3, 13)) == date(2024, 3, 13)

    def test_aware_datetime_converted(self, monkeypatch):
        monkeypatch.setattr(settings, "timezone", "Asia/Tokyo")

        assert dates.to_local_date(datetime(2024, 3, 13, 16, 0, tzinfo=UTC)) == date(2024, 3, 14)

    def test_today_uses_given_now(self):
        assert dates.local_today(datetime(2024, 3, 13, 0, 0)) == date(2024, 3, 13)

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2024, 3, 10), 0),  # Sunday
            (date(2024, 3, 11), 1),  # Monday
            (date(2024, 3, 16), 6),  # Saturday
        ],
    )
    def test_weekday_index_starts_on_sunday(self, day, expected):
        assert dates.weekday_index(day) == expected
