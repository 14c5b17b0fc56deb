"""Tests for time_helpers.natural_language module."""

from datetime import datetime, timedelta, timezone

import pytest
import pytz

from coercion.time_helpers.natural_language import parse_date_time

# Friday
REFERENCE = datetime(2024, 3, 15, 9, 30)
AWARE_REFERENCE = pytz.utc.localize(REFERENCE)


class TestKeywords:
    """Tests for keyword expressions."""

    def test_now(self) -> None:
        assert parse_date_time("now", REFERENCE) == REFERENCE

    def test_today_and_midnight(self) -> None:
        assert parse_date_time("today", REFERENCE) == datetime(2024, 3, 15)
        assert parse_date_time("Midnight", REFERENCE) == datetime(2024, 3, 15)

    def test_noon(self) -> None:
        assert parse_date_time("noon", REFERENCE) == datetime(2024, 3, 15, 12)

    def test_tomorrow_and_yesterday(self) -> None:
        assert parse_date_time("tomorrow", REFERENCE) == datetime(2024, 3, 16)
        assert parse_date_time("yesterday", REFERENCE) == datetime(2024, 3, 14)

    def test_keyword_with_time(self) -> None:
        assert parse_date_time("tomorrow 10:45", REFERENCE) == datetime(2024, 3, 16, 10, 45)

    def test_keyword_with_offset(self) -> None:
        assert parse_date_time("today +2 hours", REFERENCE) == datetime(2024, 3, 15, 2)


class TestAnchors:
    """Tests for next/last/this expressions."""

    def test_next_weekday(self) -> None:
        assert parse_date_time("next monday", REFERENCE) == datetime(2024, 3, 18)
        assert parse_date_time("next friday", REFERENCE) == datetime(2024, 3, 22)

    def test_last_weekday(self) -> None:
        assert parse_date_time("last friday", REFERENCE) == datetime(2024, 3, 8)
        assert parse_date_time("last wednesday", REFERENCE) == datetime(2024, 3, 13)

    def test_this_weekday(self) -> None:
        assert parse_date_time("this friday", REFERENCE) == datetime(2024, 3, 15)
        assert parse_date_time("this sunday", REFERENCE) == datetime(2024, 3, 17)

    def test_units(self) -> None:
        assert parse_date_time("next week", REFERENCE) == REFERENCE + timedelta(weeks=1)
        assert parse_date_time("last month", REFERENCE) == datetime(2024, 2, 15, 9, 30)
        assert parse_date_time("this year", REFERENCE) == REFERENCE


class TestRelativeOffsets:
    """Tests for offsets from the reference time."""

    def test_future(self) -> None:
        assert parse_date_time("+1 day", REFERENCE) == datetime(2024, 3, 16, 9, 30)
        assert parse_date_time("in 90 minutes", REFERENCE) == datetime(2024, 3, 15, 11, 0)

    def test_past(self) -> None:
        assert parse_date_time("3 weeks ago", REFERENCE) == datetime(2024, 2, 23, 9, 30)


class TestCalendarFormats:
    """Tests for dateutil-backed formats."""

    def test_iso_date(self) -> None:
        assert parse_date_time("2020-01-01", REFERENCE) == datetime(2020, 1, 1)

    def test_iso_with_offset_keeps_zone(self) -> None:
        result = parse_date_time("2020-01-01T10:00:00+02:00", AWARE_REFERENCE)
        assert result.utcoffset() == timedelta(hours=2)
        assert result.astimezone(timezone.utc) == datetime(2020, 1, 1, 8, tzinfo=timezone.utc)

    def test_naive_result_is_localized(self) -> None:
        result = parse_date_time("March 3 2021 14:00", AWARE_REFERENCE)
        assert result == pytz.utc.localize(datetime(2021, 3, 3, 14))

    def test_time_only_uses_reference_date(self) -> None:
        assert parse_date_time("14:15", REFERENCE) == datetime(2024, 3, 15, 14, 15)

    def test_timestamp_literal(self) -> None:
        result = parse_date_time("@0", AWARE_REFERENCE)
        assert result == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_uses_current_time_by_default(self, fixed_now) -> None:
        assert parse_date_time("tomorrow") == pytz.utc.localize(datetime(2024, 3, 16))

    @pytest.mark.parametrize("text", ["", "   ", "not a date", "next blursday", "2020-13-45"])
    def test_unparsable(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_date_time(text, REFERENCE)
