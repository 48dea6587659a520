"""Unit tests for domain time helpers."""

from datetime import date, datetime, timedelta, timezone

import pytest

from staybook.domain.shared.time import (
    add_months,
    ensure_tz_aware,
    parse_iso_datetime,
    years_between,
)


class TestParseIsoDatetime:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2026-07-01T15:00:00Z", datetime(2026, 7, 1, 15, tzinfo=timezone.utc)),
            ("2026-07-01T15:00", datetime(2026, 7, 1, 15, tzinfo=timezone.utc)),
            (
                "2026-07-01T15:00:00.250",
                datetime(2026, 7, 1, 15, 0, 0, 250000, tzinfo=timezone.utc),
            ),
            ("2026-07-01T17:00:00+02:00", datetime(2026, 7, 1, 15, tzinfo=timezone.utc)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_iso_datetime(value) == expected

    def test_result_is_utc(self):
        parsed = parse_iso_datetime("2026-07-01T17:00:00+02:00")

        assert parsed.utcoffset() == timedelta(0)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "2026-07-01",
            "01/07/2026 15:00",
            "2026-13-01T10:00:00",
            "2026-02-30T10:00:00",
            "tomorrow",
            None,
        ],
    )
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_iso_datetime(value)


class TestEnsureTzAware:
    def test_naive_becomes_utc(self):
        assert ensure_tz_aware(datetime(2026, 1, 1)).tzinfo is timezone.utc

    def test_aware_unchanged(self):
        value = datetime(2026, 1, 1, tzinfo=timezone(timedelta(hours=2)))

        assert ensure_tz_aware(value) is value


class TestAddMonths:
    @pytest.mark.parametrize(
        ("day", "months", "expected"),
        [
            (date(2026, 3, 15), 6, date(2026, 9, 15)),
            (date(2026, 8, 31), 6, date(2027, 2, 28)),
            (date(2026, 1, 31), 1, date(2026, 2, 28)),
            (date(2026, 12, 1), 1, date(2027, 1, 1)),
        ],
    )
    def test_add_months(self, day, months, expected):
        assert add_months(day, months) == expected


class TestYearsBetween:
    def test_day_before_birthday(self):
        assert years_between(date(2000, 5, 10), date(2026, 5, 9)) == 25

    def test_on_birthday(self):
        assert years_between(date(2000, 5, 10), date(2026, 5, 10)) == 26
