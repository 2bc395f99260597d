"""Tests for fair civil time normalization."""

from datetime import datetime, timezone

import pytest

from fairgoer.core.clock import CivilTime, WallClock, fair_day, normalize, to_fair_time

# 2025-07-15 is a Tuesday; New York is on EDT (UTC-4)
TUESDAY_AFTERNOON_UTC = datetime(2025, 7, 15, 18, 30, tzinfo=timezone.utc)
SUNDAY_NOON_UTC = datetime(2025, 7, 20, 16, 0, tzinfo=timezone.utc)


class TestNormalize:
    def test_converts_to_fair_timezone(self):
        now = normalize(TUESDAY_AFTERNOON_UTC)
        assert now == CivilTime(minutes=14 * 60 + 30, day="Tuesday")

    def test_day_follows_fair_timezone_not_utc(self):
        # 02:00 UTC Tuesday is still 22:00 Monday in New York
        now = normalize(datetime(2025, 7, 15, 2, 0, tzinfo=timezone.utc))
        assert now.day == "Monday"
        assert now.minutes == 22 * 60

    def test_naive_instant_is_utc(self):
        naive = datetime(2025, 7, 15, 18, 30)
        assert normalize(naive) == normalize(TUESDAY_AFTERNOON_UTC)

    def test_other_timezone(self):
        now = normalize(TUESDAY_AFTERNOON_UTC, tz="America/Chicago")
        assert now.minutes == 13 * 60 + 30

    def test_sunday_is_no_fair_day(self):
        now = normalize(SUNDAY_NOON_UTC)
        assert now.day is None
        assert now.is_fair_day is False

    def test_override_used_verbatim(self):
        now = normalize(TUESDAY_AFTERNOON_UTC, override=WallClock(2, 0, "PM"))
        assert now == CivilTime(minutes=840, day="Tuesday")

    def test_override_with_explicit_day(self):
        now = normalize(SUNDAY_NOON_UTC, override=WallClock(9, 0, "AM", day="Saturday"))
        assert now == CivilTime(minutes=540, day="Saturday")

    def test_override_on_sunday_is_no_fair_day(self):
        now = normalize(SUNDAY_NOON_UTC, override=WallClock(9, 0, "AM"))
        assert now.day is None

    def test_override_with_invalid_day(self):
        now = normalize(TUESDAY_AFTERNOON_UTC, override=WallClock(9, 0, "AM", day="Sunday"))
        assert now.day is None


class TestWallClock:
    def test_minutes(self):
        assert WallClock(8, 30, "AM").minutes == 510
        assert WallClock(12, 0, "AM").minutes == 0
        assert WallClock(12, 0, "PM").minutes == 720
        assert WallClock(3, 15, "pm").minutes == 915

    def test_parse(self):
        clock = WallClock.parse("2:05 PM")
        assert (clock.hour, clock.minute, clock.meridiem) == (2, 5, "PM")
        assert clock.minutes == 845

    def test_parse_midnight(self):
        clock = WallClock.parse("12:15 AM")
        assert (clock.hour, clock.meridiem) == (12, "AM")
        assert clock.minutes == 15

    def test_parse_keeps_day(self):
        assert WallClock.parse("9:00 AM", day="Friday").day == "Friday"

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            WallClock.parse("teatime")


class TestFairDay:
    def test_weekday(self):
        assert fair_day(to_fair_time(TUESDAY_AFTERNOON_UTC)) == "Tuesday"

    def test_sunday(self):
        assert fair_day(to_fair_time(SUNDAY_NOON_UTC)) is None
