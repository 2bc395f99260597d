"""Tests for schedule time parsing."""

import pytest

from fairgoer.core.timeparse import (
    UNKNOWN_TIME,
    estimate_start_time,
    format_minutes,
    parse_time_minutes,
    time_sort_value,
)


class TestParseTimeMinutes:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("8:30 AM", 510),
            ("~8:30 AM", 510),
            ("12:00 AM", 0),
            ("12:00 PM", 720),
            ("12:45 PM", 765),
            ("1:05 PM", 785),
            ("11:59 PM", 1439),
            ("4:00 pm", 960),
            ("9:15AM", 555),
            ("  ~ 7:00 AM ", 420),
        ],
    )
    def test_parses_times(self, text, expected):
        assert parse_time_minutes(text) == expected

    def test_none_is_unknown(self):
        assert parse_time_minutes(None) is None

    def test_empty_is_unknown(self):
        assert parse_time_minutes("") is None

    def test_garbage_is_unknown(self):
        assert parse_time_minutes("garbage") is None

    def test_missing_meridiem_is_unknown(self):
        assert parse_time_minutes("14:30") is None


class TestTimeSortValue:
    def test_known_time(self):
        assert time_sort_value("9:00 AM") == 540

    def test_unknown_sorts_last(self):
        assert time_sort_value(None) == UNKNOWN_TIME
        assert time_sort_value("TBD") == UNKNOWN_TIME
        assert time_sort_value("11:59 PM") < UNKNOWN_TIME


class TestFormatMinutes:
    def test_morning(self):
        assert format_minutes(510) == "8:30 AM"

    def test_midnight_and_noon(self):
        assert format_minutes(0) == "12:00 AM"
        assert format_minutes(720) == "12:00 PM"

    def test_estimated_prefix(self):
        assert format_minutes(785, estimated=True) == "~1:05 PM"


class TestEstimateStartTime:
    def test_first_class_starts_with_session(self):
        assert estimate_start_time("8:00 AM", 1) == "~8:00 AM"

    def test_later_classes_offset_by_five_minutes(self):
        assert estimate_start_time("8:00 AM", 3) == "~8:10 AM"

    def test_crosses_noon(self):
        assert estimate_start_time("11:50 AM", 4) == "~12:05 PM"

    def test_custom_pace(self):
        assert estimate_start_time("9:00 AM", 3, minutes_per_class=10) == "~9:20 AM"

    def test_no_order_keeps_session_start(self):
        assert estimate_start_time("8:00 AM", None) == "8:00 AM"

    def test_unparseable_session_start_kept(self):
        assert estimate_start_time("after lunch", 2) == "after lunch"

    def test_no_session_start(self):
        assert estimate_start_time(None, 2) is None
        assert estimate_start_time("", 2) is None

    def test_estimate_round_trips_through_parser(self):
        assert parse_time_minutes(estimate_start_time("8:00 AM", 3)) == 490
