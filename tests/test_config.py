"""Tests for configuration loading."""

from pathlib import Path

from fairgoer.config import DATA_DIR, Config, load_config
from fairgoer.core.clock import FAIR_TIMEZONE, WallClock


def write_conf(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "fairgoer.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.timezone == FAIR_TIMEZONE
        assert config.refresh_seconds == 60

    def test_parses_values(self, tmp_path):
        path = write_conf(
            tmp_path,
            """
# Fair settings
TIMEZONE = America/Chicago
SCHEDULE_FILE = "~/fair/schedule.json"  # exported nightly
FAVORITES_FILE = '/tmp/favs.json'
REFRESH_SECONDS = 30
TEST_TIME = 2:00 PM # simulate
TEST_DAY = Tuesday
TELEGRAM_BOT_TOKEN = abc:123
TELEGRAM_ALLOWED_USERS = 1, 2,3
""",
        )
        config = load_config(path)
        assert config.timezone == "America/Chicago"
        assert config.schedule_file == "~/fair/schedule.json"
        assert config.favorites_file == "/tmp/favs.json"
        assert config.refresh_seconds == 30
        assert config.test_time == "2:00 PM"
        assert config.test_day == "Tuesday"
        assert config.telegram_bot_token == "abc:123"
        assert config.telegram_allowed_users == [1, 2, 3]

    def test_invalid_number_keeps_default(self, tmp_path):
        path = write_conf(tmp_path, "REFRESH_SECONDS = soon\n")
        assert load_config(path).refresh_seconds == 60

    def test_ignores_junk_lines(self, tmp_path):
        path = write_conf(tmp_path, "not a setting\nUNKNOWN_KEY = 1\nSCHEDULE_URL = https://example.org/s.json\n")
        config = load_config(path)
        assert config.schedule_url == "https://example.org/s.json"


class TestPaths:
    def test_default_paths(self):
        config = Config()
        assert config.schedule_path == DATA_DIR / "schedule.json"
        assert config.favorites_path == DATA_DIR / "favorites.json"

    def test_expands_user(self):
        config = Config(schedule_file="~/fair/schedule.json")
        assert config.schedule_path == Path.home() / "fair" / "schedule.json"


class TestWallClockOverride:
    def test_none_without_test_time(self):
        assert Config().wall_clock_override() is None

    def test_parsed(self):
        config = Config(test_time="2:00 PM", test_day="Friday")
        assert config.wall_clock_override() == WallClock(2, 0, "PM", day="Friday")

    def test_invalid_ignored(self):
        assert Config(test_time="lunchtime").wall_clock_override() is None
