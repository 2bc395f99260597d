"""Configuration management for fairgoer."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.clock import FAIR_TIMEZONE, WallClock

logger = logging.getLogger(__name__)

FAIRGOER_HOME = Path(os.environ.get("FAIRGOER_HOME", Path.home() / "fairgoer"))
CONFIG_FILE = FAIRGOER_HOME / "config" / "fairgoer.conf"
DATA_DIR = FAIRGOER_HOME / "data"


@dataclass
class Config:
    """fairgoer configuration."""

    timezone: str = FAIR_TIMEZONE
    schedule_file: str = ""
    schedule_url: str = ""
    favorites_file: str = ""
    refresh_seconds: int = 60
    # Simulated wall-clock time, e.g. "2:00 PM"; disables periodic refresh
    test_time: str = ""
    test_day: str = ""
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    @property
    def schedule_path(self) -> Path:
        if self.schedule_file:
            return Path(self.schedule_file).expanduser()
        return DATA_DIR / "schedule.json"

    @property
    def favorites_path(self) -> Path:
        if self.favorites_file:
            return Path(self.favorites_file).expanduser()
        return DATA_DIR / "favorites.json"

    def wall_clock_override(self) -> WallClock | None:
        """The configured test time, or None when running on the real clock."""
        if not self.test_time:
            return None
        try:
            return WallClock.parse(self.test_time, day=self.test_day or None)
        except ValueError as e:
            logger.warning(f"Ignoring TEST_TIME: {e}")
            return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from fairgoer.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            # Unquoted: strip inline comments
            value = value.split("#")[0].strip()

        match key:
            case "timezone":
                config.timezone = value
            case "schedule_file":
                config.schedule_file = value
            case "schedule_url":
                config.schedule_url = value
            case "favorites_file":
                config.favorites_file = value
            case "refresh_seconds":
                try:
                    config.refresh_seconds = int(value)
                except ValueError:
                    logger.warning(f"Invalid REFRESH_SECONDS {value!r}, using {config.refresh_seconds}")
            case "test_time":
                config.test_time = value
            case "test_day":
                config.test_day = value
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                try:
                    config.telegram_allowed_users = [int(u.strip()) for u in value.split(",") if u.strip()]
                except ValueError:
                    logger.warning(f"Invalid TELEGRAM_ALLOWED_USERS {value!r}, ignoring")
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
