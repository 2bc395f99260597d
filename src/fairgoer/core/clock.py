"""Civil time at the fair - wall clock in one fixed timezone."""

from dataclasses import dataclass
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from .items import DAYS
from .timeparse import parse_time_minutes

FAIR_TIMEZONE = "America/New_York"


@dataclass(frozen=True)
class CivilTime:
    """Minutes since midnight and fair day; day is None outside Monday-Saturday."""

    minutes: int
    day: str | None

    @property
    def is_fair_day(self) -> bool:
        return self.day is not None


@dataclass(frozen=True)
class WallClock:
    """
    A simulated fair wall-clock time ("it is 2:00 PM").

    Trusted as already being in the fair's timezone. When day is None the
    current fair day is used.
    """

    hour: int = 9
    minute: int = 0
    meridiem: str = "AM"
    day: str | None = None

    @property
    def minutes(self) -> int:
        hours = self.hour
        if self.meridiem.upper() == "PM" and hours != 12:
            hours += 12
        if self.meridiem.upper() == "AM" and hours == 12:
            hours = 0
        return hours * 60 + self.minute

    @classmethod
    def parse(cls, text: str, day: str | None = None) -> "WallClock":
        """Build from "H:MM AM/PM". Raises ValueError on anything else."""
        minutes = parse_time_minutes(text)
        if minutes is None:
            raise ValueError(f"Invalid wall-clock time: {text!r}")
        hours, mins = divmod(minutes, 60)
        return cls(hour=hours % 12 or 12, minute=mins, meridiem="PM" if hours >= 12 else "AM", day=day)


def fair_day(dt: datetime) -> str | None:
    """Weekday name if it's a fair day, else None (Sunday)."""
    name = dt.strftime("%A")
    return name if name in DAYS else None


def to_fair_time(instant: datetime, tz: str = FAIR_TIMEZONE) -> datetime:
    """Convert an instant to the fair's zone. Naive instants are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(ZoneInfo(tz))


def normalize(
    instant: datetime,
    tz: str = FAIR_TIMEZONE,
    override: WallClock | None = None,
) -> CivilTime:
    """
    Resolve "now" to fair civil time.

    Without an override the instant is converted to the fair timezone. With
    one, its wall-clock minutes are used as-is; only the day still comes
    from the instant (unless the override names a day).
    """
    local = to_fair_time(instant, tz)

    if override is None:
        return CivilTime(minutes=local.hour * 60 + local.minute, day=fair_day(local))

    if override.day is not None:
        day = override.day if override.day in DAYS else None
    else:
        day = fair_day(local)
    return CivilTime(minutes=override.minutes, day=day)
