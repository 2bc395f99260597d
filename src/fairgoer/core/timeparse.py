"""Schedule time strings ("8:30 AM", "~8:30 AM") to minutes since midnight."""

import re

UNKNOWN_TIME = 9999

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.IGNORECASE)


def parse_time_minutes(text: str | None) -> int | None:
    """
    Parse a schedule time into minutes since midnight.

    A leading "~" (estimated time) is ignored for the numeric value.
    Returns None for missing or unrecognised input - never raises.
    """
    if not text:
        return None

    match = _TIME_PATTERN.search(text.strip().lstrip("~").strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = match.group(3).upper()

    if meridiem == "PM" and hours != 12:
        hours += 12
    if meridiem == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def time_sort_value(text: str | None) -> int:
    """Minutes since midnight, with unknown times sorting after everything."""
    minutes = parse_time_minutes(text)
    return minutes if minutes is not None else UNKNOWN_TIME


def format_minutes(minutes: int, estimated: bool = False) -> str:
    """Format minutes since midnight as "H:MM AM/PM"."""
    hours = (minutes // 60) % 24
    mins = minutes % 60
    display_hours = hours % 12 or 12
    meridiem = "PM" if hours >= 12 else "AM"
    prefix = "~" if estimated else ""
    return f"{prefix}{display_hours}:{mins:02d} {meridiem}"


def estimate_start_time(
    session_start: str | None,
    order: int | None,
    minutes_per_class: int = 5,
) -> str | None:
    """
    Estimate a class start from its session start and position in the session.

    Class N starts (N - 1) * minutes_per_class after the session. The result
    is marked "~" as an estimate. Without an order, or with an unparseable
    session start, the session start is returned unchanged.
    """
    if not session_start or not order:
        return session_start or None

    start = parse_time_minutes(session_start)
    if start is None:
        return session_start

    return format_minutes(start + (order - 1) * minutes_per_class, estimated=True)
