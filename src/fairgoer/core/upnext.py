"""Pure "what's happening now" classification - no I/O dependencies."""

import logging
from dataclasses import dataclass
from enum import Enum

from .clock import CivilTime
from .items import ScheduleItem
from .timeparse import format_minutes, parse_time_minutes

logger = logging.getLogger(__name__)

# Minutes relative to now (negative = already started)
HAPPENING_NOW_WINDOW = (-60, 15)
UP_NEXT_LIMIT = 30
COMING_SOON_LIMIT = 120


class Status(Enum):
    """How close an item is to starting."""

    HAPPENING_NOW = "happening-now"
    UP_NEXT = "up-next"
    COMING_SOON = "coming-soon"


@dataclass(frozen=True)
class ClassifiedItem:
    """A schedule item tagged with its status relative to now."""

    item: ScheduleItem
    status: Status
    minutes_until: int


def status_for(diff: int) -> Status | None:
    """
    Bucket a minute offset. First matching rule wins:

    [-60, 15] happening now, (15, 30] up next, (30, 120] coming soon.
    """
    low, high = HAPPENING_NOW_WINDOW
    if low <= diff <= high:
        return Status.HAPPENING_NOW
    elif high < diff <= UP_NEXT_LIMIT:
        return Status.UP_NEXT
    elif UP_NEXT_LIMIT < diff <= COMING_SOON_LIMIT:
        return Status.COMING_SOON
    return None


def classify(items: list[ScheduleItem], now: CivilTime) -> list[ClassifiedItem]:
    """
    Classify today's timed items relative to now.

    Pure function - no I/O. Items on other days, items without a parseable
    time, and items outside every window are left out. Result is ordered by
    start time; ties keep their input order.
    """
    logger.debug(f"Classifying at {format_minutes(now.minutes)} ({now.day or 'no fair day'})")

    if not now.is_fair_day:
        return []

    found: list[tuple[int, ClassifiedItem]] = []
    for item in items:
        if item.day != now.day:
            continue

        start = parse_time_minutes(item.time)
        if start is None:
            continue

        diff = start - now.minutes
        status = status_for(diff)
        if status is None:
            continue

        found.append((start, ClassifiedItem(item=item, status=status, minutes_until=diff)))

    found.sort(key=lambda pair: pair[0])
    return [classified for _, classified in found]
