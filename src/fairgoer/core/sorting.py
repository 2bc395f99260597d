"""Display order for schedule items - pure, no I/O dependencies."""

from .items import DAY_ORDER, DAYS, ScheduleItem
from .timeparse import time_sort_value

UNKNOWN_DAY_RANK = 999
UNKNOWN_ORDER = 9999


def schedule_sort_key(item: ScheduleItem) -> tuple[int, int, str, int]:
    """Day, then start time, then location, then order within the location."""
    return (
        DAY_ORDER.get(item.day, UNKNOWN_DAY_RANK),
        time_sort_value(item.time),
        item.location,
        item.order if item.order is not None else UNKNOWN_ORDER,
    )


def sort_schedule(items: list[ScheduleItem]) -> list[ScheduleItem]:
    """
    Sort items for display.

    Pure function - no I/O. Untimed items follow timed ones on the same day;
    items with no order follow ordered ones at the same location.
    """
    return sorted(items, key=schedule_sort_key)


def group_by_day(items: list[ScheduleItem]) -> list[tuple[str, list[ScheduleItem]]]:
    """Split already-sorted items into (day, items) sections, skipping empty days."""
    by_day: dict[str, list[ScheduleItem]] = {}
    for item in items:
        by_day.setdefault(item.day, []).append(item)
    return [(day, by_day[day]) for day in DAYS if by_day.get(day)]
