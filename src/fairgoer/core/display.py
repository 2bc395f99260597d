"""Text formatting for schedule views - pure, no I/O dependencies."""

from .clock import CivilTime
from .items import ScheduleItem
from .timeparse import format_minutes
from .upnext import ClassifiedItem, Status

STATUS_LABELS = {
    Status.HAPPENING_NOW: "HAPPENING NOW",
    Status.UP_NEXT: "UP NEXT",
    Status.COMING_SOON: "COMING SOON",
}


def status_label(status: Status) -> str:
    return STATUS_LABELS[status]


def format_minutes_until(minutes: int) -> str:
    """Human countdown: "Happening now!", "in 25 min", "in 1h 30m"."""
    if minutes <= 0:
        return "Happening now!"
    if minutes < 60:
        return f"in {minutes} min"
    hours, mins = divmod(minutes, 60)
    return f"in {hours}h {mins}m"


def item_heading(item: ScheduleItem) -> str:
    """Title, prefixed with the class number when there is one."""
    if item.class_number:
        return f"Class #{item.class_number} · {item.title}"
    return item.title


def item_label(item: ScheduleItem) -> str:
    """Day plus time, or the position at the location when untimed."""
    if item.time:
        when = item.time
    else:
        order = item.order if item.order is not None else "?"
        when = f"{item.location} • class #{order} of the day"
    return f"{item.day} • {when}"


def time_label(item: ScheduleItem) -> str:
    return "Est. Start Time" if item.is_estimated else "Start Time"


def category_label(item: ScheduleItem) -> str:
    """Division and class group (or event type), e.g. "Swine · Market"."""
    division = item.division or "; ".join(sorted(item.division_set))
    kind = item.class_group or item.event_type
    return " · ".join(p for p in (division, kind) if p)


def format_civil_time(now: CivilTime) -> str:
    """e.g. "Tuesday • 2:05 PM"; "No fair today" on Sundays."""
    clock = format_minutes(now.minutes)
    if not now.is_fair_day:
        return f"No fair today • {clock}"
    return f"{now.day} • {clock}"


def format_up_next_line(entry: ClassifiedItem) -> str:
    """One line of the happening-now board."""
    return (
        f"[{status_label(entry.status)}] {format_minutes_until(entry.minutes_until)}: "
        f"{item_heading(entry.item)} ({entry.item.time} @ {entry.item.location})"
    )


def format_item_line(item: ScheduleItem) -> str:
    """One line of a browse or saved list."""
    category = category_label(item)
    suffix = f" [{category}]" if category else ""
    return f"{item_heading(item)} - {item_label(item)}{suffix}"
