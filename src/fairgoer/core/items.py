"""Pure schedule item model - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DAY_ORDER = {day: rank for rank, day in enumerate(DAYS, start=1)}

DIVISIONS = (
    "Dairy",
    "Beef",
    "Sheep",
    "Goats",
    "Swine",
    "Rabbits",
    "Pocket Pets",
    "Poultry",
    "Dogs",
    "Cats",
    "Equine",
    "Llamas and Alpacas",
)


class ItemKind(Enum):
    """What a schedule entry is."""

    CLASS = "Class"
    EVENT = "Event"
    REMINDER = "Reminder"


@dataclass(frozen=True)
class ClassDetails:
    """Competition class fields, only present on Class items."""

    number: str | None = None
    group: str | None = None
    subgroup: str | None = None
    subsubgroup: str | None = None


@dataclass(frozen=True)
class ScheduleItem:
    """A class, event, or exhibitor reminder on the fair schedule."""

    id: str
    kind: ItemKind
    title: str
    day: str
    location: str
    division: str | None = None
    divisions: str | None = None
    time: str | None = None
    order: int | None = None
    details: ClassDetails | None = None
    event_type: str | None = None
    description: str | None = None
    session_id: str | None = None

    @property
    def is_estimated(self) -> bool:
        """True when the start time is extrapolated rather than published."""
        return bool(self.time) and self.time.lstrip().startswith("~")

    @property
    def division_set(self) -> frozenset[str]:
        """All divisions the item belongs to."""
        found = set()
        if self.division:
            found.add(self.division.strip())
        if self.divisions:
            found.update(part.strip() for part in self.divisions.split(";") if part.strip())
        return frozenset(found)

    def in_division(self, division: str) -> bool:
        return division == self.division or division in self.division_set

    @property
    def class_number(self) -> str | None:
        return self.details.number if self.details else None

    @property
    def class_group(self) -> str | None:
        return self.details.group if self.details else None

    @property
    def class_subgroup(self) -> str | None:
        return self.details.subgroup if self.details else None

    @property
    def class_subsubgroup(self) -> str | None:
        return self.details.subsubgroup if self.details else None

    @classmethod
    def from_record(cls, data: dict) -> "ScheduleItem":
        """Create a ScheduleItem from a loader record (camelCase keys)."""
        kind = ItemKind(data.get("kind") or "Class")

        details = None
        if kind is ItemKind.CLASS:
            details = ClassDetails(
                number=_text(data.get("classNumber")),
                group=_text(data.get("classGroup")),
                subgroup=_text(data.get("classSubgroup")),
                subsubgroup=_text(data.get("classSubsubgroup")),
            )

        order = data.get("order")
        return cls(
            id=str(data["id"]),
            kind=kind,
            title=_text(data.get("title")) or "Untitled",
            day=_text(data.get("day")) or "",
            location=_text(data.get("location")) or "",
            division=_text(data.get("division")),
            divisions=_text(data.get("divisions")),
            time=_text(data.get("time")),
            order=int(order) if order not in (None, "") else None,
            details=details,
            event_type=_text(data.get("eventType")),
            description=_text(data.get("description")),
            session_id=_text(data.get("sessionId")),
        )


def _text(value) -> str | None:
    """Normalize an optional text field: blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None
