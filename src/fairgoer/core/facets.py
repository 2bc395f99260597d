"""Cascading facet filters - pure, no I/O dependencies.

Five selections narrow the schedule: division > class group > class
subgroup > class sub-subgroup, plus day. Each level's options are derived
from the items that survive the coarser levels, so they are recomputed on
every call rather than cached.
"""

from dataclasses import dataclass, replace

from .items import DAY_ORDER, DIVISIONS, ItemKind, ScheduleItem

ALL = "All"

EVENTS_GROUP = "Events"
REMINDERS_GROUP = "Exhibitor Reminders"
SYNTHETIC_GROUPS = (EVENTS_GROUP, REMINDERS_GROUP)


@dataclass(frozen=True)
class Selection:
    """
    The current facet selections, each a concrete value or ALL.

    Changing a level resets every finer level (and day) to ALL, so the
    tuple never names a subgroup under a group that is no longer selected.
    """

    division: str = ALL
    class_group: str = ALL
    class_subgroup: str = ALL
    class_subsubgroup: str = ALL
    day: str = ALL

    def with_division(self, value: str) -> "Selection":
        if value == self.division:
            return self
        return Selection(division=value)

    def with_class_group(self, value: str) -> "Selection":
        if value == self.class_group:
            return self
        return replace(self, class_group=value, class_subgroup=ALL, class_subsubgroup=ALL, day=ALL)

    def with_class_subgroup(self, value: str) -> "Selection":
        if value == self.class_subgroup:
            return self
        return replace(self, class_subgroup=value, class_subsubgroup=ALL, day=ALL)

    def with_class_subsubgroup(self, value: str) -> "Selection":
        if value == self.class_subsubgroup:
            return self
        return replace(self, class_subsubgroup=value)

    def with_day(self, value: str) -> "Selection":
        if value == self.day:
            return self
        return replace(self, day=value)


@dataclass(frozen=True)
class FacetRow:
    """One filter row: its options (ALL first) and current selection."""

    name: str
    options: tuple[str, ...]
    selected: str

    @property
    def values(self) -> tuple[str, ...]:
        """Options without the ALL wildcard."""
        return tuple(o for o in self.options if o != ALL)

    @property
    def visible(self) -> bool:
        """Only worth showing when there is an actual choice to make."""
        return len(self.values) >= 2


@dataclass(frozen=True)
class FacetView:
    """Clamped selection plus the option rows derived from it."""

    selection: Selection
    rows: tuple[FacetRow, ...]

    def row(self, name: str) -> FacetRow:
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)


# ============== Predicates ==============


def in_division(item: ScheduleItem, division: str) -> bool:
    """Items without any division never match a concrete division."""
    return division == ALL or item.in_division(division)


def in_class_group(item: ScheduleItem, group: str) -> bool:
    if group == ALL:
        return True
    if group == EVENTS_GROUP:
        return item.kind is ItemKind.EVENT
    if group == REMINDERS_GROUP:
        return item.kind is ItemKind.REMINDER
    return item.class_group == group


def in_class_subgroup(item: ScheduleItem, subgroup: str) -> bool:
    return subgroup == ALL or item.class_subgroup == subgroup


def in_class_subsubgroup(item: ScheduleItem, subsubgroup: str) -> bool:
    return subsubgroup == ALL or item.class_subsubgroup == subsubgroup


def on_day(item: ScheduleItem, day: str) -> bool:
    return day == ALL or item.day == day


def search_text(item: ScheduleItem) -> str:
    """Lower-cased haystack for free-text search."""
    parts = [
        item.title,
        item.class_number,
        item.class_group,
        item.class_subgroup,
        item.class_subsubgroup,
        item.event_type,
        item.division,
        item.divisions,
        item.location,
    ]
    return " ".join(p for p in parts if p).lower()


def matches_query(item: ScheduleItem, query: str) -> bool:
    needle = query.strip().lower()
    return not needle or needle in search_text(item)


def _matches_categories(item: ScheduleItem, selection: Selection) -> bool:
    return (
        in_division(item, selection.division)
        and in_class_group(item, selection.class_group)
        and in_class_subgroup(item, selection.class_subgroup)
        and in_class_subsubgroup(item, selection.class_subsubgroup)
    )


def matches(item: ScheduleItem, selection: Selection, query: str = "") -> bool:
    """Conjunction of every active facet plus the free-text search."""
    return (
        _matches_categories(item, selection)
        and on_day(item, selection.day)
        and matches_query(item, query)
    )


def filter_items(
    items: list[ScheduleItem],
    selection: Selection,
    query: str = "",
) -> list[ScheduleItem]:
    """
    Filter items by the selection and search text.

    Pure function - no I/O. Input order is kept.
    """
    return [item for item in items if matches(item, selection, query)]


# ============== Options ==============


def division_options(items: list[ScheduleItem]) -> tuple[str, ...]:
    """Divisions referenced by any item, in fair order; unknown ones after."""
    present: set[str] = set()
    for item in items:
        present.update(item.division_set)

    known = [d for d in DIVISIONS if d in present]
    extra = sorted(present.difference(DIVISIONS))
    return (ALL, *known, *extra)


def class_group_options(items: list[ScheduleItem], selection: Selection) -> tuple[str, ...]:
    """
    Class groups under the selected division.

    Events and exhibitor reminders show up as synthetic groups, listed after
    the real (alphabetical) ones. Nothing is offered until a division is picked.
    """
    if selection.division == ALL:
        return (ALL,)

    groups: set[str] = set()
    has_events = False
    has_reminders = False
    for item in items:
        if not in_division(item, selection.division):
            continue
        if item.kind is ItemKind.EVENT:
            has_events = True
        elif item.kind is ItemKind.REMINDER:
            has_reminders = True
        elif item.class_group:
            groups.add(item.class_group)

    options = [ALL, *sorted(groups.difference(SYNTHETIC_GROUPS))]
    if has_events:
        options.append(EVENTS_GROUP)
    if has_reminders:
        options.append(REMINDERS_GROUP)
    return tuple(options)


def class_subgroup_options(items: list[ScheduleItem], selection: Selection) -> tuple[str, ...]:
    """Subgroups under a concrete, non-synthetic class group."""
    if selection.class_group == ALL or selection.class_group in SYNTHETIC_GROUPS:
        return (ALL,)

    subgroups = {
        item.class_subgroup
        for item in items
        if item.class_subgroup
        and in_division(item, selection.division)
        and in_class_group(item, selection.class_group)
    }
    return (ALL, *sorted(subgroups))


def class_subsubgroup_options(items: list[ScheduleItem], selection: Selection) -> tuple[str, ...]:
    """Sub-subgroups under a concrete subgroup."""
    if selection.class_group in SYNTHETIC_GROUPS or selection.class_subgroup == ALL:
        return (ALL,)

    subsubgroups = {
        item.class_subsubgroup
        for item in items
        if item.class_subsubgroup
        and in_division(item, selection.division)
        and in_class_group(item, selection.class_group)
        and in_class_subgroup(item, selection.class_subgroup)
    }
    return (ALL, *sorted(subsubgroups))


def day_options(
    items: list[ScheduleItem],
    selection: Selection,
    query: str = "",
) -> tuple[str, ...]:
    """Fair days left once every other active filter is applied."""
    days = {
        item.day
        for item in items
        if item.day in DAY_ORDER
        and _matches_categories(item, selection)
        and matches_query(item, query)
    }
    return (ALL, *sorted(days, key=DAY_ORDER.__getitem__))


def resolve_facets(
    items: list[ScheduleItem],
    selection: Selection,
    query: str = "",
) -> FacetView:
    """
    Derive every facet row and clamp selections that are no longer offered.

    Pure function - no I/O. Works top-down in one pass: each level's options
    are computed against the already-clamped coarser levels, and a value that
    dropped out of scope falls back to ALL (resetting finer levels with it).
    """
    divisions = division_options(items)
    if selection.division not in divisions:
        selection = selection.with_division(ALL)

    groups = class_group_options(items, selection)
    if selection.class_group not in groups:
        selection = selection.with_class_group(ALL)

    subgroups = class_subgroup_options(items, selection)
    if selection.class_subgroup not in subgroups:
        selection = selection.with_class_subgroup(ALL)

    subsubgroups = class_subsubgroup_options(items, selection)
    if selection.class_subsubgroup not in subsubgroups:
        selection = selection.with_class_subsubgroup(ALL)

    days = day_options(items, selection, query)
    if selection.day not in days:
        selection = selection.with_day(ALL)

    return FacetView(
        selection=selection,
        rows=(
            FacetRow("division", divisions, selection.division),
            FacetRow("class_group", groups, selection.class_group),
            FacetRow("class_subgroup", subgroups, selection.class_subgroup),
            FacetRow("class_subsubgroup", subsubgroups, selection.class_subsubgroup),
            FacetRow("day", days, selection.day),
        ),
    )
