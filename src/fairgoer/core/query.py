"""Schedule views assembled from the pure core - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

from .clock import FAIR_TIMEZONE, CivilTime, WallClock, normalize
from .facets import FacetView, Selection, filter_items, resolve_facets
from .items import ScheduleItem
from .sorting import group_by_day, sort_schedule
from .upnext import ClassifiedItem, classify


@dataclass(frozen=True)
class BrowseResult:
    """Filtered, sorted items plus the facet rows that produced them."""

    items: list[ScheduleItem]
    facets: FacetView

    @property
    def selection(self) -> Selection:
        return self.facets.selection


@dataclass(frozen=True)
class UpNextResult:
    """Classified items and the civil time they were classified against."""

    now: CivilTime
    items: list[ClassifiedItem]


@dataclass(frozen=True)
class SessionInfo:
    """Where a class sits in its session ("class 3 of 12")."""

    position: int | None
    total: int

    def format(self) -> str:
        position = self.position if self.position is not None else "?"
        return f"Class {position} of {self.total}"


def browse(
    items: list[ScheduleItem],
    selection: Selection,
    query: str = "",
) -> BrowseResult:
    """
    Resolve facets, filter, and sort for the browsing view.

    Pure function - no I/O. Stale selections are clamped before filtering.
    """
    facets = resolve_facets(items, selection, query)
    filtered = filter_items(items, facets.selection, query)
    return BrowseResult(items=sort_schedule(filtered), facets=facets)


def up_next(
    items: list[ScheduleItem],
    instant: datetime,
    tz: str = FAIR_TIMEZONE,
    override: WallClock | None = None,
) -> UpNextResult:
    """Classify items against the fair civil time for an instant."""
    now = normalize(instant, tz, override)
    return UpNextResult(now=now, items=classify(items, now))


def saved(
    items: list[ScheduleItem],
    favorite_ids: set[str],
) -> list[tuple[str, list[ScheduleItem]]]:
    """Saved items in display order, sectioned by day."""
    picked = [item for item in items if item.id in favorite_ids]
    return group_by_day(sort_schedule(picked))


def session_info(items: list[ScheduleItem], item: ScheduleItem) -> SessionInfo:
    """
    Position of an item among the classes sharing its session.

    Without a session id, items at the same location on the same day count
    as one session.
    """
    if item.session_id:
        members = [i for i in items if i.session_id == item.session_id]
    else:
        members = [
            i for i in items
            if not i.session_id and i.location == item.location and i.day == item.day
        ]
    return SessionInfo(position=item.order, total=len(members))
