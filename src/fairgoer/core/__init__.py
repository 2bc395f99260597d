"""Functional core - pure schedule logic with no I/O."""

from .items import DAYS, DIVISIONS, ClassDetails, ItemKind, ScheduleItem
from .timeparse import UNKNOWN_TIME, estimate_start_time, parse_time_minutes
from .clock import FAIR_TIMEZONE, CivilTime, WallClock, normalize
from .upnext import ClassifiedItem, Status, classify
from .facets import ALL, FacetRow, FacetView, Selection, filter_items, resolve_facets
from .sorting import group_by_day, schedule_sort_key, sort_schedule
from .query import BrowseResult, SessionInfo, UpNextResult, browse, saved, session_info, up_next

__all__ = [
    # Items
    "DAYS",
    "DIVISIONS",
    "ClassDetails",
    "ItemKind",
    "ScheduleItem",
    # Time
    "UNKNOWN_TIME",
    "estimate_start_time",
    "parse_time_minutes",
    "FAIR_TIMEZONE",
    "CivilTime",
    "WallClock",
    "normalize",
    # Classification
    "ClassifiedItem",
    "Status",
    "classify",
    # Facets
    "ALL",
    "FacetRow",
    "FacetView",
    "Selection",
    "filter_items",
    "resolve_facets",
    # Sorting
    "group_by_day",
    "schedule_sort_key",
    "sort_schedule",
    # Views
    "BrowseResult",
    "SessionInfo",
    "UpNextResult",
    "browse",
    "saved",
    "session_info",
    "up_next",
]
