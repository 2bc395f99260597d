"""Ports - interfaces/protocols for external dependencies."""

from .schedule_repo import ScheduleRepository
from .favorites_store import FavoritesStore

__all__ = [
    "ScheduleRepository",
    "FavoritesStore",
]
