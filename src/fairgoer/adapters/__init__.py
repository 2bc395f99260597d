"""Adapters - I/O implementations of ports."""

from .json_schedule import JsonScheduleRepository, ScheduleLoadError
from .http_schedule import HttpScheduleRepository
from .file_favorites import FileFavoritesStore

__all__ = [
    "JsonScheduleRepository",
    "HttpScheduleRepository",
    "ScheduleLoadError",
    "FileFavoritesStore",
]
