"""Schedule repository interface."""

from typing import Protocol

from fairgoer.core.items import ScheduleItem


class ScheduleRepository(Protocol):
    """Interface for loading the fair schedule from any backend."""

    def fetch_items(self) -> list[ScheduleItem]:
        """Fetch every schedule item (a fresh snapshot per call)."""
        ...
