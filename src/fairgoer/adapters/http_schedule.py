"""HTTP schedule adapter - fetches a published JSON schedule."""

import logging

import requests

from fairgoer.core.items import ScheduleItem

from .json_schedule import ScheduleLoadError, parse_records

logger = logging.getLogger(__name__)


class HttpScheduleRepository:
    """
    Schedule published as JSON at a URL.

    Implements ScheduleRepository protocol. No caching - every fetch is a
    fresh snapshot.
    """

    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout
        self._session = requests.Session()

    def fetch_items(self) -> list[ScheduleItem]:
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.JSONDecodeError as e:
            raise ScheduleLoadError(f"Schedule at {self.url} is not valid JSON: {e}") from e
        except requests.RequestException as e:
            raise ScheduleLoadError(f"Can't fetch schedule from {self.url}: {e}") from e

        items = parse_records(data)
        logger.info(f"Fetched {len(items)} schedule items from {self.url}")
        return items
