"""JSON file schedule adapter."""

import json
import logging
from pathlib import Path

from fairgoer.core.items import ScheduleItem
from fairgoer.core.timeparse import estimate_start_time

logger = logging.getLogger(__name__)


class ScheduleLoadError(Exception):
    """Raised when the schedule source can't be read at all."""

    pass


def parse_records(data: dict | list) -> list[ScheduleItem]:
    """
    Build schedule items from decoded JSON.

    Accepts a list of records or {"items": [...]}. Classes without a
    published time get one estimated from their session start and order.
    Malformed records are skipped; anything that is not a list of records
    raises ScheduleLoadError.
    """
    records = data.get("items", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ScheduleLoadError(f"Schedule must be a list of records, got {type(records).__name__}")

    items = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping schedule record {i}: not an object")
            continue

        if not record.get("time") and record.get("sessionStartTime"):
            record = {
                **record,
                "time": estimate_start_time(record["sessionStartTime"], _order(record.get("order"))),
            }

        try:
            items.append(ScheduleItem.from_record(record))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping schedule record {i}: {e}")

    return items


def _order(value) -> int | None:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


class JsonScheduleRepository:
    """
    Schedule stored as a JSON file.

    Implements ScheduleRepository protocol. Re-reads the file on every fetch
    so an updated export is picked up by the next refresh.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_items(self) -> list[ScheduleItem]:
        try:
            data = json.loads(self.path.read_text())
        except OSError as e:
            raise ScheduleLoadError(f"Can't read schedule file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ScheduleLoadError(f"Schedule file {self.path} is not valid JSON: {e}") from e

        items = parse_records(data)
        logger.info(f"Loaded {len(items)} schedule items from {self.path}")
        return items
