"""Periodic re-classification of the happening-now board."""

import logging
from datetime import datetime, timezone
from typing import Callable

from apscheduler.triggers.interval import IntervalTrigger

from .config import Config
from .core.query import UpNextResult, up_next
from .ports import ScheduleRepository

logger = logging.getLogger(__name__)

REFRESH_JOB_ID = "up_next_refresh"


class UpNextBoard:
    """
    Latest happening-now snapshot.

    Every refresh fetches a fresh item snapshot and replaces `latest`
    wholesale, so a timer tick and a manual refresh can overlap safely.
    """

    def __init__(
        self,
        repository: ScheduleRepository,
        config: Config,
        clock: Callable[[], datetime] | None = None,
    ):
        self.repository = repository
        self.config = config
        self.override = config.wall_clock_override()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.latest: UpNextResult | None = None

    @property
    def is_simulated(self) -> bool:
        return self.override is not None

    def refresh(self) -> UpNextResult:
        """Reload items and classify them against now."""
        items = self.repository.fetch_items()
        self.latest = up_next(items, self._clock(), self.config.timezone, self.override)
        logger.debug(f"Up-next board refreshed: {len(self.latest.items)} items")
        return self.latest


def schedule_refresh(
    scheduler,
    board: UpNextBoard,
    interval_seconds: int = 60,
    on_refresh: Callable[[UpNextResult], None] | None = None,
):
    """
    Register the periodic refresh job on an APScheduler scheduler.

    Returns the job, or None when a test time is set - a simulated clock
    doesn't move, so it is refreshed on request only.
    """
    if board.is_simulated:
        logger.info("Test time active - periodic refresh disabled")
        return None

    def refresh_job():
        try:
            result = board.refresh()
        except Exception as e:
            logger.error(f"Up-next refresh failed: {e}")
            return
        if on_refresh is not None:
            on_refresh(result)

    job = scheduler.add_job(
        refresh_job,
        IntervalTrigger(seconds=interval_seconds),
        id=REFRESH_JOB_ID,
        replace_existing=True,
    )
    logger.info(f"Scheduled up-next refresh every {interval_seconds}s")
    return job
