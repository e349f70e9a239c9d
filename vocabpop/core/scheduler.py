"""Notification loop: single-shot or fixed-interval continuous mode"""

import time
from collections.abc import Callable

from ..logging_config import get_logger
from ..models.entry import Entry
from .constants import SchedulerConstants
from .notifier import Notifier
from .selector import EntrySelector

logger = get_logger(__name__)


def forever() -> bool:
    return True


class Scheduler:
    """Drives selector -> notifier, sleeping a fixed interval between calls"""

    def __init__(
        self,
        selector: EntrySelector,
        notifier: Notifier,
        interval_minutes: int = 1,
        sleep: Callable[[float], None] = time.sleep,
        should_continue: Callable[[], bool] = forever,
    ):
        if interval_minutes <= 0:
            raise ValueError("interval_minutes must be positive")
        self.selector = selector
        self.notifier = notifier
        self.interval_seconds = interval_minutes * SchedulerConstants.SECONDS_PER_MINUTE
        self._sleep = sleep
        self._should_continue = should_continue

    def notify_next(self) -> Entry:
        """Show the next entry once"""
        entry = self.selector.next()
        self.notifier.show(entry)
        return entry

    def run_once(self) -> int:
        """Forced mode: one notification, then exit status 0"""
        self.notify_next()
        return 0

    def run_forever(self) -> int:
        """Continuous mode; returns the number of notifications shown.

        Each sleep starts after the previous notification returns, so no
        wall-clock drift correction is made.
        """
        shown = 0
        logger.info(
            f"Showing {len(self.selector)} entries every "
            f"{self.interval_seconds / SchedulerConstants.SECONDS_PER_MINUTE:g} min"
        )
        while self._should_continue():
            self.notify_next()
            shown += 1
            self._sleep(self.interval_seconds)
        return shown

    def run(self, force: bool = False) -> int:
        """Run in the requested mode and return the exit status"""
        if force:
            return self.run_once()
        self.run_forever()
        return 0
