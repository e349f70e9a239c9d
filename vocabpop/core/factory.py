"""Factory functions for creating configured instances"""

import random
import time
from collections.abc import Callable

from ..config.settings import RunConfig
from ..models.entry import Entry
from .interfaces import NotificationBackendInterface
from .loader import load_vocabulary
from .notifier import ConsoleBackend, NativeBackend, Notifier
from .scheduler import Scheduler, forever
from .selector import EntrySelector


def create_notifier(
    config: RunConfig,
    backend: NotificationBackendInterface | None = None,
) -> Notifier:
    """Create a notifier; console-only runs get no native backend"""
    if backend is None and not config.console_only:
        backend = NativeBackend()
    return Notifier(backend=backend, fallback=ConsoleBackend())


def create_scheduler(
    config: RunConfig,
    entries: list[Entry] | None = None,
    notifier: Notifier | None = None,
    sleep: Callable[[float], None] = time.sleep,
    should_continue: Callable[[], bool] = forever,
    rng: random.Random | None = None,
) -> Scheduler:
    """Create a scheduler from a run configuration.

    Entries are loaded from ``config.dir`` unless given explicitly.

    Raises:
        NoVocabularyFoundError: If the directory holds no valid entries
    """
    if entries is None:
        entries = load_vocabulary(config.dir, comment_prefix=config.comment_prefix)

    selector = EntrySelector(entries, shuffle=config.shuffle, rng=rng)
    return Scheduler(
        selector=selector,
        notifier=notifier or create_notifier(config),
        interval_minutes=config.interval_minutes,
        sleep=sleep,
        should_continue=should_continue,
    )
