"""Notification backends and the fallback-aware notifier"""

import sys
from typing import TextIO

from plyer import notification

from ..config.settings import settings
from ..exceptions import NotificationError
from ..logging_config import get_logger
from ..models.entry import Entry
from .constants import DisplayConstants
from .interfaces import NotificationBackendInterface

logger = get_logger(__name__)


class NativeBackend(NotificationBackendInterface):
    """Desktop notification through plyer's platform facade"""

    name = "native"

    def __init__(self, app_name: str | None = None, timeout: int | None = None):
        self.app_name = app_name or settings.notifier.app_name
        self.timeout = timeout or settings.notifier.timeout

    def show(self, title: str, body: str) -> None:
        try:
            notification.notify(
                title=title,
                message=body,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except Exception as e:
            # plyer raises NotImplementedError, OSError, dbus errors, ...
            raise NotificationError(self.name, e) from e


class ConsoleBackend(NotificationBackendInterface):
    """Writes ``title — body`` as one line to stdout"""

    name = "console"

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def show(self, title: str, body: str) -> None:
        # Resolve stdout at call time so redirection/capture is honoured
        stream = self._stream or sys.stdout
        line = f"{title}{DisplayConstants.SEPARATOR}{body}"
        # Characters the stream cannot encode become '?' instead of raising
        encoding = getattr(stream, "encoding", None) or "utf-8"
        line = line.encode(encoding, errors="replace").decode(encoding)
        print(line, file=stream, flush=True)


class Notifier:
    """Shows entries through a primary backend, falling back per call"""

    def __init__(
        self,
        backend: NotificationBackendInterface | None = None,
        fallback: NotificationBackendInterface | None = None,
    ):
        self.fallback = fallback or ConsoleBackend()
        self.backend = backend
        self._stats = {"shown": 0, "fallbacks": 0}

    def show(self, entry: Entry) -> str:
        """Display one entry; returns the name of the backend that showed it"""
        self._stats["shown"] += 1
        if self.backend is not None:
            try:
                self.backend.show(entry.term, entry.body)
                logger.debug(f"Notified via {self.backend.name}: {entry.term}")
                return self.backend.name
            except Exception as e:
                # Any backend failure is recoverable; never stops the loop
                self._stats["fallbacks"] += 1
                logger.debug(f"Falling back to {self.fallback.name}: {e}")

        self.fallback.show(entry.term, entry.body)
        return self.fallback.name

    def get_statistics(self) -> dict[str, int]:
        """Get notification counters"""
        return self._stats.copy()
