"""Interface definitions for core components"""

from abc import ABC, abstractmethod


class NotificationBackendInterface(ABC):
    """Interface for anything that can display a title/body pair"""

    name: str = "backend"

    @abstractmethod
    def show(self, title: str, body: str) -> None:
        """Display one notification.

        Raises:
            NotificationError: If the notification could not be displayed
        """
        pass
