"""Alerts sent to tagged users on submission."""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from ..config import NotificationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A transient alert; the display layer hides it after display_seconds."""

    message: str
    display_seconds: float


def format_alert(names: Iterable[str], header: str = "Sending alerts to:") -> str:
    """Build the alert text: the header followed by one name per line."""
    lines = [header] if header else []
    lines.extend(names)
    return "\n".join(lines)


class NotificationService:
    """Records alerts for the display layer."""

    def __init__(self, display_seconds: float = 2.0):
        self.display_seconds = display_seconds
        self._sent: List[Notification] = []

    @classmethod
    def from_config(cls, config: NotificationConfig) -> "NotificationService":
        return cls(display_seconds=config.display_seconds)

    def notify(self, message: str) -> Notification:
        """Record an alert."""
        notification = Notification(message=message, display_seconds=self.display_seconds)
        self._sent.append(notification)
        logger.info("Alert: %s", message.replace("\n", " | "))
        return notification

    @property
    def sent(self) -> List[Notification]:
        return list(self._sent)

    @property
    def latest(self) -> Notification | None:
        return self._sent[-1] if self._sent else None
