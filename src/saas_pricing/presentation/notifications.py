"""Transient, dismissible error notifications."""
import itertools
import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class Notification:
    """A single error notification."""
    id: int
    message: str
    created_at: float
    expires_at: float
    dismissed: bool = False

    def is_active(self, now: float) -> bool:
        return not self.dismissed and now < self.expires_at


class NotificationCenter:
    """
    Holds the notifications currently on screen.

    Each notification auto-dismisses after ``auto_dismiss_seconds`` and can be
    dismissed earlier by the user.
    """

    def __init__(self, auto_dismiss_seconds: float = 5.0,
                 clock: Optional[Callable[[], float]] = None):
        self.auto_dismiss_seconds = auto_dismiss_seconds
        self.clock = clock or time.monotonic
        self._ids = itertools.count(1)
        self._items: list[Notification] = []

    def show(self, message: str) -> Notification:
        """Add a notification and return it."""
        now = self.clock()
        self._items = [n for n in self._items if n.is_active(now)]
        notification = Notification(
            id=next(self._ids),
            message=message,
            created_at=now,
            expires_at=now + self.auto_dismiss_seconds,
        )
        self._items.append(notification)
        return notification

    def dismiss(self, notification_id: int) -> bool:
        """Dismiss by id. Returns False if no such notification is active."""
        now = self.clock()
        for notification in self._items:
            if notification.id == notification_id and notification.is_active(now):
                notification.dismissed = True
                return True
        return False

    def active(self) -> list[Notification]:
        """Notifications still on screen, oldest first. Drops expired ones."""
        now = self.clock()
        self._items = [n for n in self._items if n.is_active(now)]
        return list(self._items)
