"""
Notification queue for the workspace store.

Notifications are kept in insertion order, oldest first. Each one carries
the handle of its pending expiry so an early dismissal can cancel it.
"""

import logging
from typing import Dict, Iterator, List, Optional

from ..models import Notification
from .scheduling import ScheduledHandle


class NotificationQueue:
    """
    Ordered collection of live notifications and their expiry handles.
    """

    def __init__(self):
        self._items: List[Notification] = []
        self._expiries: Dict[str, ScheduledHandle] = {}

    def append(self, notification: Notification, expiry: Optional[ScheduledHandle] = None) -> None:
        """
        Add a notification at the end of the queue.

        Args:
            notification: The notification to show
            expiry: Handle of the scheduled removal, if one was scheduled
        """
        self._items.append(notification)
        if expiry is not None:
            self._expiries[notification.id] = expiry

    def discard(self, notification_id: str) -> bool:
        """
        Remove a notification and cancel its pending expiry.

        Returns:
            True if the notification was present, False otherwise
        """
        expiry = self._expiries.pop(notification_id, None)
        if expiry is not None:
            expiry.cancel()

        remaining = [n for n in self._items if n.id != notification_id]
        if len(remaining) == len(self._items):
            return False

        self._items = remaining
        logging.debug(f"Removed notification {notification_id}")
        return True

    def clear(self) -> None:
        for expiry in self._expiries.values():
            expiry.cancel()
        self._expiries.clear()
        self._items = []

    def snapshot(self) -> List[Notification]:
        return list(self._items)

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, notification_id: object) -> bool:
        return any(n.id == notification_id for n in self._items)
