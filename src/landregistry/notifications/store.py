"""In-memory notification store."""

from __future__ import annotations

from landregistry.notifications.models import Notification


class NotificationStore:
    """In-memory store for notifications."""

    def __init__(self) -> None:
        self._notifications: dict[str, Notification] = {}

    def save(self, notification: Notification) -> Notification:
        self._notifications[notification.id] = notification
        return notification

    def get(self, notification_id: str) -> Notification | None:
        return self._notifications.get(notification_id)

    def count(self) -> int:
        return len(self._notifications)

    def list_for_user(self, user_id: str) -> list[Notification]:
        matches = [n for n in self._notifications.values() if n.user_id == user_id]
        return sorted(matches, key=lambda n: n.created_at, reverse=True)

    def list_all(self) -> list[Notification]:
        return list(self._notifications.values())
