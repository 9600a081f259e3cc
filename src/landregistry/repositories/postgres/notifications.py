"""PostgreSQL notification repository."""

from __future__ import annotations

from sqlalchemy import func, select

from landregistry.core.types import (
    NotificationPriority,
    NotificationStatus,
    NotificationType,
)
from landregistry.db.engine import DatabaseManager
from landregistry.db.models import NotificationRow
from landregistry.notifications.models import Notification


class PostgresNotificationRepository:
    """Postgres-backed notification storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save(self, notification: Notification) -> Notification:
        async with self._db.session() as db:
            existing = await db.get(NotificationRow, notification.id)
            if existing:
                existing.status = notification.status.value
                existing.priority = notification.priority.value
                existing.title = notification.title
                existing.message = notification.message
                existing.data = notification.data
                existing.read_at = notification.read_at
                existing.archived_at = notification.archived_at
                existing.expires_at = notification.expires_at
                existing.email_sent = notification.email_sent
                existing.email_sent_at = notification.email_sent_at
            else:
                row = NotificationRow(
                    id=notification.id,
                    user_id=notification.user_id,
                    type=notification.type.value,
                    priority=notification.priority.value,
                    status=notification.status.value,
                    title=notification.title,
                    message=notification.message,
                    icon=notification.icon,
                    action_text=notification.action_text,
                    action_url=notification.action_url,
                    data=notification.data,
                    related_entity_type=notification.related_entity_type,
                    related_entity_id=notification.related_entity_id,
                    read_at=notification.read_at,
                    archived_at=notification.archived_at,
                    expires_at=notification.expires_at,
                    email_sent=notification.email_sent,
                    email_sent_at=notification.email_sent_at,
                    created_at=notification.created_at,
                )
                db.add(row)
            await db.commit()
        return notification

    async def get(self, notification_id: str) -> Notification | None:
        async with self._db.session() as db:
            row = await db.get(NotificationRow, notification_id)
            if row is None:
                return None
            return self._row_to_notification(row)

    async def count(self) -> int:
        async with self._db.session() as db:
            result = await db.execute(select(func.count()).select_from(NotificationRow))
            return result.scalar_one()

    async def list_for_user(self, user_id: str) -> list[Notification]:
        async with self._db.session() as db:
            result = await db.execute(
                select(NotificationRow)
                .where(NotificationRow.user_id == user_id)
                .order_by(NotificationRow.created_at.desc())
            )
            return [self._row_to_notification(r) for r in result.scalars().all()]

    async def list_all(self) -> list[Notification]:
        async with self._db.session() as db:
            result = await db.execute(select(NotificationRow))
            return [self._row_to_notification(r) for r in result.scalars().all()]

    @staticmethod
    def _row_to_notification(row: NotificationRow) -> Notification:
        return Notification(
            id=row.id,
            user_id=row.user_id,
            type=NotificationType(row.type),
            priority=NotificationPriority(row.priority),
            status=NotificationStatus(row.status),
            title=row.title,
            message=row.message,
            icon=row.icon,
            action_text=row.action_text,
            action_url=row.action_url,
            data=row.data or {},
            related_entity_type=row.related_entity_type,
            related_entity_id=row.related_entity_id,
            read_at=row.read_at,
            archived_at=row.archived_at,
            expires_at=row.expires_at,
            email_sent=row.email_sent,
            email_sent_at=row.email_sent_at,
            created_at=row.created_at,
        )
