"""Notification data model."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from landregistry.core.types import (
    NotificationPriority,
    NotificationStatus,
    NotificationType,
)


class Notification(BaseModel):
    """A message shown to one account, optionally pointing at a registry record."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str
    type: NotificationType
    priority: NotificationPriority = NotificationPriority.MEDIUM
    status: NotificationStatus = NotificationStatus.UNREAD
    title: str
    message: str
    icon: str | None = None
    action_text: str | None = None
    action_url: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    related_entity_type: str | None = None
    related_entity_id: str | None = None
    read_at: datetime | None = None
    archived_at: datetime | None = None
    expires_at: datetime | None = None
    email_sent: bool = False
    email_sent_at: datetime | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
