from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from app.domain.notifications.entities import Notification

from .base import CamelModel


class NotificationResponse(CamelModel):
    id: UUID
    type: str
    title: str
    message: str
    related_id: Optional[UUID] = None
    is_read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification):
        return cls(
            id=notification.id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            related_id=notification.related_id,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListResponse(CamelModel):
    notifications: List[NotificationResponse] = Field(default_factory=list)
    unread_count: int = 0
