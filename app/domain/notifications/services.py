"""
Notification domain service: the sink other domains write to, and the
read/mark/delete operations exposed to the owning user.
"""

from typing import List, Optional, Tuple
from uuid import UUID
import logging

from app.core.constants import ErrorCodes
from app.utils.error_handling import ResourceNotFoundError

from .entities import Notification
from .repositories import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Records and manages in-app notifications."""

    def __init__(self, repository: NotificationRepository, list_limit: int = 50):
        self.repository = repository
        self.list_limit = list_limit

    async def notify(
        self,
        user_id: UUID,
        notification_type: str,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> Notification:
        """Record a notification for `user_id`."""
        notification = Notification(
            user_id=user_id,
            type=notification_type,
            title=title,
            message=message,
            related_id=related_id,
        )
        saved = await self.repository.add(notification)
        logger.info(f"Notification {notification_type} recorded for user {user_id}")
        return saved

    async def list_notifications(self, user_id: UUID) -> Tuple[List[Notification], int]:
        """Newest notifications of the user together with the unread count."""
        notifications = await self.repository.list_for_user(user_id, self.list_limit)
        unread_count = await self.repository.count_unread(user_id)
        return notifications, unread_count

    async def unread_count(self, user_id: UUID) -> int:
        return await self.repository.count_unread(user_id)

    async def mark_read(self, user_id: UUID, notification_id: UUID) -> None:
        if not await self.repository.mark_read(user_id, notification_id):
            raise ResourceNotFoundError(
                "notification", notification_id, ErrorCodes.RESOURCE_NOTIFICATION_NOT_FOUND
            )

    async def mark_all_read(self, user_id: UUID) -> int:
        return await self.repository.mark_all_read(user_id)

    async def delete(self, user_id: UUID, notification_id: UUID) -> None:
        if not await self.repository.delete(user_id, notification_id):
            raise ResourceNotFoundError(
                "notification", notification_id, ErrorCodes.RESOURCE_NOTIFICATION_NOT_FOUND
            )

    async def clear(self, user_id: UUID) -> int:
        removed = await self.repository.delete_all(user_id)
        logger.info(f"Cleared {removed} notifications for user {user_id}")
        return removed
