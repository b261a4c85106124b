"""
Notifications domain repositories.

Every query is scoped by the owning user; there is no way to reach another
user's notifications through this interface.
"""

from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from sqlalchemy import delete, desc, func, select, update

from app.models import Notification as NotificationModel

from .entities import Notification


class NotificationRepository(ABC):
    """Abstract repository interface for notifications."""

    @abstractmethod
    async def add(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID, limit: int) -> List[Notification]:
        """Notifications of a user, newest first."""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def mark_read(self, user_id: UUID, notification_id: UUID) -> bool:
        """Returns False if the notification does not exist for this user."""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def delete(self, user_id: UUID, notification_id: UUID) -> bool:
        pass

    @abstractmethod
    async def delete_all(self, user_id: UUID) -> int:
        pass


def notification_from_model(row: NotificationModel) -> Notification:
    return Notification(
        id=row.id,
        user_id=row.user_id,
        type=row.type,
        title=row.title,
        message=row.message,
        related_id=row.related_id,
        is_read=bool(row.is_read),
        created_at=row.created_at,
    )


class SQLAlchemyNotificationRepository(NotificationRepository):
    """SQLAlchemy implementation of the notification repository."""

    def __init__(self, db_session):
        self.db_session = db_session

    async def add(self, notification: Notification) -> Notification:
        row = NotificationModel(
            id=notification.id,
            user_id=notification.user_id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            related_id=notification.related_id,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )
        self.db_session.add(row)
        await self.db_session.commit()
        return notification

    async def list_for_user(self, user_id: UUID, limit: int) -> List[Notification]:
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.user_id == user_id)
            .order_by(desc(NotificationModel.created_at))
            .limit(limit)
        )
        result = await self.db_session.execute(stmt)
        return [notification_from_model(row) for row in result.scalars().all()]

    async def count_unread(self, user_id: UUID) -> int:
        stmt = select(func.count(NotificationModel.id)).where(
            NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False)
        )
        result = await self.db_session.execute(stmt)
        return result.scalar_one()

    async def mark_read(self, user_id: UUID, notification_id: UUID) -> bool:
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.id == notification_id, NotificationModel.user_id == user_id)
            .values(is_read=True)
        )
        result = await self.db_session.execute(stmt)
        await self.db_session.commit()
        return result.rowcount > 0

    async def mark_all_read(self, user_id: UUID) -> int:
        stmt = (
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False))
            .values(is_read=True)
        )
        result = await self.db_session.execute(stmt)
        await self.db_session.commit()
        return result.rowcount

    async def delete(self, user_id: UUID, notification_id: UUID) -> bool:
        stmt = delete(NotificationModel).where(
            NotificationModel.id == notification_id, NotificationModel.user_id == user_id
        )
        result = await self.db_session.execute(stmt)
        await self.db_session.commit()
        return result.rowcount > 0

    async def delete_all(self, user_id: UUID) -> int:
        result = await self.db_session.execute(
            delete(NotificationModel).where(NotificationModel.user_id == user_id)
        )
        await self.db_session.commit()
        return result.rowcount
