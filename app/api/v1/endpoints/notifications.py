from uuid import UUID

from fastapi import APIRouter, Depends

from app.core.auth import get_current_user
from app.dependencies import get_notification_service
from app.domain.notifications.services import NotificationService
from app.domain.users.entities import User
from app.schemas.base import MessageResponse
from app.schemas.notifications import NotificationListResponse, NotificationResponse

router = APIRouter(tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service),
):
    notifications, unread = await notification_service.list_notifications(user.id)
    return NotificationListResponse(
        notifications=[NotificationResponse.from_domain(n) for n in notifications],
        unread_count=unread,
    )


@router.put("/read-all", response_model=MessageResponse)
async def mark_all_read(
    user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.mark_all_read(user.id)
    return MessageResponse(message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=MessageResponse)
async def mark_read(
    notification_id: UUID,
    user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.mark_read(user.id, notification_id)
    return MessageResponse(message="Notification marked as read")


@router.delete("", response_model=MessageResponse)
async def clear_notifications(
    user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.clear(user.id)
    return MessageResponse(message="All notifications cleared")


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service),
):
    await notification_service.delete(user.id, notification_id)
    return MessageResponse(message="Notification deleted")
