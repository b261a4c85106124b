"""
Notifications domain module: in-app messages delivered to users when
something happens to their jobs or applications.
"""

from .entities import Notification
from .repositories import NotificationRepository
from .services import NotificationService

__all__ = [
    "Notification",
    "NotificationRepository",
    "NotificationService",
]
