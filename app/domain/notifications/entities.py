"""
Notifications domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Notification:
    """An in-app message addressed to a single user"""

    user_id: UUID
    type: str
    title: str
    message: str
    related_id: Optional[UUID] = None
    id: UUID = field(default_factory=uuid4)
    is_read: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    def belongs_to(self, user_id: UUID) -> bool:
        return self.user_id == user_id
