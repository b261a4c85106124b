from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey, Index, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class Notification(Base):
    """In-app notifications"""

    __tablename__ = "notifications"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(50), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(Uuid(as_uuid=True))
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    __table_args__ = (Index("idx_notification_user_read", "user_id", "is_read"),)
