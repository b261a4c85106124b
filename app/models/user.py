from sqlalchemy import Column, String, DateTime, Boolean, Index, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class User(Base):
    """User accounts. Credentials live with the auth service; only identity and role are kept here."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, index=True)
    role = Column(String(20), nullable=False, index=True)  # employer | candidate
    email_verified = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (Index("idx_user_role_created", "role", "created_at"),)
