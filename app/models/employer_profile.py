from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class EmployerProfile(Base):
    """Company profile attached to an employer account"""

    __tablename__ = "employer_profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    company_name = Column(String(255), nullable=False, index=True)
    company_description = Column(Text, default="")
    industry = Column(String(255), default="")
    company_size = Column(String(50), default="")
    website = Column(String(512), default="")
    location = Column(String(255), default="")
    phone = Column(String(50), default="")
    logo_path = Column(String(512))
    is_verified = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
