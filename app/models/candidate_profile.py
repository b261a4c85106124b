from sqlalchemy import Column, String, Text, DateTime, JSON, ForeignKey, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class CandidateProfile(Base):
    """Candidate profiles; skills/education/experience are stored as JSON arrays"""

    __tablename__ = "candidate_profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    full_name = Column(String(255), default="")
    phone = Column(String(50), default="")
    location = Column(String(255), default="")
    headline = Column(String(255), default="")
    bio = Column(Text, default="")
    skills = Column(JSON, default=list)
    education = Column(JSON, default=list)
    experience = Column(JSON, default=list)
    linkedin_url = Column(String(512), default="")
    github_url = Column(String(512), default="")
    portfolio_url = Column(String(512), default="")
    resume_path = Column(String(512))
    profile_picture = Column(String(512))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
