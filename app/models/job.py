from sqlalchemy import (
    Column,
    String,
    Text,
    Integer,
    DateTime,
    JSON,
    ForeignKey,
    Index,
    Uuid,
)
from datetime import datetime
from app.db.base import Base
import uuid


class JobPosting(Base):
    """Job postings with indexes for the public listing filters"""

    __tablename__ = "jobs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employer_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False, index=True)
    salary_min = Column(Integer)
    salary_max = Column(Integer)
    job_type = Column(String(20), nullable=False, index=True)
    category = Column(String(100), default="", index=True)
    required_skills = Column(JSON, default=list)
    experience_level = Column(String(100), default="")
    status = Column(String(20), default="open", nullable=False, index=True)
    report_count = Column(Integer, default=0, nullable=False)
    application_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_job_status_created", "status", "created_at"),  # Open jobs, newest first
        Index("idx_job_employer_status", "employer_id", "status"),
    )
