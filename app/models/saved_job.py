from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class SavedJob(Base):
    """Candidate bookmarks"""

    __tablename__ = "saved_jobs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    candidate_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    __table_args__ = (UniqueConstraint("candidate_id", "job_id", name="uq_saved_job_candidate_job"),)
