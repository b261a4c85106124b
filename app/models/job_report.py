from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint, Uuid
from datetime import datetime
from app.db.base import Base
import uuid


class JobReport(Base):
    """Candidate reports against a job posting"""

    __tablename__ = "job_reports"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    candidate_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    reason = Column(String(255), nullable=False)
    description = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (UniqueConstraint("job_id", "candidate_id", name="uq_job_report_job_candidate"),)
