"""
Jobs domain module containing entities, services, and repositories
for job-related business logic.
"""

from .entities import Job, JobStatus, JobType, JobFilters, SavedJob, JobReport
from .services import JobDomainService, JobDetail
from .repositories import JobRepository, SavedJobRepository, JobReportRepository

__all__ = [
    "Job",
    "JobStatus",
    "JobType",
    "JobFilters",
    "SavedJob",
    "JobReport",
    "JobDomainService",
    "JobDetail",
    "JobRepository",
    "SavedJobRepository",
    "JobReportRepository",
]
