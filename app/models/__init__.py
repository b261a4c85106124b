"""ORM models. Importing this package registers every table on `Base.metadata`."""

from .user import User
from .candidate_profile import CandidateProfile
from .employer_profile import EmployerProfile
from .job import JobPosting
from .application import JobApplication
from .saved_job import SavedJob
from .job_report import JobReport
from .notification import Notification

__all__ = [
    "User",
    "CandidateProfile",
    "EmployerProfile",
    "JobPosting",
    "JobApplication",
    "SavedJob",
    "JobReport",
    "Notification",
]
