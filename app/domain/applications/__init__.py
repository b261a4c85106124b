"""
Applications domain module containing entities, services, and repositories
for job applications and their lifecycle.
"""

from .entities import Application, ApplicationStatus, StatusCounts
from .services import (
    ApplicationDomainService,
    ApplicationView,
    CandidateDashboard,
    EmployerDashboard,
)
from .repositories import ApplicationRepository

__all__ = [
    "Application",
    "ApplicationStatus",
    "StatusCounts",
    "ApplicationDomainService",
    "ApplicationView",
    "CandidateDashboard",
    "EmployerDashboard",
    "ApplicationRepository",
]
