"""
Users domain module containing entities, services, and repositories
for accounts, candidate profiles and company profiles.
"""

from .entities import User, UserRole, CandidateProfile, EmployerProfile
from .services import UserDomainService, CompanyPage
from .repositories import UserRepository, ProfileRepository

__all__ = [
    "User",
    "UserRole",
    "CandidateProfile",
    "EmployerProfile",
    "UserDomainService",
    "CompanyPage",
    "UserRepository",
    "ProfileRepository",
]
