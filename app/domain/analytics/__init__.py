"""
Analytics domain module containing the public board statistics.
"""

from .entities import BoardTotals, JobTypeCount, LocationCount, PublicAnalytics
from .services import AnalyticsDomainService

__all__ = [
    "BoardTotals",
    "JobTypeCount",
    "LocationCount",
    "PublicAnalytics",
    "AnalyticsDomainService",
]
