from fastapi import APIRouter, Depends

from app.dependencies import get_analytics_service
from app.domain.analytics.services import AnalyticsDomainService
from app.schemas.analytics import PublicAnalyticsResponse

router = APIRouter(tags=["analytics"])


@router.get("/public", response_model=PublicAnalyticsResponse)
async def public_analytics(
    analytics_service: AnalyticsDomainService = Depends(get_analytics_service),
):
    """Board totals, top categories, job types and locations for the home page"""
    analytics = await analytics_service.public_analytics()
    return PublicAnalyticsResponse.from_domain(analytics)
