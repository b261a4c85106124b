from fastapi import APIRouter
from app.api.v1.endpoints import analytics, health, jobs, candidate, employer, notifications

api_router = APIRouter()

# Include routers from different modules with appropriate prefixes
api_router.include_router(health.router)  # Health endpoints at root level
api_router.include_router(jobs.router, prefix="/jobs")
api_router.include_router(candidate.router, prefix="/candidate")
api_router.include_router(employer.router, prefix="/employer")
api_router.include_router(notifications.router, prefix="/notifications")
api_router.include_router(analytics.router, prefix="/analytics")
