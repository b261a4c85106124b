from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.config_validator import get_config
from app.db.session import get_db
from app.utils.logger import logger

config = get_config()

router = APIRouter(tags=["health"])


class ServiceStatus(BaseModel):
    status: str
    message: str
    response_time_ms: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    timestamp: str
    services: Dict[str, ServiceStatus]


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Health check covering the database"""
    start_time = datetime.now(timezone.utc)

    services = {"database": await _check_database(db)}

    all_healthy = all(service.status == "healthy" for service in services.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=config.APP_VERSION,
        environment=config.ENVIRONMENT.value,
        timestamp=start_time.isoformat(),
        services=services,
    )


@router.get("/health/live")
async def liveness_probe():
    """Kubernetes liveness probe"""
    return {"status": "alive", "timestamp": datetime.now(timezone.utc).isoformat()}


async def _check_database(db: AsyncSession) -> ServiceStatus:
    """Check database connectivity"""
    try:
        start_time = datetime.now()

        await db.execute(text("SELECT 1"))

        response_time = (datetime.now() - start_time).total_seconds() * 1000

        return ServiceStatus(
            status="healthy",
            message="Database connection successful",
            response_time_ms=response_time,
        )
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        return ServiceStatus(
            status="unhealthy",
            message=f"Database connection failed: {str(e)}",
        )
