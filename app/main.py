from contextlib import asynccontextmanager
from datetime import datetime
import logging.config

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import models  # noqa: F401  registers every table on Base.metadata
from app.db.session import engine
from app.db.base import Base
from app.api.router import api_router
from app.config.config_validator import get_config
from app.core.constants import ErrorCodes, ErrorMessages
from app.core.monitoring import CorrelationMiddleware, get_correlation_tracker, get_current_correlation_id
from app.utils.error_handling import BaseApplicationError, ErrorHandler
from app.utils.logger import logger

config = get_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""

    # Application startup
    try:
        logging_config = config.get_logging_config()
        logging.config.dictConfig(logging_config)
        logger.info("Configured logging for environment", environment=config.ENVIRONMENT.value)

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")

        logger.info(
            "Application started successfully",
            app_name=config.APP_NAME,
            version=config.APP_VERSION,
            environment=config.ENVIRONMENT.value,
        )

        yield

        # Application shutdown
        logger.info("Shutting down application")
        await engine.dispose()
        logger.info("Application shutdown completed")

    except Exception as e:
        logger.error("Application startup/shutdown error", error=str(e))
        raise


app = FastAPI(
    title=config.APP_NAME,
    description=config.APP_DESCRIPTION,
    version=config.APP_VERSION,
    debug=config.DEBUG,
    docs_url=config.DOCS_URL,
    redoc_url=config.REDOC_URL,
    openapi_url=config.OPENAPI_URL,
    lifespan=lifespan,
)


@app.exception_handler(BaseApplicationError)
async def application_error_handler(request: Request, exc: BaseApplicationError):
    if not exc.correlation_id:
        exc.correlation_id = get_current_correlation_id()
    exc.log_error()

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    correlation_id = getattr(request.state, "correlation_id", None) or get_current_correlation_id()
    ErrorHandler.log_error(
        exc,
        correlation_id=correlation_id,
        additional_context={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error_code": ErrorCodes.SYSTEM_INTERNAL_ERROR,
            "message": ErrorMessages.get_message(ErrorCodes.SYSTEM_INTERNAL_ERROR),
            "details": {},
            "timestamp": datetime.utcnow().isoformat(),
            "correlation_id": correlation_id,
        },
    )


app.add_middleware(CorrelationMiddleware, tracker=get_correlation_tracker())

cors_config = config.get_cors_config()
app.add_middleware(CORSMiddleware, **cors_config)

app.include_router(api_router, prefix=config.API_V1_STR)
