"""
Production environment configuration.
Optimized for performance, security, and reliability in production deployment.
"""

from typing import List, Optional
from ..base_config import BaseConfig, Environment, LogLevel


class ProductionConfig(BaseConfig):
    """
    Production environment configuration.

    Features:
    - Secrets supplied through the environment
    - Larger connection pool
    - API documentation disabled
    - Restricted CORS origins
    """

    # Environment
    ENVIRONMENT: Environment = Environment.PRODUCTION
    DEBUG: bool = False
    RELOAD: bool = False
    WORKERS: int = 4  # Multiple workers for production

    # Logging - Structured and efficient
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: str = "/var/log/job_board/app.log"
    DATABASE_ECHO: bool = False  # No SQL logging in production

    # CORS - Restricted to known origins
    CORS_ORIGINS: List[str] = [
        "https://jobboard.example.com",
        "https://www.jobboard.example.com",
    ]

    # Database - Production PostgreSQL cluster
    DATABASE_POOL_SIZE: int = 20
    DATABASE_MAX_OVERFLOW: int = 30
    DATABASE_POOL_TIMEOUT: int = 60

    # API Documentation - Disabled in production
    DOCS_URL: Optional[str] = None
    REDOC_URL: Optional[str] = None
    OPENAPI_URL: Optional[str] = None
