"""
Staging environment configuration.
Production-like environment for pre-deployment testing and validation.
"""

from typing import List
from ..base_config import BaseConfig, Environment, LogLevel


class StagingConfig(BaseConfig):
    """
    Staging environment configuration.

    Features:
    - Production-like settings with safety nets
    - API documentation still available
    - PostgreSQL connection assembled from POSTGRES_* variables
    """

    # Environment
    ENVIRONMENT: Environment = Environment.STAGING
    DEBUG: bool = False
    RELOAD: bool = False
    WORKERS: int = 2  # Moderate workers for staging

    # Logging - Detailed for staging validation
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FILE: str = "/var/log/job_board/staging.log"
    DATABASE_ECHO: bool = False

    # CORS - Staging and testing origins
    CORS_ORIGINS: List[str] = [
        "https://staging.jobboard.example.com",
        "http://localhost:3000",  # For local testing against staging
    ]

    # Database - Staging PostgreSQL
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 10
