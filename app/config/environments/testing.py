"""
Testing environment configuration.
Optimized for automated testing with fast execution and isolation.
"""

from typing import List, Optional
from ..base_config import BaseConfig, Environment, LogLevel


class TestingConfig(BaseConfig):
    """
    Testing environment configuration.

    Features:
    - In-memory SQLite database for isolation
    - Minimal logging to reduce noise
    - Fixed secret for signing test tokens
    """

    # Environment
    ENVIRONMENT: Environment = Environment.TESTING
    DEBUG: bool = False
    RELOAD: bool = False

    # Logging - Minimal for testing
    LOG_LEVEL: LogLevel = LogLevel.WARNING
    LOG_FILE: Optional[str] = None
    DATABASE_ECHO: bool = False

    # CORS - Permissive for testing
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Security - Relaxed for testing
    SECRET_KEY: str = "test-secret-key-not-for-production-use-only"

    # Database - In-memory SQLite for fast testing
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    DATABASE_POOL_SIZE: int = 1
    DATABASE_MAX_OVERFLOW: int = 0
    DATABASE_POOL_TIMEOUT: int = 5
