"""
Development environment configuration.
Optimized for local development with verbose logging and a local database.
"""

from typing import List
from ..base_config import BaseConfig, Environment, LogLevel


class DevelopmentConfig(BaseConfig):
    """
    Development environment configuration.

    Features:
    - Verbose logging with SQL echo
    - Auto-reload enabled
    - Local SQLite database unless Postgres settings are provided
    - Permissive CORS for the local frontend
    """

    # Environment
    ENVIRONMENT: Environment = Environment.DEVELOPMENT
    DEBUG: bool = True
    RELOAD: bool = True

    # Logging - Verbose for development
    LOG_LEVEL: LogLevel = LogLevel.DEBUG
    LOG_FILE: str = "logs/development.log"
    DATABASE_ECHO: bool = True  # Show SQL queries

    # CORS - Local frontend dev servers
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Database - Local file database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/jobboard_dev.db"
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 5

    # Business Rules - Scan every open job when recommending locally
    RECOMMENDATION_WORKING_SET_LIMIT: int = 500
