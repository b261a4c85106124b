"""
Base configuration class for the job board API.
This provides the foundation for environment-specific configurations.
"""

from pydantic_settings import BaseSettings
from pydantic import field_validator, ConfigDict
from typing import List, Dict, Any, Optional
from enum import Enum


class Environment(str, Enum):
    """Application environment enumeration."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class BaseConfig(BaseSettings):
    """
    Base configuration class containing common settings across all environments.
    Environment-specific configurations should inherit from this class.
    """

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Information
    APP_NAME: str = "Job Board API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = (
        "Job board service: postings, applications, saved jobs and skill-based recommendations"
    )
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # API Configuration
    API_V1_STR: str = "/api/v1"
    OPENAPI_URL: Optional[str] = "/api/v1/openapi.json"
    DOCS_URL: Optional[str] = "/api/v1/docs"
    REDOC_URL: Optional[str] = "/api/v1/redoc"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    RELOAD: bool = False
    WORKERS: int = 1

    # Security Configuration (tokens are issued by the auth service)
    SECRET_KEY: str = "development-secret-key-change-in-production"
    ALGORITHM: str = "HS256"

    # Database Configuration
    POSTGRES_SERVER: str = ""
    POSTGRES_USER: str = ""
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = ""
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_ECHO: bool = False

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # Logging Configuration
    LOG_LEVEL: LogLevel = LogLevel.INFO
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_FILE: Optional[str] = None
    LOG_MAX_SIZE: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5

    # Business Rules
    RECOMMENDATION_WORKING_SET_LIMIT: Optional[int] = 100
    RECOMMENDATION_LIMIT: int = 10
    JOB_REPORT_THRESHOLD: int = 5
    RECENT_JOBS_DEFAULT_LIMIT: int = 6
    DEFAULT_LIST_LIMIT: int = 50
    MAX_LIST_LIMIT: int = 200

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info) -> Optional[str]:
        """Build database URL from components if not provided directly."""
        if isinstance(v, str) and v:
            return v

        values = info.data
        user = values.get("POSTGRES_USER")
        password = values.get("POSTGRES_PASSWORD")
        host = values.get("POSTGRES_SERVER")
        port = values.get("POSTGRES_PORT")
        db = values.get("POSTGRES_DB")

        if not (user and host and db):
            return None

        auth = user if password in (None, "") else f"{user}:{password}"
        port_part = f":{port}" if port else ""
        return f"postgresql+asyncpg://{auth}@{host}{port_part}/{db}"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    def get_database_config(self) -> Dict[str, Any]:
        """Get database engine keyword arguments."""
        config: Dict[str, Any] = {"echo": self.DATABASE_ECHO, "pool_pre_ping": True}
        if self.DATABASE_URL and not self.DATABASE_URL.startswith("sqlite"):
            config.update(
                {
                    "pool_size": self.DATABASE_POOL_SIZE,
                    "max_overflow": self.DATABASE_MAX_OVERFLOW,
                    "pool_timeout": self.DATABASE_POOL_TIMEOUT,
                    "pool_recycle": 3600,
                }
            )
        return config

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration dictionary."""
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": self.CORS_ALLOW_CREDENTIALS,
            "allow_methods": self.CORS_ALLOW_METHODS,
            "allow_headers": self.CORS_ALLOW_HEADERS,
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration dictionary."""
        config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "detailed": {
                    "format": self.LOG_FORMAT,
                    "datefmt": self.LOG_DATE_FORMAT,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": self.LOG_LEVEL.value,
                    "formatter": "detailed",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "": {
                    "level": self.LOG_LEVEL.value,
                    "handlers": ["console"],
                },
                "app": {
                    "level": self.LOG_LEVEL.value,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

        if self.LOG_FILE:
            config["handlers"]["file"] = {
                "class": "logging.handlers.RotatingFileHandler",
                "level": self.LOG_LEVEL.value,
                "formatter": "detailed",
                "filename": self.LOG_FILE,
                "maxBytes": self.LOG_MAX_SIZE,
                "backupCount": self.LOG_BACKUP_COUNT,
            }
            config["loggers"][""]["handlers"].append("file")
            config["loggers"]["app"]["handlers"].append("file")

        return config
