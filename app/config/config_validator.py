"""
Configuration validation and factory module.
Ensures configuration integrity and provides environment-specific config instances.
"""

import os
from typing import Type, Dict, List, Optional
from functools import lru_cache
from pathlib import Path

from .base_config import BaseConfig, Environment
from .environments.development import DevelopmentConfig
from .environments.production import ProductionConfig
from .environments.staging import StagingConfig
from .environments.testing import TestingConfig
from app.utils.logger import logger


class ConfigurationError(Exception):
    """Configuration-related error."""
    pass


class ConfigValidator:
    """Configuration validation utility."""

    @staticmethod
    def validate_required_env_vars(config: BaseConfig) -> List[str]:
        """
        Validate that required environment variables are set.
        Returns list of missing variables.
        """
        missing_vars = []

        if not config.DATABASE_URL:
            missing_vars.append("DATABASE_URL (or POSTGRES_* settings)")

        if not config.SECRET_KEY or config.SECRET_KEY == "your-secret-key":
            missing_vars.append("SECRET_KEY")

        if config.ENVIRONMENT == Environment.PRODUCTION:
            if config.SECRET_KEY == BaseConfig.model_fields["SECRET_KEY"].default:
                missing_vars.append("SECRET_KEY")

        return missing_vars

    @staticmethod
    def validate_file_paths(config: BaseConfig) -> List[str]:
        """
        Make sure directories for the log file and a file database exist.
        Returns list of directories that could not be created.
        """
        missing_dirs = []

        candidates = []
        if config.LOG_FILE:
            candidates.append(Path(config.LOG_FILE).parent)
        if config.DATABASE_URL and config.DATABASE_URL.startswith("sqlite") and ":memory:" not in config.DATABASE_URL:
            db_path = config.DATABASE_URL.split("///", 1)[-1]
            candidates.append(Path(db_path).parent)

        for directory in candidates:
            if directory.exists():
                continue
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError:
                missing_dirs.append(str(directory))

        return missing_dirs

    @staticmethod
    def validate_network_settings(config: BaseConfig) -> List[str]:
        """
        Validate network-related settings.
        Returns list of validation errors.
        """
        errors = []

        if not (1 <= config.PORT <= 65535):
            errors.append(f"Invalid port number: {config.PORT}")

        if not (1 <= config.POSTGRES_PORT <= 65535):
            errors.append(f"Invalid PostgreSQL port: {config.POSTGRES_PORT}")

        return errors

    @staticmethod
    def validate_business_rules(config: BaseConfig) -> List[str]:
        """
        Validate business rule settings.
        Returns list of validation errors.
        """
        errors = []

        if config.RECOMMENDATION_LIMIT <= 0:
            errors.append("RECOMMENDATION_LIMIT must be positive")

        if config.RECOMMENDATION_WORKING_SET_LIMIT is not None and config.RECOMMENDATION_WORKING_SET_LIMIT < 0:
            errors.append("RECOMMENDATION_WORKING_SET_LIMIT cannot be negative")

        if config.JOB_REPORT_THRESHOLD <= 0:
            errors.append("JOB_REPORT_THRESHOLD must be positive")

        if config.DEFAULT_LIST_LIMIT <= 0 or config.DEFAULT_LIST_LIMIT > config.MAX_LIST_LIMIT:
            errors.append("DEFAULT_LIST_LIMIT must be between 1 and MAX_LIST_LIMIT")

        return errors

    @staticmethod
    def validate_security_settings(config: BaseConfig) -> List[str]:
        """
        Validate security-related settings.
        Returns list of validation warnings.
        """
        warnings = []

        if config.ENVIRONMENT == Environment.PRODUCTION:
            if config.DEBUG:
                warnings.append("DEBUG should be disabled in production")

            if config.DOCS_URL or config.REDOC_URL:
                warnings.append("API documentation should be disabled in production")

            if "*" in config.CORS_ORIGINS:
                warnings.append("Wildcard CORS origin should not be used in production")

        if len(config.SECRET_KEY) < 32:
            warnings.append("SECRET_KEY should be at least 32 characters long")

        return warnings

    @classmethod
    def validate_config(cls, config: BaseConfig) -> Dict[str, List[str]]:
        """
        Perform comprehensive configuration validation.
        Returns dictionary with validation results.
        """
        return {
            "missing_env_vars": cls.validate_required_env_vars(config),
            "missing_files": cls.validate_file_paths(config),
            "network_errors": cls.validate_network_settings(config),
            "business_rule_errors": cls.validate_business_rules(config),
            "security_warnings": cls.validate_security_settings(config),
        }


class ConfigFactory:
    """Factory for creating environment-specific configurations."""

    _config_map: Dict[Environment, Type[BaseConfig]] = {
        Environment.DEVELOPMENT: DevelopmentConfig,
        Environment.PRODUCTION: ProductionConfig,
        Environment.STAGING: StagingConfig,
        Environment.TESTING: TestingConfig,
    }

    @classmethod
    def get_environment(cls) -> Environment:
        """
        Determine the current environment from environment variable.
        Defaults to development if not specified.
        """
        env_name = os.getenv("ENVIRONMENT", "development").lower()

        try:
            return Environment(env_name)
        except ValueError:
            logger.warning("Unknown environment, defaulting to development", environment=env_name)
            return Environment.DEVELOPMENT

    @classmethod
    def create_config(cls, environment: Optional[Environment] = None) -> BaseConfig:
        """
        Create configuration instance for the specified environment.
        If no environment is specified, detects from environment variable.
        """
        if environment is None:
            environment = cls.get_environment()

        config_class = cls._config_map.get(environment)
        if not config_class:
            raise ConfigurationError(f"No configuration found for environment: {environment}")

        try:
            config = config_class()
        except Exception as e:
            raise ConfigurationError(f"Failed to create {environment} configuration: {e}") from e

        validation_results = ConfigValidator.validate_config(config)

        missing_vars = validation_results["missing_env_vars"]
        if missing_vars:
            error_msg = f"Missing required environment variables: {', '.join(missing_vars)}"
            if environment == Environment.PRODUCTION:
                raise ConfigurationError(error_msg)
            logger.warning(error_msg)

        missing_files = validation_results["missing_files"]
        if missing_files:
            error_msg = f"Missing required directories: {', '.join(missing_files)}"
            if environment == Environment.PRODUCTION:
                raise ConfigurationError(error_msg)
            logger.warning(error_msg)

        network_errors = validation_results["network_errors"]
        if network_errors:
            raise ConfigurationError(f"Network configuration errors: {', '.join(network_errors)}")

        business_errors = validation_results["business_rule_errors"]
        if business_errors:
            raise ConfigurationError(f"Business rule configuration errors: {', '.join(business_errors)}")

        for warning in validation_results["security_warnings"]:
            logger.warning("Security warning", warning=warning)

        return config


@lru_cache()
def get_config() -> BaseConfig:
    """
    Get cached configuration instance for the current environment.
    This is the primary function used throughout the application.
    """
    return ConfigFactory.create_config()

