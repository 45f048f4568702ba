"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

import sys
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from predictive_hpa.algorithms import LINEAR_REGRESSION_PATH
from predictive_hpa.shared import EnumEnvironment, EnumLogLevel, EnumStoreBackend
from predictive_hpa.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Evaluation store settings."""

    store_backend: EnumStoreBackend = Field(
        default=EnumStoreBackend.MEMORY, description="Evaluation store backend"
    )
    mongo_uri: str = Field(
        default="mongodb://localhost:27017/phpa_db",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="phpa_db", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class GESettings(BaseSettings):
    """HTTP service settings."""

    title: str = Field(default="Predictive HPA", description="Service title")
    description: str = Field(
        default="Predictive horizontal autoscaling decisions from "
        "forecasted replica counts",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="GE_", case_sensitive=False, extra="ignore"
    )


class PredictiveSettings(BaseSettings):
    """Predictive models and algorithm execution settings."""

    config: Optional[str] = Field(
        default=None, description="Inline predictive configuration (YAML)"
    )
    config_path: Optional[str] = Field(
        default=None, description="Path of the predictive configuration YAML"
    )
    linear_algorithm_path: str = Field(
        default=LINEAR_REGRESSION_PATH,
        description="Linear regression algorithm script",
    )
    python_executable: str = Field(
        default=sys.executable, description="Interpreter running algorithms"
    )
    algorithm_timeout: int = Field(
        default=30000, gt=0, description="Algorithm timeout in milliseconds"
    )
    max_concurrency: int = Field(
        default=4, ge=1, description="Models predicted concurrently per cycle"
    )

    model_config = SettingsConfigDict(
        env_prefix="PHPA_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    ge: GESettings = Field(default_factory=GESettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    predictive: PredictiveSettings = Field(default_factory=PredictiveSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
