"""
Logging Configuration - Shared Layer

Bootstrap of stdlib logging with structlog rendering. Call
``configure_logging`` as early as possible and ``update_logging_from_settings``
once the application settings are available.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from predictive_hpa.shared.consts import EnumEnvironment

DEFAULT_LOG_LEVEL = "INFO"


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """Read the bootstrap logging configuration from the environment."""
    return {
        "level": os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure the root logger and structlog.

    Production renders JSON lines, every other environment uses the
    structlog console renderer. Explicit arguments take precedence over
    ``LOG_LEVEL``, ``LOG_FILE_PATH`` and ``ENVIRONMENT``.

    Args:
        level: Log level name.
        file_path: Optional file receiving a copy of every record.
        environment: Application environment name.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or DEFAULT_LOG_LEVEL
    log_file = file_path or env_config["file_path"]
    env_value = (
        environment or env_config["environment"] or EnumEnvironment.DEVELOPMENT
    )

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    renderer: Processor
    env_value = getattr(env_value, "value", env_value)
    if str(env_value).lower() == EnumEnvironment.PRODUCTION.value:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    get_logger(__name__).debug(
        "logging.configured", level=log_level, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging from the application settings object.

    Args:
        settings: Application settings exposing ``logging`` and ``environment``.
    """
    log_level = getattr(settings.logging.level, "value", settings.logging.level)
    environment = getattr(settings.environment, "value", settings.environment)

    configure_logging(
        level=log_level,
        file_path=settings.logging.file_path,
        environment=environment,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
