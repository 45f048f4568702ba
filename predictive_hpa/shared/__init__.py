"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application:
- Cross-layer constants (environment names, log levels, store backends)
- Logging bootstrap and structured logger access

It must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel, EnumStoreBackend
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStoreBackend",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
