"""Passthrough log services for processing chains.

Each service logs the value flowing through a chain at a configured level
and returns it unchanged.
"""

from chainlog.config_loader import build_service, load_services, load_services_from_dict
from chainlog.errors import ChainLogError, ConfigurationError
from chainlog.levels import TRACE, Level
from chainlog.logging_config import setup_logging
from chainlog.service import Service
from chainlog.services import (
    DEFAULT_LOGGER_NAME,
    LogDebugService,
    LogDisplayService,
    LogOptionalDebugService,
    LogOptionalDisplayService,
)

__version__ = "0.1.0"

__all__ = [
    # Service contract
    "Service",
    # Log services
    "LogDebugService",
    "LogDisplayService",
    "LogOptionalDebugService",
    "LogOptionalDisplayService",
    "DEFAULT_LOGGER_NAME",
    # Levels
    "Level",
    "TRACE",
    # Configuration
    "build_service",
    "load_services",
    "load_services_from_dict",
    "setup_logging",
    # Errors
    "ChainLogError",
    "ConfigurationError",
]
