"""YAML configuration loader for log services.

Lets applications declare their chain taps in a YAML file instead of code.

Example YAML (taps.yaml):
    services:
      incoming:
        render: display
        level: info
        prefix: "incoming: "
      polled:
        render: debug
        optional: true
        level: trace
        prefix: "${APP_NAME} polled: "
        logger: myapp.poller

Usage:
    from chainlog.config_loader import load_services
    services = load_services("./taps.yaml")
    services["incoming"].process(event)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Type, Union

import yaml

from chainlog.errors import ConfigurationError
from chainlog.levels import Level
from chainlog.services import (
    DEFAULT_LOGGER_NAME,
    LogDebugService,
    LogDisplayService,
    LogOptionalDebugService,
    LogOptionalDisplayService,
    _LogService,
)

logger = logging.getLogger(__name__)

__all__ = [
    "build_service",
    "expand_env_vars",
    "load_services",
    "load_services_from_dict",
]

# Pattern for ${VAR_NAME} or $VAR_NAME
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)")

# (render, optional) -> service class
SERVICE_CLASS_MAP: Dict[Tuple[str, bool], Type[_LogService]] = {
    ("debug", False): LogDebugService,
    ("display", False): LogDisplayService,
    ("debug", True): LogOptionalDebugService,
    ("display", True): LogOptionalDisplayService,
}

KNOWN_KEYS = {"render", "optional", "level", "prefix", "logger"}


def expand_env_vars(value: str) -> str:
    """Expand environment variables in a string.

    Supports both ${VAR_NAME} and $VAR_NAME syntax. Unset variables are
    left as written.

    Example:
        >>> os.environ["APP_NAME"] = "billing"
        >>> expand_env_vars("${APP_NAME}: ")
        'billing: '
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1) or match.group(2)
        env_value = os.environ.get(var_name)
        if env_value is None:
            return str(match.group(0))
        return env_value

    return ENV_VAR_PATTERN.sub(replacer, value)


def build_service(config: Mapping[str, Any], name: str = "<service>") -> _LogService:
    """Create one log service from its configuration mapping.

    Args:
        config: Mapping with render, optional, level, prefix and logger keys
        name: Service name, used in error messages

    Returns:
        Configured log service

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Service configuration must be a mapping, got {type(config).__name__}",
            service=name,
        )

    unknown = sorted(set(config) - KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown keys for service %s: %s", name, ", ".join(unknown))

    render = config.get("render", "display")
    if not isinstance(render, str) or render.lower() not in ("debug", "display"):
        raise ConfigurationError(
            f"Invalid render {render!r}",
            service=name,
            field="render",
            suggestion="Use 'debug' or 'display'",
        )

    optional = config.get("optional", False)
    if not isinstance(optional, bool):
        raise ConfigurationError(
            f"optional must be true or false, got {optional!r}",
            service=name,
            field="optional",
        )

    if "level" not in config:
        raise ConfigurationError("level is required", service=name, field="level")
    try:
        level = Level.parse(config["level"])
    except ConfigurationError as e:
        raise ConfigurationError(
            e.message, service=name, field="level", suggestion=e.suggestion
        ) from e

    prefix = config.get("prefix", "")
    if prefix is None:
        prefix = ""
    if not isinstance(prefix, str):
        raise ConfigurationError(
            f"prefix must be a string, got {type(prefix).__name__}",
            service=name,
            field="prefix",
            suggestion="Quote the prefix in YAML",
        )

    logger_name = config.get("logger", DEFAULT_LOGGER_NAME)
    if not isinstance(logger_name, str) or not logger_name:
        raise ConfigurationError(
            f"logger must be a non-empty string, got {logger_name!r}",
            service=name,
            field="logger",
        )

    service_class = SERVICE_CLASS_MAP[(render.lower(), optional)]
    service = service_class(level, expand_env_vars(prefix), expand_env_vars(logger_name))
    logger.debug("Built service %s: %r", name, service)
    return service


def load_services_from_dict(config: Mapping[str, Any]) -> Dict[str, _LogService]:
    """Create log services from a parsed configuration.

    Args:
        config: Mapping with a 'services' section

    Returns:
        Dict of service name to log service, in file order

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(config).__name__}"
        )
    if "services" not in config:
        raise ConfigurationError(
            "Configuration must contain a 'services' section", field="services"
        )

    section = config["services"] or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"'services' must be a mapping, got {type(section).__name__}",
            field="services",
        )

    return {str(name): build_service(entry, str(name)) for name, entry in section.items()}


def load_services(path: Union[str, Path]) -> Dict[str, _LogService]:
    """Load log services from a YAML file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Dict of service name to log service

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {path}: {e}") from e

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {path}")

    logger.debug("Loading services from %s", path)
    return load_services_from_dict(config)
