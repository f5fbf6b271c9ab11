"""
Configuration loading for couchwire.

Merges environment settings with explicit overrides and validates the
result into a ClientConfig.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from couchwire.exceptions.config import ConfigurationError

from .models import ClientConfig, CouchWireSettings

logger = logging.getLogger(__name__)

# Maps settings attributes to ClientConfig fields
_ENVIRONMENT_FIELDS = {
    "couchwire_timeout": "timeout",
    "couchwire_encoding": "encoding",
    "couchwire_user_agent": "user_agent",
}


def _format_errors(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        messages.append(f"{location}: {item['msg']}")
    return messages


def _environment_values() -> Dict[str, Any]:
    try:
        settings = CouchWireSettings()
    except ValidationError as e:
        raise ConfigurationError(_format_errors(e)) from e

    values = {}
    for setting_name, config_key in _ENVIRONMENT_FIELDS.items():
        value = getattr(settings, setting_name)
        if value is not None:
            values[config_key] = value
    return values


def load_config(**overrides: Any) -> ClientConfig:
    """Build a validated client configuration.

    Environment variables (COUCHWIRE_TIMEOUT, COUCHWIRE_ENCODING,
    COUCHWIRE_USER_AGENT) are applied first; keyword overrides win.

    Raises:
        ConfigurationError: If any value fails validation
    """
    values = _environment_values()
    values.update(overrides)

    try:
        config = ClientConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(_format_errors(e)) from e

    logger.debug(f"Loaded client configuration: {config.model_dump()}")
    return config
