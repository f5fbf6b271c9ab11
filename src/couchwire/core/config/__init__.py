"""
Client configuration for couchwire.

Usage:
    from couchwire.core.config import load_config

    config = load_config(timeout=10)
"""

from ...exceptions.config import ConfigurationError
from .loader import load_config
from .models import ClientConfig, CouchWireSettings

__all__ = [
    "ClientConfig",
    "CouchWireSettings",
    "load_config",
    "ConfigurationError",
]
