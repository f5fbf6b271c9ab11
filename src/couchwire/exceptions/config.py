"""
Configuration-specific exceptions.
"""

from typing import List

from .base import CouchWireError
from .codes import ErrorCodes


class ConfigurationError(CouchWireError):
    """Raised by load_config when settings fail validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        super().__init__(message, ErrorCodes.CONFIG_VALIDATION_ERROR)
