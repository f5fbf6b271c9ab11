"""
couchwire Exception Hierarchy

Exception Hierarchy:
    CouchWireError (base)
    ├── ConfigurationError
    ├── TransportError
    ├── UnexpectedResponseError
    └── ParseError

This package provides focused exception components:
- base: Core CouchWireError base class
- config: Configuration-related exceptions
- server: Failures talking to the document-database server
- codes: Standardized error codes
"""

from .base import CouchWireError
from .codes import ErrorCodes
from .config import ConfigurationError
from .server import ParseError, TransportError, UnexpectedResponseError

__all__ = [
    # Base
    "CouchWireError",
    "ErrorCodes",
    # Configuration
    "ConfigurationError",
    # Server
    "TransportError",
    "UnexpectedResponseError",
    "ParseError",
]
