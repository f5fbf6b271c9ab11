"""
couchwire - a small synchronous client for the CouchDB-style HTTP API.

Usage:
    from couchwire import CouchClient

    with CouchClient() as couch:
        couch.create_database("http://localhost:5984", "inventory")
        couch.create_document("http://localhost:5984", "inventory", '{"sku": "A-1"}')
        for doc in couch.get_all_documents("http://localhost:5984", "inventory"):
            print(doc.id, doc.revision)
"""

__version__ = "0.1.0"

import logging

from .client import CouchClient
from .core.config import ClientConfig, load_config
from .exceptions import (
    ConfigurationError,
    CouchWireError,
    ParseError,
    TransportError,
    UnexpectedResponseError,
)
from .models import DocumentInfo

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CouchClient",
    "ClientConfig",
    "load_config",
    "DocumentInfo",
    "CouchWireError",
    "ConfigurationError",
    "TransportError",
    "UnexpectedResponseError",
    "ParseError",
]
