"""
Server interaction exceptions.

All exceptions raised while talking to the document-database server:
transport failures, unexpected replies and undecodable JSON.
"""

from typing import Optional

from .base import CouchWireError
from .codes import ErrorCodes


class TransportError(CouchWireError):
    """Raised when the HTTP exchange itself fails.

    Covers connection failures, timeouts, protocol errors and non-2xx
    statuses. ``status_code`` is ``None`` when no response was received.
    """

    def __init__(
        self,
        method: str,
        url: str,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        self.method = method
        self.url = url
        self.status_code = status_code

        message = f"{method} {url} failed"
        if status_code is not None:
            message += f" with HTTP {status_code}"
        if details:
            message += f": {details}"

        error_code = (
            ErrorCodes.SERVER_TRANSPORT_FAILED
            if status_code is None
            else ErrorCodes.SERVER_HTTP_STATUS
        )
        super().__init__(message, error_code, response_text)


class UnexpectedResponseError(CouchWireError):
    """Raised when the server replies with something other than the success marker."""

    def __init__(self, operation: str, response_text: str):
        self.operation = operation

        super().__init__(
            f"Failed to {operation}: {response_text}",
            ErrorCodes.SERVER_UNEXPECTED_RESPONSE,
            response_text,
        )


class ParseError(CouchWireError):
    """Raised when a structured JSON response cannot be interpreted."""

    def __init__(self, url: str, details: str, response_text: Optional[str] = None):
        self.url = url

        super().__init__(
            f"Could not parse response from {url}: {details}",
            ErrorCodes.SERVER_PARSE_FAILED,
            response_text,
        )
