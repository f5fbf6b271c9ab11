"""
Base exception class for couchwire.
"""

from typing import Any, Optional


class CouchWireError(Exception):
    """Base exception for all couchwire errors.

    Attributes:
        message: The error message
        error_code: Error code for programmatic handling, see ErrorCodes
        response_text: Raw server reply behind the failure, if one was received
        context: Extra details such as the URL or database involved
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        response_text: Optional[str] = None,
        **context: Any,
    ):
        self.message = message
        self.error_code = error_code
        self.response_text = response_text
        self.context = {k: v for k, v in context.items() if v is not None}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({details})"

    def add_context(self, **kwargs: Any) -> "CouchWireError":
        """Add details to the exception and return it."""
        self.context.update({k: v for k, v in kwargs.items() if v is not None})
        return self
