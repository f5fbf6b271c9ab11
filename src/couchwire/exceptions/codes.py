"""Standardized error codes for couchwire exceptions."""


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Configuration errors (CONFIG_xxx)
    CONFIG_VALIDATION_ERROR = "CONFIG_001"

    # Server interaction errors (SERVER_xxx)
    SERVER_TRANSPORT_FAILED = "SERVER_001"
    SERVER_HTTP_STATUS = "SERVER_002"
    SERVER_UNEXPECTED_RESPONSE = "SERVER_003"
    SERVER_PARSE_FAILED = "SERVER_004"
