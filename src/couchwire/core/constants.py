"""
Server API constants.

Endpoint paths, content types and reply markers of the document-database
HTTP API, kept in one place instead of scattered through the client.
"""


class CouchConstants:
    """Constants for the document-database HTTP API."""

    # Endpoints
    ALL_DBS_ENDPOINT = "_all_dbs"
    ALL_DOCS_ENDPOINT = "_all_docs"
    TEMP_VIEW_ENDPOINT = "_temp_view"

    # Content types
    JSON_CONTENT_TYPE = "application/json"
    JAVASCRIPT_CONTENT_TYPE = "application/javascript"

    # Reply markers
    OK_RESPONSE = '{"ok":true}'

    # _all_docs row fields
    ROWS_FIELD = "rows"
    ID_FIELD = "_id"
    REVISION_FIELD = "_rev"


class HttpConstants:
    """HTTP transport constants."""

    SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
    DEFAULT_ENCODING = "utf-8"
    CONTENT_TYPE_HEADER = "Content-Type"
    CONTENT_LENGTH_HEADER = "Content-Length"
    USER_AGENT_HEADER = "User-Agent"
