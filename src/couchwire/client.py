"""
Client for the document-database HTTP API.

Each method performs exactly one HTTP request against the server it is
given. Structured replies are decoded from JSON; document bodies and view
results are handed back as the raw text the server sent.
"""

import json
import logging
from typing import Any, List, Optional, Tuple

import requests

from couchwire.core.config import ClientConfig
from couchwire.core.constants import CouchConstants
from couchwire.exceptions.server import ParseError, UnexpectedResponseError
from couchwire.infrastructure.http import HttpClient
from couchwire.models import DocumentInfo
from couchwire.utils.logging_utils import LoggingConfiguration, LoggingContext


class CouchClient:
    """Synchronous wrapper around the document-database HTTP API.

    No initialisation beyond construction is needed. The client keeps no
    per-call state, so one instance can serve any number of servers and
    databases. All methods raise on failure:

    - TransportError when the request fails or the status is not 2xx
    - ParseError when a structured reply is not the expected JSON
    - UnexpectedResponseError when a database create/delete is not acknowledged
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            config: Transport configuration, defaults to ClientConfig()
            session: Optional existing requests session to send through
        """
        self.config = config or ClientConfig()
        self.http = HttpClient(
            session=session,
            timeout=self.config.timeout,
            encoding=self.config.encoding,
            user_agent=self.config.user_agent,
        )
        self.logger = logging.getLogger(__name__)

    def get_databases(self, server: str) -> List[str]:
        """Get the names of all databases on the server, in server order."""
        url = self._url(server, CouchConstants.ALL_DBS_ENDPOINT)
        result, text = self._get_json(url)

        if not isinstance(result, list) or not all(isinstance(name, str) for name in result):
            raise ParseError(url, "expected a JSON array of database names", text)
        return result

    def count_documents(self, server: str, db: str) -> int:
        """Get the number of documents in a database.

        There is no lighter endpoint for this, so the full document listing
        is fetched and its rows counted.
        """
        rows, _ = self._get_rows(server, db)
        return len(rows)

    def get_all_documents(self, server: str, db: str) -> List[DocumentInfo]:
        """Get id and revision of every document in a database."""
        rows, text = self._get_rows(server, db)
        documents = []
        for row in rows:
            try:
                documents.append(DocumentInfo(
                    id=str(row[CouchConstants.ID_FIELD]),
                    revision=str(row[CouchConstants.REVISION_FIELD]),
                ))
            except (KeyError, TypeError) as e:
                url = self._url(server, db, CouchConstants.ALL_DOCS_ENDPOINT)
                raise ParseError(url, f"malformed row {row!r}", text) from e
        return documents

    def create_database(self, server: str, db: str) -> None:
        """Create a new database."""
        config = LoggingConfiguration(
            entry_msg=f"Creating database {db} on {server}",
            success_msg=f"Created database {db}",
            failure_msg=f"Failed to create database {db}",
            failure_level=logging.DEBUG,
            logger=self.logger,
        )
        with LoggingContext(config):
            result = self.http.request("PUT", self._url(server, db))
            self._check_ok(result, "create database", db)

    def delete_database(self, server: str, db: str) -> None:
        """Delete a database and every document in it."""
        config = LoggingConfiguration(
            entry_msg=f"Deleting database {db} on {server}",
            success_msg=f"Deleted database {db}",
            failure_msg=f"Failed to delete database {db}",
            failure_level=logging.DEBUG,
            logger=self.logger,
        )
        with LoggingContext(config):
            result = self.http.request("DELETE", self._url(server, db))
            self._check_ok(result, "delete database", db)

    def exec_temp_view(self, server: str, db: str, view_definition: str) -> str:
        """Execute a temporary view and return the result JSON untouched.

        Args:
            server: The server URL
            db: The database name
            view_definition: The javascript view definition

        Returns:
            The server's reply text (JSON)
        """
        return self.http.request(
            "POST",
            self._url(server, db, CouchConstants.TEMP_VIEW_ENDPOINT),
            body=view_definition,
            content_type=CouchConstants.JAVASCRIPT_CONTENT_TYPE,
        )

    def create_document(self, server: str, db: str, content: str) -> None:
        """Create a new document from JSON text.

        If the document has no _id field the server assigns one. The reply,
        which carries the assigned id and revision, is discarded.
        """
        self.http.request(
            "POST",
            self._url(server, db),
            body=content,
            content_type=CouchConstants.JSON_CONTENT_TYPE,
        )

    def get_document(self, server: str, db: str, doc_id: str) -> str:
        """Get a document's JSON text exactly as the server sent it."""
        return self.http.request("GET", self._url(server, db, doc_id))

    def delete_document(self, server: str, db: str, doc_id: str) -> None:
        """Delete a document. The reply is discarded."""
        self.http.request("DELETE", self._url(server, db, doc_id))

    def close(self) -> None:
        """Close the HTTP session, unless it was passed in by the caller."""
        self.http.close()

    def __enter__(self) -> "CouchClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @staticmethod
    def _url(server: str, *parts: str) -> str:
        return "/".join([server.rstrip("/")] + [part.lstrip("/") for part in parts])

    def _get_json(self, url: str) -> Tuple[Any, str]:
        """GET a URL and return the decoded JSON along with the raw text."""
        text = self.http.request("GET", url)
        try:
            return json.loads(text), text
        except ValueError as e:
            raise ParseError(url, str(e), text) from e

    def _get_rows(self, server: str, db: str) -> Tuple[List[Any], str]:
        url = self._url(server, db, CouchConstants.ALL_DOCS_ENDPOINT)
        result, text = self._get_json(url)

        rows = result.get(CouchConstants.ROWS_FIELD) if isinstance(result, dict) else None
        if not isinstance(rows, list):
            raise ParseError(url, "expected an object with a 'rows' array", text)
        return rows, text

    @staticmethod
    def _check_ok(result: str, operation: str, db: str) -> None:
        # CouchDB terminates replies with a newline
        if result.strip() != CouchConstants.OK_RESPONSE:
            raise UnexpectedResponseError(operation, result).add_context(database=db)
