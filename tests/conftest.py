"""
Pytest configuration and shared fixtures for couchwire tests.
"""

import json
import uuid
from typing import Dict, Optional
from unittest.mock import Mock
from urllib.parse import urlsplit

import pytest
import requests

from couchwire import CouchClient

SERVER = "http://couch.example.com:5984"


def make_response(status_code: int = 200, body: str = "", reason: str = "OK") -> requests.Response:
    """Build a real requests.Response carrying the given body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response._content = body.encode("utf-8")
    return response


class FakeCouchServer:
    """In-memory stand-in for a document-database server.

    Installed as the side effect of a mocked ``Session.request`` so the
    client's real URL building and response handling are exercised.
    """

    def __init__(self):
        self.databases: Dict[str, Dict[str, str]] = {}
        self.revisions: Dict[str, Dict[str, str]] = {}

    def __call__(self, method, url, data=None, headers=None, timeout=None):
        parts = [part for part in urlsplit(url).path.split("/") if part]
        body = data.decode("utf-8") if data is not None else None

        if parts == ["_all_dbs"] and method == "GET":
            return self._json(200, list(self.databases))
        if len(parts) == 1:
            return self._database(method, parts[0], body)
        if len(parts) == 2:
            return self._document(method, parts[0], parts[1])
        return self._json(404, {"error": "not_found"}, "Not Found")

    def _database(self, method: str, db: str, body: Optional[str]) -> requests.Response:
        if method == "PUT":
            if db in self.databases:
                return self._json(412, {"error": "file_exists"}, "Precondition Failed")
            self.databases[db] = {}
            self.revisions[db] = {}
            return make_response(201, '{"ok":true}\n', "Created")
        if db not in self.databases:
            return self._json(404, {"error": "not_found"}, "Not Found")
        if method == "DELETE":
            del self.databases[db]
            del self.revisions[db]
            return make_response(200, '{"ok":true}\n')
        if method == "POST":
            document = json.loads(body)
            doc_id = document.get("_id") or uuid.uuid4().hex
            revision = f"1-{uuid.uuid4().hex[:8]}"
            self.databases[db][doc_id] = body
            self.revisions[db][doc_id] = revision
            return self._json(201, {"ok": True, "id": doc_id, "rev": revision}, "Created")
        return self._json(405, {"error": "method_not_allowed"}, "Method Not Allowed")

    def _document(self, method: str, db: str, doc_id: str) -> requests.Response:
        if db not in self.databases:
            return self._json(404, {"error": "not_found"}, "Not Found")
        if doc_id == "_all_docs" and method == "GET":
            rows = [
                {"_id": key, "_rev": self.revisions[db][key]}
                for key in self.databases[db]
            ]
            return self._json(200, {"total_rows": len(rows), "rows": rows})
        if doc_id == "_temp_view" and method == "POST":
            return self._json(200, {"total_rows": 0, "rows": []})
        if doc_id not in self.databases[db]:
            return self._json(404, {"error": "not_found", "reason": "missing"}, "Not Found")
        if method == "GET":
            return make_response(200, self.databases[db][doc_id])
        if method == "DELETE":
            del self.databases[db][doc_id]
            revision = self.revisions[db].pop(doc_id)
            return self._json(200, {"ok": True, "id": doc_id, "rev": revision})
        return self._json(405, {"error": "method_not_allowed"}, "Method Not Allowed")

    @staticmethod
    def _json(status_code: int, payload, reason: str = "OK") -> requests.Response:
        return make_response(status_code, json.dumps(payload, separators=(",", ":")), reason)


@pytest.fixture
def server_url():
    """Base URL of the mocked server."""
    return SERVER


@pytest.fixture
def response_factory():
    """Factory for canned requests.Response objects."""
    return make_response


@pytest.fixture
def mock_session():
    """A mocked requests session with an empty 200 reply."""
    session = Mock(spec=requests.Session)
    session.request.return_value = make_response(200, "")
    return session


@pytest.fixture
def couch(mock_session):
    """A CouchClient sending through the mocked session."""
    return CouchClient(session=mock_session)


@pytest.fixture
def fake_server(mock_session):
    """A stateful fake server answering the mocked session's requests."""
    server = FakeCouchServer()
    mock_session.request.side_effect = server
    return server
