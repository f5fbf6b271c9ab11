"""
HTTP request executor for the document-database client.

Every public client operation funnels through HttpClient.request, which
performs exactly one synchronous exchange and hands back the response body
as text. Transport failures and non-2xx statuses surface as TransportError;
nothing is retried.
"""

import logging
from typing import Dict, Optional

import requests

from couchwire.core.constants import HttpConstants
from couchwire.exceptions.server import TransportError


class HttpClient:
    """Thin synchronous wrapper around a requests session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        encoding: str = HttpConstants.DEFAULT_ENCODING,
        user_agent: Optional[str] = None,
    ):
        """Initialize HTTP client with configuration.

        Args:
            session: Optional existing session to use, left open by close()
            timeout: Request timeout in seconds, None for the transport default
            encoding: Encoding for request and response bodies
            user_agent: Optional User-Agent header sent with every request
        """
        self.timeout = timeout
        self.encoding = encoding
        self.user_agent = user_agent
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._owns_session = session is None
        self.session = session or requests.Session()

    def request(
        self,
        method: str,
        url: str,
        body: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str:
        """Perform a request and return the response body as text.

        Args:
            method: One of GET, POST, PUT, DELETE
            url: Absolute URL of the resource
            body: Optional request payload
            content_type: Content type of the payload

        Returns:
            The full response body decoded with the configured encoding

        Raises:
            ValueError: If the method is not supported
            TransportError: If the exchange fails or the status is not 2xx
        """
        method = method.upper()
        if method not in HttpConstants.SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        headers = self._build_headers(content_type)

        data = None
        if body is not None:
            data = body.encode(self.encoding)
            headers[HttpConstants.CONTENT_LENGTH_HEADER] = str(len(data))

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(method, url, str(e)) from e

        self._log_response(response)
        text = response.content.decode(self.encoding, errors="replace")

        if not 200 <= response.status_code < 300:
            raise TransportError(
                method,
                url,
                response.reason,
                status_code=response.status_code,
                response_text=text,
            )

        return text

    def _build_headers(self, content_type: Optional[str]) -> Dict[str, str]:
        headers = {}
        if self.user_agent:
            headers[HttpConstants.USER_AGENT_HEADER] = self.user_agent
        if content_type is not None:
            headers[HttpConstants.CONTENT_TYPE_HEADER] = content_type
        return headers

    def _log_response(self, response: requests.Response) -> None:
        """Log response details."""
        self.logger.debug(
            f"Response: {response.status_code} - "
            f"{len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()
