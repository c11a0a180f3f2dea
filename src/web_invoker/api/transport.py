# /api/transport.py
"""
The web_invoker.api.transport module implements the collaborator that performs the actual network exchange.

The BaseTransport defines `execute`, which either returns a WebResponse or raises, and `attempt`, which
wraps `execute` and reports the outcome as a TransportSuccess or TransportFailure without raising. The
RequestsTransport sends prepared requests through a `requests.Session`, leaving connection pooling, TLS,
proxies and redirect following to `requests`.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import requests

from web_invoker.api.models import WebResponse, TransportSuccess, TransportFailure, TransportResult
from web_invoker.exceptions import TransportException, InvocationParameterException
from web_invoker.utils import config_settings, generate_repr

logger = logging.getLogger(__name__)

# errors that are reported as transport failures rather than raised to the caller
TRANSPORT_ERRORS = (TransportException, requests.RequestException, OSError)


def request_url(request: Any) -> Optional[str]:
    """Retrieves the URL of a request descriptor for logging"""
    url = getattr(request, "url", None)
    return str(url) if url is not None else None


class BaseTransport(ABC):
    """Defines the interface used by the ExecutionPipeline to send requests."""

    @abstractmethod
    def execute(self, request: Any, **kwargs: Any) -> WebResponse:
        """
        Sends the request and snapshots the completed exchange. Keyword arguments are transport-specific options.

        Raises:
            TransportException: if the exchange could not be completed
        """
        raise NotImplementedError

    def attempt(self, request: Any, **kwargs: Any) -> TransportResult:
        """
        Sends the request without raising on transport-level errors.

        Returns:
            TransportResult: a TransportSuccess holding the response, or a TransportFailure holding the error
        """
        url = request_url(request)
        try:
            response = self.execute(request, **kwargs)
        except TRANSPORT_ERRORS as e:
            logger.debug(f"Unable to fetch a response from url: {url}", exc_info=True)
            return TransportFailure(url=url, failure=e)
        return TransportSuccess(url=url, response=response)

    def __repr__(self) -> str:
        return generate_repr(self)


class RequestsTransport(BaseTransport):
    """
    Transport that sends `requests.PreparedRequest` objects through a `requests.Session`.

    Args:
        session (Optional[requests.Session]): A pre-configured session or None to create a new session
        user_agent (Optional[str]): Optional User-Agent header added to the session
        connection_timeout (Optional[float]): Seconds to wait for a connection. Defaults to the configured value
        socket_timeout (Optional[float]): Seconds to wait between bytes received. Defaults to the configured value
        follow_redirects (bool): Whether redirects are followed by default

    Examples:
        >>> from web_invoker.api import RequestsTransport
        >>> from web_invoker.api.request_builder import build_request
        >>> transport = RequestsTransport(connection_timeout=5, socket_timeout=30)
        >>> response = transport.execute(build_request("https://httpbin.org/get", "GET"))
        >>> response.is_success()
        True
    """

    DEFAULT_TIMEOUT: float = 60.0

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        user_agent: Optional[str] = None,
        connection_timeout: Optional[float] = None,
        socket_timeout: Optional[float] = None,
        follow_redirects: bool = True,
    ) -> None:
        self.user_agent: Optional[str] = user_agent or config_settings.get("USER_AGENT")
        self.connection_timeout: float = self._validate_timeout(
            connection_timeout
            if connection_timeout is not None
            else config_settings.get_float("CONNECTION_TIMEOUT", self.DEFAULT_TIMEOUT)
        )
        self.socket_timeout: float = self._validate_timeout(
            socket_timeout
            if socket_timeout is not None
            else config_settings.get_float("SOCKET_TIMEOUT", self.DEFAULT_TIMEOUT)
        )
        self.follow_redirects: bool = follow_redirects
        self.session: requests.Session = self.configure_session(session)

    @staticmethod
    def _validate_timeout(timeout: Any) -> float:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise InvocationParameterException(f"Timeouts must be positive numbers. Received {timeout!r}")
        return float(timeout)

    def configure_session(self, session: Optional[requests.Session]) -> requests.Session:
        """
        Configures the session with the optional user-agent header.

        Args:
            session (Optional[requests.Session]): A pre-configured session or None to create a new session.

        Returns:
            requests.Session: The configured session.
        """
        session = session or requests.Session()
        if self.user_agent:
            session.headers.update({"User-Agent": self.user_agent})
        logger.debug("Transport session initialization successful.")
        return session

    def set_connection_timeout(self, seconds: float) -> None:
        """Changes the connection timeout used for subsequent requests"""
        self.connection_timeout = self._validate_timeout(seconds)

    def set_socket_timeout(self, seconds: float) -> None:
        """Changes the socket (read) timeout used for subsequent requests"""
        self.socket_timeout = self._validate_timeout(seconds)

    def execute(self, request: requests.PreparedRequest, follow_redirects: Optional[bool] = None) -> WebResponse:
        """
        Sends a prepared request and snapshots the response.

        Args:
            request (requests.PreparedRequest): The request to send
            follow_redirects (Optional[bool]): Overrides the transport default for this request

        Returns:
            WebResponse: The completed exchange, including the redirect chain if redirects were followed

        Raises:
            TransportException: if the request fails due to a connection, timeout or protocol error
        """
        if not isinstance(request, requests.PreparedRequest):
            raise InvocationParameterException(
                f"Expected a prepared request to send. Received {type(request)}"
            )

        allow_redirects = self.follow_redirects if follow_redirects is None else follow_redirects

        # session.send does not merge session headers into requests prepared outside of the session
        request = request.copy()
        for name, value in self.session.headers.items():
            if name not in request.headers:
                request.headers[name] = value

        logger.debug(f"Sending {request.method} request to {request.url}")

        try:
            response = self.session.send(
                request,
                timeout=(self.connection_timeout, self.socket_timeout),
                allow_redirects=allow_redirects,
            )
        except requests.RequestException as e:
            raise TransportException(f"The request to {request.url} failed: {e}", url=request.url) from e

        web_response = WebResponse.from_response(response, original_target=request.url)
        logger.debug(f"Received {web_response} from {web_response.effective_target()}")
        return web_response
