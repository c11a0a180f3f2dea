# /api/web_invoker.py
"""
The web_invoker.api.web_invoker module implements the WebInvoker, a facade of one-line helpers for invoking
URLs. Every helper builds a request, runs it through an ExecutionPipeline, and returns None when the request
fails for environmental reasons (network errors, timeouts, unreachable hosts). Invalid arguments such as a
missing request or an unsupported HTTP method raise immediately.

Note that the helpers cannot distinguish between a server that returned nothing, a network failure, and the
absence of an interceptor-supplied response: each of these is reported as None.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

from web_invoker.api.execution_pipeline import ExecutionPipeline
from web_invoker.api.models import RequestMethod, WebResponse
from web_invoker.api.request_builder import build_request
from web_invoker.exceptions import InvocationParameterException, RequestCreationException

logger = logging.getLogger(__name__)


class WebInvoker:
    """
    Convenience entry points for invoking HTTP endpoints through an ExecutionPipeline.

    Args:
        pipeline (Optional[ExecutionPipeline]): The pipeline used to execute requests. A new pipeline using the
                                                default RequestsTransport is created when omitted.

    Examples:
        >>> from web_invoker import WebInvoker
        >>> invoker = WebInvoker()
        >>> response = invoker.get_response("https://httpbin.org/get")
        >>> if response is not None and response.is_success():
        ...     print(response.text_content())
    """

    def __init__(self, pipeline: Optional[ExecutionPipeline] = None) -> None:
        self.pipeline: ExecutionPipeline = pipeline if pipeline is not None else ExecutionPipeline()

    def fetch_response(self, url: str) -> Optional[str]:
        """Returns the body of a GET request to the URL decoded as text, or None on failure"""
        response = self.get_response(url)
        return response.content if response is not None else None

    def get_response(self, url: str) -> Optional[WebResponse]:
        """Returns the response to a GET request to the URL, or None on failure"""
        return self._invoke(url, RequestMethod.GET)

    def get_headers(self, url: str, follow_redirects: bool = True) -> Optional[Mapping[str, str]]:
        """Returns the headers obtained by making a HEAD request to the URL, or None on failure"""
        response = self.head_request(url, follow_redirects=follow_redirects)
        return response.headers if response is not None else None

    def head_request(self, url: str, follow_redirects: bool = True) -> Optional[WebResponse]:
        """Makes a HEAD request to the URL and returns the response, or None on failure"""
        return self._invoke(url, RequestMethod.HEAD, follow_redirects=follow_redirects)

    def invoke_url(
        self,
        url: str,
        method: RequestMethod | str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Optional[WebResponse]:
        """
        Invokes the URL with the given HTTP verb, sending the optional headers and form parameters.

        Raises:
            InvalidRequestMethodException: If the method is None or unsupported
        """
        return self._invoke(url, method, headers=headers, data=params or None)

    def invoke_url_with_body(
        self, url: str, method: RequestMethod | str, content_type: str, body: Optional[str]
    ) -> Optional[WebResponse]:
        """Invokes the URL with the given HTTP verb and a raw request body of the given content type"""
        headers = {"Content-Type": content_type} if content_type else None
        payload = body.encode("utf-8") if body is not None else None
        return self._invoke(url, method, headers=headers, data=payload)

    def post_json(self, url: str, obj: Any) -> Optional[WebResponse]:
        """POSTs the JSON representation of the object to the URL"""
        return self._invoke(url, RequestMethod.POST, json=obj)

    def execute_silently(self, request: Any, **transport_kwargs: Any) -> Optional[WebResponse]:
        """
        Executes a prepared request, returning None instead of raising on transport failures.

        Raises:
            InvocationParameterException: If the request is None
        """
        if request is None:
            raise InvocationParameterException("The request to be executed cannot be None")
        return self.pipeline.execute(request, **transport_kwargs)

    def _invoke(
        self,
        url: str,
        method: RequestMethod | str,
        follow_redirects: Optional[bool] = None,
        **request_kwargs: Any,
    ) -> Optional[WebResponse]:
        """Builds a request and executes it, passing the redirect policy through to the transport when set"""
        try:
            request = build_request(url, method, **request_kwargs)
        except RequestCreationException as e:
            logger.debug(f"Unable to create a request for url: {url}: {e}")
            return None

        transport_kwargs = {"follow_redirects": follow_redirects} if follow_redirects is not None else {}
        return self.pipeline.execute(request, **transport_kwargs)

    def __repr__(self) -> str:
        return f"WebInvoker(pipeline={self.pipeline!r})"
