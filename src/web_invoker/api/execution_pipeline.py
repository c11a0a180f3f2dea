# /api/execution_pipeline.py
"""
The web_invoker.api.execution_pipeline module implements the ExecutionPipeline, which orchestrates a single
request execution around the registered interceptors:

1. A snapshot of the interceptor registry is taken so that concurrent registrations do not affect the
   execution that is already in progress.
2. Before-hooks run in descending priority. The first hook that returns a WebResponse short-circuits the
   request: remaining before-hooks are skipped and the transport is never called.
3. Otherwise the transport is attempted, producing either a response or a failure.
4. After-hooks run over the same snapshot, in the same order (not reversed). Each one receives the current
   response and the transport failure. A returned WebResponse replaces the response seen by later hooks.
5. The final response, or None, is returned. Transport failures are never raised to the caller.
"""
from __future__ import annotations
import logging
from typing import Any, Optional, Sequence

from web_invoker.api.interceptors import InterceptorProtocol, InterceptorRegistry
from web_invoker.api.models import WebResponse
from web_invoker.api.transport import BaseTransport, RequestsTransport, request_url
from web_invoker.exceptions import InvocationParameterException

logger = logging.getLogger(__name__)


class ExecutionPipeline:
    """
    Executes requests through a transport while giving registered interceptors the opportunity to supply or
    replace the response.

    Args:
        transport (Optional[BaseTransport]): The transport used to send requests. Defaults to a RequestsTransport
        registry (Optional[InterceptorRegistry]): The interceptors consulted on each execution. Defaults to a
                                                  new, empty registry

    Examples:
        >>> from web_invoker.api import ExecutionPipeline, InvocationInterceptor, build_request
        >>> from web_invoker.api.models import WebResponse
        >>> class Canned(InvocationInterceptor):
        ...     def before_invocation(self, request):
        ...         return WebResponse.from_text("hello world")
        ...     def after_invocation(self, response, failure):
        ...         return None
        >>> pipeline = ExecutionPipeline()
        >>> pipeline.add_interceptor(Canned(priority=0))
        >>> pipeline.execute(build_request("http://localhost/hit", "GET")).text_content()
        'hello world'
    """

    def __init__(self, transport: Optional[BaseTransport] = None, registry: Optional[InterceptorRegistry] = None):
        self.transport: BaseTransport = transport if transport is not None else RequestsTransport()
        self.registry: InterceptorRegistry = registry if registry is not None else InterceptorRegistry()

    def add_interceptor(self, interceptor: InterceptorProtocol) -> None:
        """Registers an interceptor for all subsequent executions"""
        self.registry.add(interceptor)

    def remove_interceptor(self, interceptor: InterceptorProtocol) -> None:
        """Unregisters an interceptor. Executions already in progress are unaffected"""
        self.registry.remove(interceptor)

    def remove_all_interceptors(self) -> None:
        """Unregisters every interceptor"""
        self.registry.remove_all()

    def execute(self, request: Any, **transport_kwargs: Any) -> Optional[WebResponse]:
        """
        Executes a single request.

        Args:
            request (Any): The prepared request. Only its `url` is inspected here, for logging
            **transport_kwargs: Options passed through to the transport (e.g. `follow_redirects`)

        Returns:
            Optional[WebResponse]: The best available response, or None if the transport failed and no
                                   interceptor supplied a substitute

        Raises:
            InvocationParameterException: If the request is None
        """
        if request is None:
            raise InvocationParameterException("The request to be executed cannot be None")

        url = request_url(request)
        interceptors = self.registry.snapshot()

        response = self._run_before_hooks(interceptors, request)
        short_circuited = response is not None
        failure: Optional[Exception] = None

        if short_circuited:
            logger.debug(f"An interceptor supplied the response for {url}. Skipping the transport")
        else:
            result = self.transport.attempt(request, **transport_kwargs)
            response, failure = result.response, result.failure
            if failure is not None:
                logger.debug(f"Unable to fetch a response from url: {url} ({type(failure).__name__}: {failure})")

        final_response = self._run_after_hooks(interceptors, response, failure, short_circuited)

        if final_response is None:
            logger.debug(f"No response is available for url: {url}")
        return final_response

    @staticmethod
    def _run_before_hooks(interceptors: Sequence[InterceptorProtocol], request: Any) -> Optional[WebResponse]:
        """Returns the response of the first before-hook that supplies one"""
        for interceptor in interceptors:
            response = interceptor.before_invocation(request)
            if response is not None:
                return response
        return None

    @staticmethod
    def _run_after_hooks(
        interceptors: Sequence[InterceptorProtocol],
        response: Optional[WebResponse],
        failure: Optional[Exception],
        short_circuited: bool = False,
    ) -> Optional[WebResponse]:
        """
        Calls every after-hook exactly once, in priority order. A substituted response replaces the candidate
        passed to later hooks. A response supplied by a before-hook is final: hooks still observe it, but
        their return values are ignored.
        """
        candidate = response
        for interceptor in interceptors:
            replacement = interceptor.after_invocation(candidate, failure)
            if replacement is not None and not short_circuited:
                candidate = replacement
        return candidate

    def __repr__(self) -> str:
        return f"ExecutionPipeline(transport={self.transport!r}, registry={self.registry!r})"
