# /api
"""
The web_invoker.api module contains the components used to invoke HTTP endpoints:

    - ExecutionPipeline: runs the before/after interceptor hooks around a single request execution
    - InterceptorRegistry: the ordered collection of interceptors consulted by the pipeline
    - RequestsTransport: sends prepared requests through a requests.Session
    - WebInvoker: one-line helpers (GET, HEAD, arbitrary verbs, JSON posts) built on the pipeline
    - build_request: prepares requests for a URL and HTTP verb
"""
from web_invoker.api.models import (WebResponse, TransportResult, TransportSuccess, TransportFailure,
                                    RequestMethod)
from web_invoker.api.interceptors import (InterceptorProtocol, InvocationInterceptor, InterceptorRegistry,
                                          compare_interceptors, order_interceptors)
from web_invoker.api.transport import BaseTransport, RequestsTransport
from web_invoker.api.request_builder import build_request
from web_invoker.api.execution_pipeline import ExecutionPipeline
from web_invoker.api.web_invoker import WebInvoker

__all__ = [
    "WebResponse",
    "TransportResult",
    "TransportSuccess",
    "TransportFailure",
    "RequestMethod",
    "InterceptorProtocol",
    "InvocationInterceptor",
    "InterceptorRegistry",
    "compare_interceptors",
    "order_interceptors",
    "BaseTransport",
    "RequestsTransport",
    "build_request",
    "ExecutionPipeline",
    "WebInvoker",
]
