from web_invoker.package_metadata import __version__
from web_invoker.utils.initializer import initialize_package

config, logger = initialize_package()

from web_invoker.api import (WebResponse, TransportSuccess, TransportFailure, RequestMethod,
                             InterceptorProtocol, InvocationInterceptor, InterceptorRegistry,
                             BaseTransport, RequestsTransport, build_request, ExecutionPipeline, WebInvoker)

__all__ = ["__version__", "config", "logger", "WebResponse", "TransportSuccess", "TransportFailure",
           "RequestMethod", "InterceptorProtocol", "InvocationInterceptor", "InterceptorRegistry",
           "BaseTransport", "RequestsTransport", "build_request", "ExecutionPipeline", "WebInvoker"]
