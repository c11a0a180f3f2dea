# /api/interceptors
"""
The web_invoker.api.interceptors module contains the interceptor capability, the ordering used to sort
interceptors by priority, and the registry consulted by the ExecutionPipeline.
"""
from web_invoker.api.interceptors.base import InterceptorProtocol, InvocationInterceptor
from web_invoker.api.interceptors.ordering import compare_interceptors, order_interceptors, interceptor_sort_key
from web_invoker.api.interceptors.registry import InterceptorRegistry

__all__ = [
    "InterceptorProtocol",
    "InvocationInterceptor",
    "compare_interceptors",
    "order_interceptors",
    "interceptor_sort_key",
    "InterceptorRegistry",
]
