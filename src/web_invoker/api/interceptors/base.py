# /api/interceptors/base.py
"""
The web_invoker.api.interceptors.base module defines the interceptor capability: a priority and two hooks
that are called around every request executed by the ExecutionPipeline.

Any object exposing `priority`, `before_invocation`, and `after_invocation` is accepted as an interceptor
(see InterceptorProtocol). The InvocationInterceptor ABC is provided as a convenient base class that stores
the priority and leaves both hooks to subclasses.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from web_invoker.api.models.response import WebResponse


@runtime_checkable
class InterceptorProtocol(Protocol):
    """
    Structural interface of an interceptor.

    - priority: interceptors with a higher priority run first in both phases
    - before_invocation: returning a WebResponse short-circuits the request and the transport is never called
    - after_invocation: receives the current response (if any) and the transport failure (if any). Returning a
      WebResponse replaces the response seen by the remaining interceptors
    """

    priority: int

    def before_invocation(self, request: Any) -> Optional[WebResponse]:
        ...

    def after_invocation(self, response: Optional[WebResponse], failure: Optional[Exception]) -> Optional[WebResponse]:
        ...


class InvocationInterceptor(ABC):
    """
    Base class for interceptors registered with an InterceptorRegistry.

    Args:
        priority (int): The order in which the interceptor runs relative to others. Higher values run first.
                        Interceptors with equal priorities run in the order in which they were registered.
    """

    def __init__(self, priority: int = 0) -> None:
        self.priority = priority

    @abstractmethod
    def before_invocation(self, request: Any) -> Optional[WebResponse]:
        """Called before the request is sent. Return a WebResponse to skip the transport entirely."""
        raise NotImplementedError

    @abstractmethod
    def after_invocation(self, response: Optional[WebResponse], failure: Optional[Exception]) -> Optional[WebResponse]:
        """Called after the request completes or fails. Return a WebResponse to replace the current response."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(priority={self.priority})"
