# /api/interceptors/registry.py
"""
The web_invoker.api.interceptors.registry module implements the InterceptorRegistry, the ordered collection
of interceptors consulted by an ExecutionPipeline.

The registry is shared, mutable state: interceptors may be added or removed from any thread while requests
are in flight. Mutations are serialized by a lock, and executions iterate over an immutable snapshot taken
when the execution starts, so changes never affect a request that is already being processed.
"""
from __future__ import annotations
import logging
import threading
from typing import Iterator, List, Tuple

from web_invoker.api.interceptors.base import InterceptorProtocol
from web_invoker.api.interceptors.ordering import order_interceptors
from web_invoker.exceptions import InvocationParameterException

logger = logging.getLogger(__name__)


class InterceptorRegistry:
    """
    Ordered registry of interceptors, kept sorted by descending priority.

    Methods:
        - add: registers an interceptor. Registering the same instance twice makes it run twice.
        - remove: removes an interceptor by identity. Does nothing if it was never registered.
        - remove_all: clears the registry.
        - snapshot: returns the current order as a tuple for a single execution.

    Examples:
        >>> from web_invoker.api.interceptors import InterceptorRegistry, InvocationInterceptor
        >>> class Passthrough(InvocationInterceptor):
        ...     def before_invocation(self, request):
        ...         return None
        ...     def after_invocation(self, response, failure):
        ...         return None
        >>> registry = InterceptorRegistry()
        >>> registry.add(Passthrough(priority=5))
        >>> len(registry)
        1
        >>> registry.remove_all()
    """

    def __init__(self) -> None:
        self._interceptors: List[InterceptorProtocol] = []
        self._lock = threading.RLock()

    def add(self, interceptor: InterceptorProtocol) -> None:
        """Adds an interceptor and re-sorts the registry by priority"""
        if not isinstance(interceptor, InterceptorProtocol):
            raise InvocationParameterException(
                "The value could not be added to the interceptor registry: expected an object with a priority, "
                f"before_invocation and after_invocation. Received {type(interceptor)}"
            )
        if isinstance(interceptor.priority, bool) or not isinstance(interceptor.priority, int):
            raise InvocationParameterException(
                f"Interceptor priorities must be integers. Received {interceptor.priority!r} for {type(interceptor)}"
            )
        with self._lock:
            self._interceptors = order_interceptors([*self._interceptors, interceptor])
        logger.debug(f"Registered the interceptor {interceptor!r} (priority={interceptor.priority})")

    def remove(self, interceptor: InterceptorProtocol) -> None:
        """Removes the first registered entry that is the given interceptor"""
        with self._lock:
            index = next((i for i, current in enumerate(self._interceptors) if current is interceptor), None)
            if index is None:
                logger.debug(f"The interceptor {interceptor!r} was not found in the registry")
                return
            self._interceptors = order_interceptors(
                current for i, current in enumerate(self._interceptors) if i != index
            )
        logger.debug(f"Removed the interceptor {interceptor!r} from the registry")

    def remove_all(self) -> None:
        """Removes every registered interceptor"""
        with self._lock:
            self._interceptors = []
        logger.debug("Removed all interceptors from the registry")

    def snapshot(self) -> Tuple[InterceptorProtocol, ...]:
        """Returns the interceptors in execution order as an immutable tuple"""
        with self._lock:
            return tuple(self._interceptors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._interceptors)

    def __iter__(self) -> Iterator[InterceptorProtocol]:
        return iter(self.snapshot())

    def __contains__(self, interceptor: object) -> bool:
        return any(current is interceptor for current in self.snapshot())

    def __repr__(self) -> str:
        return f"InterceptorRegistry(interceptors={list(self.snapshot())})"
