# /api/models/request_method.py
from __future__ import annotations
from enum import Enum
from typing import Any

from web_invoker.exceptions import InvalidRequestMethodException


class RequestMethod(str, Enum):
    """The HTTP verbs that can be used to invoke a URL."""

    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"
    TRACE = "TRACE"

    @classmethod
    def resolve(cls, method: Any) -> RequestMethod:
        """
        Resolves a RequestMethod from an enum member or a case-insensitive verb name.

        Raises:
            InvalidRequestMethodException: if the method is None or is not a supported verb
        """
        if method is None:
            raise InvalidRequestMethodException("The request method cannot be None")
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            try:
                return cls(method.strip().upper())
            except ValueError:
                pass
        raise InvalidRequestMethodException(f"Unsupported request method: {method!r}")
