# invocation_exceptions.py
from typing import Optional


class InvocationException(Exception):
    """Base exception for errors raised while invoking HTTP endpoints."""
    pass

class TransportException(InvocationException):
    """Exception raised when the transport fails to complete an exchange (DNS, TLS, timeouts, protocol errors)."""

    def __init__(self, message: str, url: Optional[str] = None, *args, **kwargs):
        self.url = url
        super().__init__(message, *args, **kwargs)

class InvocationParameterException(InvocationException, ValueError):
    """Exception raised when a caller passes an absent or invalid argument to an entry point."""
    pass

class InvalidRequestMethodException(InvocationParameterException):
    """Exception raised when the HTTP method is missing or is not a supported verb."""
    pass

class RequestCreationException(InvocationException):
    """Exception raised when the preparation of a request fails"""
    pass

class ResponseWriteException(InvocationException, OSError):
    """Exception raised when a response body cannot be persisted."""

    def __init__(self, message: str, status_code: Optional[int] = None, *args):
        self.status_code = status_code
        super().__init__(message, *args)
