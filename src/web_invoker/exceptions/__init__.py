from web_invoker.exceptions.invocation_exceptions import (InvocationException, TransportException,
                                                          InvocationParameterException,
                                                          InvalidRequestMethodException,
                                                          RequestCreationException, ResponseWriteException)

from web_invoker.exceptions.util_exceptions import LogDirectoryError

__all__ = ["InvocationException", "TransportException", "InvocationParameterException",
           "InvalidRequestMethodException", "RequestCreationException", "ResponseWriteException",
           "LogDirectoryError"]
