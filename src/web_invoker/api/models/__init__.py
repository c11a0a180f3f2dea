# /api/models

"""
The web_invoker.api.models module includes the value types exchanged between the components of the
invocation pipeline.

Core Models:
    - WebResponse: Immutable snapshot of a completed HTTP exchange, including the redirect chain and the
                   policy used to decode the body as text.
    - TransportSuccess/TransportFailure: The tagged outcome of a single transport attempt.
    - RequestMethod: The HTTP verbs supported when building requests.
"""

from web_invoker.api.models.response import WebResponse
from web_invoker.api.models.transport_result import TransportResult, TransportSuccess, TransportFailure
from web_invoker.api.models.request_method import RequestMethod

__all__ = [
    "WebResponse",
    "TransportResult",
    "TransportSuccess",
    "TransportFailure",
    "RequestMethod",
]
