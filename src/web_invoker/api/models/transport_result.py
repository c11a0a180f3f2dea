# /api/models/transport_result.py
"""
The web_invoker.api.models.transport_result module defines the tagged outcome of a single transport attempt.
Instead of raising, a transport attempt returns either a TransportSuccess holding the WebResponse or a
TransportFailure holding the error that prevented the exchange from completing.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict

from web_invoker.api.models.response import WebResponse


class TransportResult(BaseModel):
    """Base class for the outcome of a transport attempt."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: Optional[str] = None
    response: Optional[WebResponse] = None
    failure: Optional[Exception] = None


class TransportSuccess(TransportResult):
    """Returned when the transport completed the exchange, regardless of the status code received."""

    response: WebResponse
    failure: None = None

    def __repr__(self):
        return f"<TransportSuccess(url={self.url!r}, response={self.response!r})>"

    def __bool__(self):
        return True


class TransportFailure(TransportResult):
    """
    Returned when the exchange could not be completed (DNS, TLS, timeouts, protocol errors).
    The failure is kept so that after-invocation hooks can inspect it.
    """

    response: None = None
    failure: Exception

    @property
    def message(self) -> str:
        """The message of the underlying error"""
        return str(self.failure)

    def __repr__(self):
        return f"<TransportFailure(url={self.url!r}, error={type(self.failure).__name__}, message={self.message!r})>"

    def __bool__(self):
        return False
