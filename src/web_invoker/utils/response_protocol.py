from __future__ import annotations
from typing import Any, MutableMapping, runtime_checkable, Protocol


@runtime_checkable
class ResponseProtocol(Protocol):
    """
    Protocol for HTTP response objects compatible with both requests.Response, httpx.Response, and other
    response-like classes. `web_invoker` uses this protocol to snapshot a completed exchange into a
    `WebResponse` without depending on a single client library.

    The URL is kept flexible to allow for other types outside of the normal string including basic pydantic
    and httpx URL types.
    """

    status_code: int
    headers: MutableMapping[str, str]
    content: bytes
    url: Any

    # Status and validation methods
    def raise_for_status(self) -> None:
        """Raise an exception for HTTP error status codes."""
        ...
