# /api/models/response.py
"""
The web_invoker.api.models.response module implements the WebResponse, an immutable snapshot of a completed
HTTP exchange. A WebResponse is created by the transport once an exchange completes, by interceptors that
short-circuit a request, or synthetically by tests and mocks through `WebResponse.from_text`.

The snapshot records the status line, headers, body, charset, content type and the chain of URLs that were
visited when redirects were followed. Apart from the redirect chain, which the transport assigns once at
construction time, no field changes after the response is created.
"""
from __future__ import annotations

import io
import locale
import logging
from http.client import responses
from pathlib import Path
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from web_invoker.exceptions import ResponseWriteException
from web_invoker.utils.helpers import get_header_value, parse_charset, parse_http_date_millis
from web_invoker.utils.response_protocol import ResponseProtocol

logger = logging.getLogger(__name__)


class WebResponse(BaseModel):
    """
    Immutable value encapsulating the response information obtained from invoking an HTTP URL.

    Attributes:
        original_target (Optional[str]): The URL of the request that initiated the exchange
        status_code (int): The HTTP status code returned by the server
        status_message (Optional[str]): The reason phrase. Defaults to the standard phrase for the status code
        body (Optional[bytes | bytearray]): The response body. None indicates that no body was ever associated
                                            with the response (e.g. a HEAD request), which differs from b""
        charset (Optional[str]): Explicit charset used to decode the body. Overrides any charset passed
                                 to `text_content`
        content_type (Optional[str]): The content type as reported by the server (unparsed)
        headers (Mapping[str, str]): Read-only view of the response headers
        redirect_chain (Tuple[str, ...]): URLs visited after the original target when following redirects

    Examples:
        >>> from web_invoker.api.models import WebResponse
        >>> response = WebResponse.from_text("hello world", original_target="http://localhost/hit")
        >>> response.is_success()
        True
        >>> response.text_content()
        'hello world'
        >>> str(response)
        '200 OK'
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    DEFAULT_CHARSET: ClassVar[str] = "utf-8"
    LAST_MODIFIED_HEADER: ClassVar[str] = "Last-Modified"

    original_target: Optional[str] = None
    status_code: int = 200
    status_message: Optional[str] = Field(default=None, validate_default=True)
    body: Optional[Any] = None
    charset: Optional[str] = None
    content_type: Optional[str] = None
    headers: Any = Field(default_factory=dict, validate_default=True)
    redirect_chain: Tuple[str, ...] = ()

    @field_validator("status_message")
    @classmethod
    def _default_status_message(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        """Uses the standard reason phrase when the server did not provide one"""
        if value:
            return value
        status_code = info.data.get("status_code")
        return responses.get(status_code) if isinstance(status_code, int) else None

    @field_validator("body")
    @classmethod
    def _validate_body(cls, value: Any) -> Optional[bytes | bytearray]:
        """Stores the body as-is so that `as_bytes` can share the caller's buffer"""
        if value is None or isinstance(value, (bytes, bytearray)):
            return value
        if isinstance(value, memoryview):
            return value.tobytes()
        raise ValueError(f"Expected the response body to be bytes, a bytearray, or None. Received {type(value)}")

    @field_validator("headers", mode="before")
    @classmethod
    def _freeze_headers(cls, value: Optional[Mapping[str, str]]) -> Mapping[str, str]:
        """Copies the received headers into a read-only mapping"""
        if value is None:
            return MappingProxyType({})
        if not isinstance(value, Mapping):
            raise ValueError(f"Expected the response headers to be a mapping. Received {type(value)}")
        return MappingProxyType({str(k): str(v) for k, v in value.items()})

    @field_validator("redirect_chain", mode="before")
    @classmethod
    def _validate_redirect_chain(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return ()
        return tuple(str(url) for url in value)

    @classmethod
    def from_text(
        cls,
        text: Optional[str],
        original_target: Optional[str] = None,
        status_code: int = 200,
        **kwargs: Any,
    ) -> WebResponse:
        """
        Creates a synthetic response from a string. Used by interceptors and tests to fabricate responses.

        Args:
            text (Optional[str]): The body of the response. None creates a response without a body
            original_target (Optional[str]): The URL the response is associated with
            status_code (int): The status code of the synthetic response
            **kwargs: Additional fields such as `headers`, `charset` or `content_type`

        Returns:
            WebResponse: A response whose body is the text encoded with the explicit or default charset
        """
        charset = kwargs.get("charset") or cls.DEFAULT_CHARSET
        body = text.encode(charset) if text is not None else None
        return cls(original_target=original_target, status_code=status_code, body=body, **kwargs)

    @classmethod
    def from_response(cls, response: ResponseProtocol, original_target: Optional[str] = None) -> WebResponse:
        """
        Snapshots a completed response from an HTTP client (requests.Response in practice).

        The charset is derived from the Content-Type header rather than the client's guess, and the redirect
        chain is derived from the response history: each redirect hop after the original request, ending with
        the URL that produced the final response.

        Args:
            response (ResponseProtocol): The completed response to copy
            original_target (Optional[str]): The URL originally requested. Inferred from the history when omitted

        Returns:
            WebResponse: An immutable snapshot of the exchange
        """
        headers = dict(response.headers or {})
        content_type = get_header_value(headers, "Content-Type")
        history = list(getattr(response, "history", None) or [])

        redirect_chain = [str(hop.url) for hop in history[1:]] + [str(response.url)] if history else []
        source_url = history[0].url if history else response.url
        original_target = original_target or (str(source_url) if source_url is not None else None)

        request = getattr(response, "request", None)
        body = None if getattr(request, "method", None) == "HEAD" else response.content

        return cls(
            original_target=original_target,
            status_code=response.status_code,
            status_message=getattr(response, "reason", None),
            body=body,
            charset=parse_charset(content_type),
            content_type=content_type,
            headers=headers,
            redirect_chain=redirect_chain,
        )

    @property
    def size(self) -> int:
        """The length of the body in bytes, or 0 when there is no body"""
        return len(self.body) if self.body is not None else 0

    @property
    def content(self) -> Optional[str]:
        """The body decoded as text with the response charset, or UTF-8 if none was reported"""
        return self.text_content()

    def text_content(self, charset: Optional[str] = None) -> Optional[str]:
        """
        Decodes the body as text. The charset stored on the response takes priority over the `charset`
        argument, which in turn takes priority over UTF-8. If decoding fails because the charset is unknown
        or the bytes are invalid, the body is decoded with the platform default encoding, replacing
        undecodable bytes.

        Args:
            charset (Optional[str]): The charset to use when the response does not specify one

        Returns:
            Optional[str]: The decoded body, or None when the response has no body
        """
        if self.body is None:
            return None

        encoding = self.charset or charset or self.DEFAULT_CHARSET
        try:
            return self.body.decode(encoding)
        except (LookupError, UnicodeDecodeError) as e:
            fallback = locale.getpreferredencoding(False)
            logger.debug(f"Unable to decode the response body as {encoding}: {e}. Falling back to {fallback}")
            return self.body.decode(fallback, errors="replace")

    def as_bytes(self) -> Optional[bytes | bytearray]:
        """
        Returns the body object itself rather than a copy. When the body was provided as a bytearray, changes
        made to the returned value are visible to every later read of this response, including
        `text_content` and `as_stream`. This avoids a copy for large bodies; use `as_cloned_bytes` when the
        returned value will be modified.
        """
        return self.body

    def as_cloned_bytes(self) -> Optional[bytearray]:
        """Returns an independent, mutable copy of the body, or None when there is no body"""
        if self.body is None:
            return None
        return bytearray(self.body)

    def as_stream(self) -> Optional[io.BytesIO]:
        """Returns a new binary stream over the body, or None when there is no body"""
        if self.body is None:
            return None
        return io.BytesIO(self.body)

    def is_success(self) -> bool:
        """All status codes between 200 and 299 (inclusive) are considered successful"""
        return 200 <= self.status_code <= 299

    def is_redirect(self) -> bool:
        """All status codes between 300 and 399 (inclusive) indicate a redirect"""
        return 300 <= self.status_code <= 399

    def is_client_error(self) -> bool:
        """All status codes between 400 and 499 (inclusive) indicate a client error"""
        return 400 <= self.status_code <= 499

    def is_server_error(self) -> bool:
        """All status codes between 500 and 599 (inclusive) indicate a server error"""
        return 500 <= self.status_code <= 599

    def get_header(self, name: str) -> Optional[str]:
        """Returns the value of a header if present, matching the exact name before ignoring case"""
        return get_header_value(self.headers, name)

    def last_modified_millis(self) -> int:
        """
        Parses the Last-Modified header.

        Returns:
            int: milliseconds since the epoch, or -1 if the header is missing or cannot be parsed
        """
        millis = parse_http_date_millis(self.get_header(self.LAST_MODIFIED_HEADER))
        return millis if millis is not None else -1

    def has_redirects(self) -> bool:
        """Indicates whether the response was fetched from a redirected resource"""
        return len(self.redirect_chain) > 0

    def final_target(self) -> Optional[str]:
        """Returns the last URL of the redirect chain, or None when no redirects occurred"""
        return self.redirect_chain[-1] if self.redirect_chain else None

    def effective_target(self) -> Optional[str]:
        """Returns the URL that actually produced this response: the last redirect if any, else the original"""
        return self.redirect_chain[-1] if self.redirect_chain else self.original_target

    def write_to_file(self, destination: str | Path) -> Path:
        """
        Writes the body to the given file. A response without a body produces an empty file.

        Args:
            destination (str | Path): The file to write to

        Returns:
            Path: The path that was written

        Raises:
            ResponseWriteException: If the status code is outside of the 2xx and 3xx ranges, or if the write fails
        """
        if not (self.is_success() or self.is_redirect()):
            raise ResponseWriteException(
                f"Refusing to write the body of a response without a 2xx or 3xx status ({self}) to {destination}",
                status_code=self.status_code,
            )

        path = Path(destination)
        try:
            path.write_bytes(bytes(self.body) if self.body is not None else b"")
        except OSError as e:
            raise ResponseWriteException(
                f"Unable to write the response body to {path}: {e}", status_code=self.status_code
            ) from e

        logger.debug(f"Wrote {self.size} bytes from {self.effective_target()} to {path}")
        return path

    def trace(self) -> str:
        """Returns a single-line summary of the response for debugging"""
        return (
            f"[Response: code={self.status_code}, message={self.status_message}, "
            f"contentType={self.content_type}, size={self.size}]"
        )

    def __str__(self) -> str:
        return f"{self.status_code} {self.status_message}"

    def __repr__(self) -> str:
        return (
            f"<WebResponse(status_code={self.status_code}, size={self.size}, "
            f"target={self.effective_target()!r})>"
        )
