# /api/request_builder.py
"""
Helpers for preparing outbound requests. Requests are built with `requests.Request(...).prepare()` so that
header, parameter and body encoding are handled by `requests`.
"""
from typing import Any, Dict, Optional

import requests

from web_invoker.api.models import RequestMethod
from web_invoker.exceptions import InvocationParameterException, RequestCreationException


def build_request(
    url: str,
    method: RequestMethod | str,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    data: Optional[Any] = None,
    json: Optional[Any] = None,
) -> requests.PreparedRequest:
    """
    Prepares a request for the given URL and HTTP verb.

    Args:
        url (str): The URL to invoke
        method (RequestMethod | str): The HTTP verb to use
        headers (Optional[Dict[str, str]]): Request headers
        params (Optional[Dict[str, Any]]): Query parameters appended to the URL
        data (Optional[Any]): Form parameters (dict) or a raw request body
        json (Optional[Any]): An object sent as a JSON request body

    Returns:
        requests.PreparedRequest: The prepared request object.

    Raises:
        InvalidRequestMethodException: If the method is None or is not a supported verb
        InvocationParameterException: If the URL is empty
        RequestCreationException: If requests fails to prepare the request
    """
    request_method = RequestMethod.resolve(method)

    if not isinstance(url, str) or not url.strip():
        raise InvocationParameterException(f"The url to invoke must be a non-empty string. Received {url!r}")

    try:
        request = requests.Request(
            request_method.value, url.strip(), headers=headers or {}, params=params or {}, data=data, json=json
        )
        return request.prepare()
    except (requests.RequestException, ValueError, TypeError) as e:
        raise RequestCreationException(f"Unable to prepare the {request_method.value} request to {url}: {e}") from e
