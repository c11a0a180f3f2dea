# utils/helpers.py
import re
import logging
from datetime import timezone
from email.utils import parsedate_to_datetime
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

CHARSET_PATTERN = re.compile(r"""charset\s*=\s*["']?([^"';\s]+)""", re.IGNORECASE)


def parse_charset(content_type: Optional[str]) -> Optional[str]:
    """
    Extracts the charset parameter from a Content-Type header value.

    Args:
        content_type (Optional[str]): a value such as 'text/html; charset=ISO-8859-1'

    Returns:
        Optional[str]: The charset if specified, otherwise None
    """
    if not content_type:
        return None
    match = CHARSET_PATTERN.search(content_type)
    return match.group(1) if match else None


def parse_http_date_millis(value: Optional[str]) -> Optional[int]:
    """
    Parses an HTTP date (RFC 7231, RFC 850 and asctime formats) into epoch milliseconds.

    Returns:
        Optional[int]: milliseconds since the epoch, or None if the value is empty or unparsable
    """
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError) as e:
        logger.debug(f"Couldn't parse '{value}' as an HTTP date: {e}")
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        # "-0000" offsets parse as naive datetimes, which are UTC by definition
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp() * 1000)


def get_header_value(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Retrieves a header by its exact name first and then case-insensitively"""
    if name in headers:
        return headers[name]
    lowered = name.lower()
    return next((value for key, value in headers.items() if key.lower() == lowered), None)
