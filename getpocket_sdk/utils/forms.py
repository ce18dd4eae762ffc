"""
Parsing of URL-encoded response bodies.

Pocket answers successful OAuth and add calls with `key=value&key2=value2`
bodies rather than JSON. Malformed percent escapes and semicolon
separators are rejected. Bytes that are not valid UTF-8 are kept as
surrogate escapes, so an odd username never hides a valid token.
"""

import re
from urllib.parse import parse_qsl

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_form_body(body):
    """
    Parse a URL-encoded body into a dict.

    Args:
        body: Raw response body (bytes or str)

    Returns:
        Dict mapping each key to its first value. Keys without '=' map to ''.

    Raises:
        ValueError: If the body is not a valid URL-encoded query string
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="surrogateescape")

    values = {}
    for pair in body.split("&"):
        if not pair:
            continue
        if ";" in pair:
            raise ValueError(f"invalid semicolon separator in query: {pair!r}")
        if _BAD_ESCAPE.search(pair):
            raise ValueError(f"invalid URL escape in query: {pair!r}")
        if "=" not in pair:
            pair += "="
        for key, value in parse_qsl(pair, keep_blank_values=True, errors="surrogateescape"):
            values.setdefault(key, value)
    return values
