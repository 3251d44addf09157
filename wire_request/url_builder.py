"""URL Builder - Serializes query parameters onto a request URL.

Parameters are emitted in mapping insertion order. None values are dropped,
sequences expand to repeated ``key[]`` entries, dates become ISO-8601 instants
and structured values become compact JSON. Keys and values are
percent-encoded as URI components with a fixed set of characters restored to
their literal form (space becomes ``+``), which is the form-style encoding
most servers expect.
"""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import quote

from wire_request.values import (
    is_date,
    is_object,
    is_sequence,
    to_iso_string,
    to_json,
    to_wire_string,
)

# Characters left unescaped by URI-component encoding besides alphanumerics
# and "-_.~", which quote() never escapes.
_URI_COMPONENT_SAFE = "!*'()"

# Escapes restored to literal characters after encoding.
_READABLE_ESCAPES = {
    "%40": "@",
    "%3A": ":",
    "%24": "$",
    "%2C": ",",
    "%20": "+",
    "%5B": "[",
    "%5D": "]",
}
_READABLE_PATTERN = re.compile("|".join(_READABLE_ESCAPES), re.IGNORECASE)

# Suffix for keys whose value is a sequence. Emitted already encoded.
_ARRAY_MARKER = "%5B%5D"


def encode(text: str | bytes) -> str:
    """Percent-encode text as a URI component, keeping ``@ : $ , [ ]`` literal.

    Spaces are written as ``+`` rather than ``%20``. Bytes are encoded
    octet by octet, so they need not be valid UTF-8.
    """
    quoted = quote(text, safe=_URI_COMPONENT_SAFE)
    return _READABLE_PATTERN.sub(
        lambda match: _READABLE_ESCAPES[match.group(0).upper()], quoted
    )


def _serialize_param(value: Any) -> str | bytes:
    if is_date(value):
        return to_iso_string(value)
    if is_object(value):
        return to_json(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return to_wire_string(value)


def build_query_url(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Append serialized params to url.

    Args:
        url: Request URL, possibly with an existing query string or fragment.
        params: Query parameters in the order they should be emitted.

    Returns:
        The URL with params appended. If params is empty or every value is
        None, url is returned unchanged (fragment included). Otherwise any
        ``#fragment`` is dropped and params are joined to an existing query
        with ``&`` or start a new one with ``?``.
    """
    if not params:
        return url

    parts: list[str] = []
    for key, value in params.items():
        if value is None:
            continue

        encoded_key = encode(str(key))
        if is_sequence(value):
            encoded_key += _ARRAY_MARKER
            values = value
        else:
            values = [value]

        for item in values:
            parts.append(f"{encoded_key}={encode(_serialize_param(item))}")

    serialized_params = "&".join(parts)
    if not serialized_params:
        return url

    # Fragments are client-side only; they never go over the wire.
    url = url.split("#", 1)[0]
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{serialized_params}"
