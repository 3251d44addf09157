"""Header Normalizer - Canonical header names and content-type inference."""

from __future__ import annotations

from typing import Any

from wire_request.values import is_object

CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json;charset=utf-8"


def normalize_header_name(headers: dict[str, str] | None, normalized_name: str) -> None:
    """Rename case-variant spellings of normalized_name to normalized_name in place.

    When several variants are present, the last one in iteration order wins.
    """
    if not headers:
        return

    target = normalized_name.upper()
    for name in list(headers):
        if name != normalized_name and name.upper() == target:
            headers[normalized_name] = headers.pop(name)


def normalize_headers(headers: dict[str, str] | None, body: Any) -> dict[str, str] | None:
    """Canonicalize Content-Type and infer it for structured bodies.

    Args:
        headers: Request headers. Mutated in place.
        body: The request body before serialization. Must be the original
              structured value, not its JSON string, or no content type is
              inferred.

    Returns:
        The same headers mapping (None if None was passed).
    """
    normalize_header_name(headers, CONTENT_TYPE)

    if headers is not None and is_object(body) and not headers.get(CONTENT_TYPE):
        headers[CONTENT_TYPE] = JSON_CONTENT_TYPE

    return headers
