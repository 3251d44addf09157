"""Body Transformer - Serializes structured request bodies to JSON text."""

from __future__ import annotations

from typing import Any

from wire_request.values import is_object, to_json


def serialize_body(data: Any) -> Any:
    """Return JSON text for structured data; pass primitives and None through unchanged."""
    if is_object(data):
        return to_json(data)
    return data
