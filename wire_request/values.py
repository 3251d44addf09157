"""Value classification and conversion helpers.

Parameter values and request bodies are classified into a small tagged union
(None, scalar, date, structured object, sequence) by the predicates here.
The URL builder, header normalizer and body transformer all dispatch on
these predicates, so they agree on what counts as "structured".
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

# Values sent over the wire as text; everything else non-None is structured.
_PRIMITIVE_TYPES = (str, bytes, bytearray, int, float, bool, UUID, Decimal, Enum)


def is_date(value: Any) -> bool:
    """Return True if value is a date/time instant (not a date-like string or number)."""
    return isinstance(value, (datetime, date))


def is_object(value: Any) -> bool:
    """Return True if value is non-None and not a primitive.

    Sequences, mappings and dates all satisfy this predicate. Callers that
    need to treat sequences or dates differently check for them first.
    """
    return value is not None and not isinstance(value, _PRIMITIVE_TYPES)


def is_sequence(value: Any) -> bool:
    """Return True for list/tuple values, which expand to repeated query keys."""
    return isinstance(value, (list, tuple))


def to_iso_string(value: date) -> str:
    """Format a date or datetime as an ISO-8601 UTC instant.

    Output always has millisecond precision and a ``Z`` suffix, e.g.
    ``2024-01-02T03:04:05.000Z``. Naive datetimes are taken to be UTC and a
    bare ``date`` is midnight UTC on that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            instant = value.replace(tzinfo=timezone.utc)
        else:
            instant = value.astimezone(timezone.utc)
    else:
        instant = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    return instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _json_default(value: Any) -> Any:
    if is_date(value):
        return to_iso_string(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialize value to compact canonical JSON.

    Separators carry no whitespace and mapping keys keep insertion order, so
    ``{"a": 1}`` becomes ``{"a":1}``. Non-ASCII text is kept literal; the URL
    builder percent-encodes it as UTF-8 afterwards.

    Raises:
        TypeError: If value contains something JSON cannot represent.
        ValueError: If value contains a circular reference.
    """
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    )


def to_wire_string(value: Any) -> str:
    """Stringify a scalar for the wire.

    Booleans become ``true``/``false`` and integral floats drop the trailing
    ``.0``, matching what browser-side clients emit for the same values;
    non-finite floats are ``NaN``, ``Infinity`` and ``-Infinity``. A None
    element inside a sequence is written as ``null`` and an Enum member as
    its value. Bytes that are not valid UTF-8 get U+FFFD replacements; the
    URL builder encodes raw bytes itself and never comes through here.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_wire_string(value.value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)
