"""Request Pipeline - Normalizes a RequestConfig into a PreparedRequest.

The three transforms run in a fixed order: URL, then headers, then body.
Header inference must see the original structured body, so the body is
serialized last. The caller's RequestConfig is never modified.
"""

from __future__ import annotations

import logging
from typing import Any

from wire_request.body import serialize_body
from wire_request.headers import normalize_headers
from wire_request.models import PreparedRequest, RequestConfig
from wire_request.url_builder import build_query_url

logger = logging.getLogger(__name__)


def transform_url(config: RequestConfig) -> str:
    """Return config.url with config.params serialized onto it."""
    return build_query_url(config.url, config.params)


def transform_headers(config: RequestConfig) -> dict[str, str]:
    """Return a normalized copy of config.headers, inferred from the unserialized body."""
    return normalize_headers(dict(config.headers), config.data)


def transform_body(config: RequestConfig) -> Any:
    return serialize_body(config.data)


def prepare(config: RequestConfig) -> PreparedRequest:
    """Run the normalization pipeline over config.

    Raises:
        TypeError: If params or data contain values JSON cannot represent.
        ValueError: If params or data contain a circular reference.
    """
    url = transform_url(config)
    headers = transform_headers(config)
    data = transform_body(config)

    logger.debug(f"Prepared request: {config.method} {url}")
    return PreparedRequest(method=config.method, url=url, headers=headers, data=data)
