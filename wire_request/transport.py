"""Transport - Sends prepared requests over HTTP.

The pipeline hands each PreparedRequest to a Transport exactly once. Any
object with a matching send() method works; HttpxTransport is the default
and sends through a single httpx.Client.
"""

from __future__ import annotations

import logging
import ssl
from typing import Any, Protocol

import httpx

from wire_request.errors import TransportError
from wire_request.models import PreparedRequest, TransportConfig
from wire_request.values import to_wire_string

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can put a PreparedRequest on the wire."""

    def send(self, request: PreparedRequest) -> Any: ...


def encode_body(data: Any) -> bytes | None:
    """Encode a serialized body as bytes. None means no body."""
    if data is None:
        return None
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    return to_wire_string(data).encode("utf-8")


def build_client_kwargs(config: TransportConfig) -> dict[str, Any]:
    """Build kwargs for httpx.Client including TLS configuration.

    Args:
        config: Transport configuration with optional TLS settings.

    Returns:
        Dictionary of kwargs for httpx.Client constructor.
    """
    kwargs: dict[str, Any] = {"headers": config.headers}

    needs_context = config.ca_bundle or config.cert or not config.verify_ssl
    if not needs_context:
        # use httpx default verification
        return kwargs

    ssl_context = ssl.create_default_context()
    if config.ca_bundle:
        ssl_context.load_verify_locations(config.ca_bundle)
    elif not config.verify_ssl:
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE

    # Client certificate (mTLS); key may be bundled into the cert file
    if config.cert:
        ssl_context.load_cert_chain(config.cert, config.key)

    kwargs["verify"] = ssl_context
    return kwargs


class HttpxTransport:
    """Sends prepared requests with httpx.

    Usage:
        transport = HttpxTransport()
        try:
            transport.send(prepared)
        finally:
            transport.close()

    Or with context manager:
        with HttpxTransport.from_config(config) as transport:
            transport.send(prepared)
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client if client is not None else httpx.Client()

    @classmethod
    def from_config(cls, config: TransportConfig) -> "HttpxTransport":
        return cls(httpx.Client(**build_client_kwargs(config)))

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def send(self, request: PreparedRequest) -> httpx.Response:
        """Send request and return the httpx response.

        Raises:
            TransportError: If the request fails (connection, timeout, etc.).
        """
        content = encode_body(request.data)
        logger.debug(f"Request: {request.method} {request.url}")

        try:
            return self._client.request(
                method=request.method,
                url=request.url,
                headers=request.headers if request.headers else None,
                content=content,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Request timeout: {request.method} {request.url}")
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.ConnectError as e:
            logger.warning(f"Connection error: {request.method} {request.url}")
            raise TransportError(f"Connection error: {e}") from e
        except httpx.RequestError as e:
            logger.warning(f"Request error: {request.method} {request.url}")
            raise TransportError(f"Request error: {e}") from e
