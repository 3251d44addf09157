"""Client - Public entry point: prepare a request, then dispatch it.

Usage:
    from wire_request.client import request

    request({"url": "http://api.test/items", "params": {"page": 2}})

Or with a reusable client:
    with Client() as client:
        client.request(RequestConfig(url="http://api.test", method="post", data={"n": 1}))
"""

from __future__ import annotations

from typing import Any, Mapping

from wire_request.models import RequestConfig
from wire_request.pipeline import prepare
from wire_request.transport import HttpxTransport, Transport


class Client:
    """Runs the normalization pipeline and hands each result to a transport.

    A transport passed in stays owned by the caller; one created here is
    closed by close().
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self._owned: HttpxTransport | None = None
        if transport is None:
            transport = self._owned = HttpxTransport()
        self._transport: Transport = transport

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owned is not None:
            self._owned.close()

    def request(self, config: RequestConfig | Mapping[str, Any]) -> None:
        """Prepare config and send it. The response is not observed here.

        Args:
            config: A RequestConfig or a mapping with the same fields.

        Raises:
            pydantic.ValidationError: If a mapping does not describe a valid request.
            TypeError: If params or data cannot be serialized to JSON.
            TransportError: If the transport fails to send.
        """
        if not isinstance(config, RequestConfig):
            config = RequestConfig.model_validate(config)

        prepared = prepare(config)
        self._transport.send(prepared)


def request(
    config: RequestConfig | Mapping[str, Any],
    transport: Transport | None = None,
) -> None:
    """Prepare and dispatch a single request."""
    if transport is not None:
        Client(transport).request(config)
        return

    with Client() as client:
        client.request(config)
