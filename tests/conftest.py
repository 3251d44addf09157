"""Pytest configuration and fixtures for wire-request tests.

This file provides:
- RecordingTransport: a Transport that keeps every request it is handed
- Fixtures: shared test infrastructure
"""

from __future__ import annotations

from typing import Any

import pytest

from wire_request.models import PreparedRequest


class RecordingTransport:
    """Transport that records prepared requests instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[PreparedRequest] = []

    def send(self, request: PreparedRequest) -> Any:
        self.sent.append(request)
        return None


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()
