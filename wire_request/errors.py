"""Exception types for wire-request.

The normalization pipeline defines no errors of its own: serialization
failures from the json module propagate as-is. These types cover the
transport and configuration layers around it.
"""


class WireRequestError(Exception):
    """Base class for wire-request errors."""


class TransportError(WireRequestError):
    """Raised when the transport fails to send a request (connection error, etc.)."""


class ConfigError(WireRequestError):
    """Raised when configuration loading fails."""
