"""Data models for wire-request.

All models use Pydantic v2. A RequestConfig is what callers describe; the
pipeline turns it into an immutable PreparedRequest for the transport.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Request Models
# =============================================================================


class RequestConfig(BaseModel):
    """One outgoing HTTP request as described by the caller.

    params values may be None (dropped), scalars, dates, structured values
    or lists of those. data may be any value; structured data is serialized
    to JSON by the pipeline.
    """

    model_config = ConfigDict(extra="forbid")

    url: str = Field(description="Request URL, may include a query string")
    method: str = Field(default="GET", description="HTTP method, case-insensitive")
    params: dict[str, Any] | None = Field(
        default=None, description="Query parameters, emitted in insertion order"
    )
    headers: dict[str, str] = Field(default_factory=dict, description="Request headers")
    data: Any = Field(default=None, description="Request body")

    @field_validator("method")
    @classmethod
    def uppercase_method(cls, v: str) -> str:
        return v.upper()

    @field_validator("headers", mode="before")
    @classmethod
    def default_headers(cls, v: Any) -> Any:
        return {} if v is None else v


class PreparedRequest(BaseModel):
    """A fully normalized request, ready for the transport.

    url carries the serialized params, headers hold at most one spelling of
    Content-Type, and data is None, text, bytes or a scalar.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: str = Field(description="Upper-cased HTTP method")
    url: str = Field(description="URL with query parameters applied")
    headers: dict[str, str] = Field(default_factory=dict, description="Normalized headers")
    data: Any = Field(default=None, description="Serialized body")


# =============================================================================
# Configuration Models
# =============================================================================


class TransportConfig(BaseModel):
    """Configuration for the httpx transport."""

    model_config = ConfigDict(extra="forbid")

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request (supports ${ENV_VAR} substitution)",
    )
    verify_ssl: bool = Field(default=True, description="Verify server certificates")
    ca_bundle: str | None = Field(default=None, description="Path to CA bundle file")
    cert: str | None = Field(default=None, description="Client certificate file (mTLS)")
    key: str | None = Field(default=None, description="Client private key file (mTLS)")
