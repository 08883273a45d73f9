"""Pydantic models for the structured values netauth works with.

Two models live here:

* :class:`RequestConfig` -- transport settings read by the clients when they
  open an :class:`httpx.Client` or :class:`httpx.AsyncClient`. Stored in a
  client's :class:`~netauth.configs.Configs` under
  :data:`~netauth.configs.REQUEST`.
* :class:`AuthConfig` -- a declarative description of one auth strategy,
  turned into an :class:`~netauth.auth.AuthModifier` by
  :class:`~netauth.auth.registry.AuthRegistry`.

All models use Pydantic v2.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_API_KEY_FIELD = "X-API-Key"
"""Header name used by the ``api_key`` strategy when no field is given."""


class RequestConfig(BaseModel):
    """Transport settings applied when a request is dispatched."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(
        default=True, description="Follow 3xx redirects automatically"
    )


class AuthConfig(BaseModel):
    """Declarative description of an auth strategy.

    The ``type`` field selects the strategy registered under that name in an
    :class:`~netauth.auth.registry.AuthRegistry`. ``credential`` is the value
    the strategy sends (header value, password, token or API key) and
    ``field`` is only read by ``api_key``.

    Example::

        AuthConfig(type="api_key", credential="k1", field="X-Token")
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Auth type: header, basic, bearer, api_key")
    credential: str = Field(default="", description="Value sent by the strategy")
    field: str = Field(
        default=DEFAULT_API_KEY_FIELD,
        description="Header name for api_key auth",
    )
