"""netauth -- pluggable authentication for an httpx-backed HTTP client.

A client is an immutable value made of a typed configuration store and an
ordered pipeline of request modifiers. Auth strategies are request modifiers
that set one header; they are registered with ``auth()`` and switched on and
off with ``enable_auth()`` / ``disable_auth()`` without re-registration.

Typical usage::

    from netauth import AuthModifier, NetworkClient

    client = NetworkClient("https://api.example.com").auth(AuthModifier.api_key("k1"))
    response = client.get("/users")

Modules:
    configs: Typed per-client configuration store.
    pipeline: Ordered request-modifier pipeline.
    auth: Auth strategies and the strategy registry.
    client: Sync and async clients with the combinators.
    models: Pydantic models for transport and auth settings.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting with Rich support.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from netauth.auth import AuthModifier, AuthRegistry, create_default_registry  # noqa: E402
from netauth.client import AsyncNetworkClient, NetworkClient  # noqa: E402
from netauth.configs import AUTH_ENABLED, ConfigKey, Configs  # noqa: E402
from netauth.pipeline import ModifierPipeline  # noqa: E402

__all__ = [
    "AUTH_ENABLED",
    "AsyncNetworkClient",
    "AuthModifier",
    "AuthRegistry",
    "ConfigKey",
    "Configs",
    "ModifierPipeline",
    "NetworkClient",
    "create_default_registry",
]
