"""Auth strategies for netauth clients.

The main entry points are:

- :class:`AuthModifier` -- immutable strategy wrapping one request-mutation
  function, with the ``header``, ``basic``, ``bearer`` and ``api_key``
  constructors.
- :class:`ModifierAuth` -- :class:`httpx.Auth` adapter for a strategy.
- :class:`AuthRegistry` / :func:`create_default_registry` -- build strategies
  from a declarative :class:`~netauth.models.AuthConfig`.

Typical usage::

    from netauth import NetworkClient
    from netauth.auth import AuthModifier

    client = NetworkClient("https://api.example.com").auth(AuthModifier.bearer("tok"))
    response = client.get("/me")
"""

from netauth.auth.modifier import AuthModifier, ModifierAuth, encode_credential
from netauth.auth.registry import AuthRegistry, create_default_registry

__all__ = [
    "AuthModifier",
    "AuthRegistry",
    "ModifierAuth",
    "create_default_registry",
    "encode_credential",
]
