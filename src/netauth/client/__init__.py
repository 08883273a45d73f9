"""HTTP clients for netauth.

Clients are immutable values built from a configuration store and a
request-modifier pipeline. Combinators such as ``auth``, ``enable_auth`` and
``modify_request`` return new clients; dispatch goes through :mod:`httpx`.

Classes:
    :class:`BaseNetworkClient` -- combinators and request preparation.
    :class:`NetworkClient` -- blocking dispatch via :class:`httpx.Client`.
    :class:`AsyncNetworkClient` -- non-blocking dispatch via
    :class:`httpx.AsyncClient`.

Example::

    from netauth.auth import AuthModifier
    from netauth.client import NetworkClient

    client = NetworkClient("https://api.example.com").auth(AuthModifier.bearer("tok"))
    resp = client.get("/users")
"""

from netauth.client.async_client import AsyncNetworkClient
from netauth.client.base import BaseNetworkClient
from netauth.client.sync_client import NetworkClient

__all__ = ["AsyncNetworkClient", "BaseNetworkClient", "NetworkClient"]
