"""Immutable client values with configuration and request-modifier combinators.

:class:`BaseNetworkClient` holds a :class:`~netauth.configs.Configs` store and
a :class:`~netauth.pipeline.ModifierPipeline`. Every combinator --
:meth:`~BaseNetworkClient.configs`, :meth:`~BaseNetworkClient.modify_request`,
:meth:`~BaseNetworkClient.auth`, :meth:`~BaseNetworkClient.enable_auth`,
:meth:`~BaseNetworkClient.disable_auth` -- returns a *new* client of the same
class and leaves the receiver untouched, so clients composed from a common
parent never interfere::

    base = NetworkClient("https://api.example.com")
    authed = base.auth(AuthModifier.bearer("tok"))
    paused = authed.disable_auth()   # authed still sends the header

Auth is just another request modifier. :meth:`~BaseNetworkClient.auth`
registers an entry that reads ``is_auth_enabled`` at dispatch time, so a
strategy stays registered while disabled and comes back with
:meth:`~BaseNetworkClient.enable_auth`.

The dispatching subclasses live in :mod:`netauth.client.sync_client` and
:mod:`netauth.client.async_client`.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Optional, TypeVar

import httpx

from netauth.auth.modifier import AuthModifier
from netauth.configs import AUTH_ENABLED, BASE_URL, ConfigKey, Configs
from netauth.output import get_output
from netauth.pipeline import ModifierPipeline, RequestModifier


T = TypeVar("T")
ClientT = TypeVar("ClientT", bound="BaseNetworkClient")

_SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie"})
_SENSITIVE_MARKERS = ("auth", "key", "token", "secret")


def merge_url(base_url: str, path: str) -> httpx.URL:
    """Join *path* onto *base_url* the way ``httpx.Client(base_url=...)`` does.

    The base path is kept and treated as a directory, so ``"users"`` and
    ``"/users"`` both land under it. Absolute URLs are returned unchanged.
    """
    url = httpx.URL(path)
    if not base_url or url.is_absolute_url:
        return url
    base = httpx.URL(base_url)
    base_path = base.raw_path if base.raw_path.endswith(b"/") else base.raw_path + b"/"
    return base.copy_with(raw_path=base_path + url.raw_path.lstrip(b"/"))


def mask_header(name: str, value: str) -> str:
    """Return *value* with credentials hidden, for display only.

    ``Authorization``-style values keep their scheme (``Bearer ***``).
    """
    lowered = name.lower()
    if lowered not in _SENSITIVE_HEADERS and not any(
        marker in lowered for marker in _SENSITIVE_MARKERS
    ):
        return value
    scheme, sep, _ = value.partition(" ")
    return f"{scheme} ***" if sep else "***"


class BaseNetworkClient:
    """Configuration store plus modifier pipeline, composed by value.

    Args:
        base_url: Prefix joined to request paths. Stored under
            :data:`~netauth.configs.BASE_URL`.
        configs: Initial configuration. Copied, never shared.
        pipeline: Initial modifier pipeline.
        transport: Optional :mod:`httpx` transport used for dispatch (for
            example :class:`httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        configs: Optional[Configs] = None,
        pipeline: Optional[ModifierPipeline] = None,
        transport: Any = None,
    ) -> None:
        self._configs = configs.copy() if configs is not None else Configs()
        if base_url:
            self._configs.set(BASE_URL, base_url)
        self._pipeline = pipeline if pipeline is not None else ModifierPipeline()
        self._transport = transport

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._configs.base_url!r}, "
            f"auth_enabled={self._configs.is_auth_enabled}, "
            f"modifiers={len(self._pipeline)})"
        )

    # ------------------------------------------------------------------ #
    # Read access
    # ------------------------------------------------------------------ #

    @property
    def pipeline(self) -> ModifierPipeline:
        return self._pipeline

    @property
    def is_auth_enabled(self) -> bool:
        """Whether strategies registered with :meth:`auth` are applied."""
        return self._configs.is_auth_enabled

    def get_config(self, key: ConfigKey[T]) -> T:
        """Return this client's value for *key* (or the key's default)."""
        return self._configs.get(key)

    # ------------------------------------------------------------------ #
    # Combinators
    # ------------------------------------------------------------------ #

    def _derive(
        self: ClientT,
        configs: Optional[Configs] = None,
        pipeline: Optional[ModifierPipeline] = None,
    ) -> ClientT:
        clone = copy.copy(self)
        clone._configs = configs if configs is not None else self._configs.copy()
        clone._pipeline = pipeline if pipeline is not None else self._pipeline
        return clone

    def configs(self: ClientT, key: ConfigKey[T], value: T) -> ClientT:
        """Return a new client with *key* set to *value*.

        Raises:
            ConfigError: If *value* does not match the key's declared type.
        """
        return self._derive(configs=self._configs.with_value(key, value))

    def modify_request(self: ClientT, modifier: RequestModifier) -> ClientT:
        """Return a new client with *modifier* appended to the pipeline.

        Modifiers run in registration order before every dispatch. See
        :mod:`netauth.pipeline` for the modifier contract.
        """
        return self._derive(pipeline=self._pipeline.register(modifier))

    def auth(self: ClientT, auth_modifier: AuthModifier) -> ClientT:
        """Return a new client that applies *auth_modifier* while auth is enabled.

        Enables auth and registers a modifier that checks
        ``configs.is_auth_enabled`` on every dispatch. Only the strategy's
        function is kept by the pipeline entry.

        Args:
            auth_modifier: The strategy to apply, e.g.
                ``AuthModifier.api_key("k1")``.
        """
        strategy = auth_modifier.modifier

        def apply_auth(request: httpx.Request, configs: Configs) -> Optional[httpx.Request]:
            if configs.is_auth_enabled:
                return strategy(request)
            return None

        return self.enable_auth().modify_request(apply_auth)

    def disable_auth(self: ClientT) -> ClientT:
        """Return a new client with auth switched off. Same as ``enable_auth(False)``."""
        return self.enable_auth(False)

    def enable_auth(self: ClientT, enabled: bool = True) -> ClientT:
        """Return a new client with :data:`~netauth.configs.AUTH_ENABLED` set to *enabled*."""
        return self.configs(AUTH_ENABLED, enabled)

    # ------------------------------------------------------------------ #
    # Request preparation
    # ------------------------------------------------------------------ #

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        json_body: Optional[Any] = None,
        body: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> httpx.Request:
        """Build an unprepared :class:`httpx.Request` against ``base_url``.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            path: URL path appended to the path of ``base_url`` (with or
                without a leading slash), or an absolute URL, which is used
                unchanged.
            params: Query parameters.
            headers: Request headers.
            json_body: JSON-serialisable body.
            body: Raw string body.
            data: Form-encoded body. Takes precedence over the other bodies.
        """
        url = merge_url(self._configs.base_url, path)
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if data is not None:
            kwargs["data"] = data
        elif json_body is not None:
            kwargs["json"] = json_body
        elif body is not None:
            kwargs["content"] = body
        return httpx.Request(method.upper(), url, **kwargs)

    def prepare(self, request: httpx.Request) -> httpx.Request:
        """Run the modifier pipeline against a copy of *request*.

        Raises:
            ModifierError: If a modifier fails. Nothing is dispatched.
        """
        return self._pipeline.run(request, self._configs)

    def _dry_run_response(self, request: httpx.Request) -> httpx.Response:
        """Print *request* to stderr and return a synthetic 200 response.

        Credential-bearing header values are masked with :func:`mask_header`.
        """
        output = get_output()
        output.info(f"[dry-run] {request.method} {request.url}")
        for key, value in request.headers.items():
            output.info(f"  Header: {key}: {mask_header(key, value)}")
        try:
            content = request.content
        except httpx.RequestNotRead:
            output.info("  Body: <stream>")
        else:
            if content:
                output.info(f"  Body: {content.decode('utf-8', errors='replace')}")
        return httpx.Response(
            status_code=200,
            headers={"content-type": "application/json"},
            content=json.dumps({"dry_run": True, "message": "Request was not sent"}),
            request=request,
        )
