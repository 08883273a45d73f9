"""Auth strategies as request modifiers.

An :class:`AuthModifier` wraps exactly one function that mutates an outgoing
:class:`httpx.Request`. The named constructors build the common schemes:

- :meth:`AuthModifier.header` -- ``Authorization: <value>`` verbatim.
- :meth:`AuthModifier.basic` -- ``Authorization: Basic <base64(password)>``.
- :meth:`AuthModifier.bearer` -- ``Authorization: Bearer <base64(token)>``.
- :meth:`AuthModifier.api_key` -- ``<field>: <key>``, unencoded.

Strategies are wired into a client with
:meth:`~netauth.client.base.BaseNetworkClient.auth`. They can also be used
with a plain :class:`httpx.Client` through :meth:`AuthModifier.as_httpx_auth`.

Note:
    ``basic`` and ``bearer`` encode the single string they are given. This
    differs from :rfc:`7617` (which encodes ``username:password``) and from
    the usual bearer usage (raw token), and is kept for compatibility with
    existing servers. Pass ``"user:pass"`` to ``basic`` for RFC behaviour.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Callable, Generator, Optional

import httpx

from netauth.models import DEFAULT_API_KEY_FIELD

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"


def encode_credential(value: str) -> str:
    """Base64-encode the UTF-8 bytes of *value*.

    A string that cannot be encoded as UTF-8 (for example one holding lone
    surrogates) yields an empty string rather than an error, so the request
    still goes out with an empty credential.

    Args:
        value: The credential to encode.

    Returns:
        The ASCII base64 text, or ``""`` if *value* is not encodable.
    """
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Credential is not UTF-8 encodable; sending an empty value")
        return ""
    return base64.b64encode(raw).decode("ascii")


def _set_header(name: str, value: str) -> Callable[[httpx.Request], None]:
    def modify(request: httpx.Request) -> None:
        request.headers[name] = value

    modify.__qualname__ = f"set_header({name!r})"
    return modify


@dataclass(frozen=True)
class AuthModifier:
    """Immutable auth strategy holding a single request-mutation function.

    The function either mutates the request in place and returns ``None``,
    or returns a replacement request. Custom strategies can be built by
    passing any such callable.

    Example::

        client = NetworkClient("https://api.example.com").auth(
            AuthModifier.api_key("k1", field="X-Token")
        )
    """

    modifier: Callable[[httpx.Request], Optional[httpx.Request]]

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Run the wrapped function against *request* and return the result."""
        result = self.modifier(request)
        if isinstance(result, httpx.Request):
            return result
        return request

    def as_httpx_auth(self) -> ModifierAuth:
        """Return an :class:`httpx.Auth` that applies this strategy."""
        return ModifierAuth(self)

    # ------------------------------------------------------------------ #
    # Named constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def header(cls, value: str) -> AuthModifier:
        """Set ``Authorization`` to *value* exactly as given."""
        return cls(_set_header(AUTHORIZATION, value))

    @classmethod
    def basic(cls, password: str) -> AuthModifier:
        """Basic authentication.

        Sends ``Authorization: Basic <base64(password)>``. Only *password* is
        encoded; no username or colon is added.

        Args:
            password: The string to encode, e.g. ``"p@55w0rd"`` or
                ``"demo:p@55w0rd"``.
        """
        return cls.header(f"Basic {encode_credential(password)}")

    @classmethod
    def api_key(cls, key: str, field: str = DEFAULT_API_KEY_FIELD) -> AuthModifier:
        """An API key sent unencoded in the header named *field*."""
        return cls(_set_header(field, key))

    @classmethod
    def bearer(cls, password: str) -> AuthModifier:
        """Bearer (token) authentication.

        Sends ``Authorization: Bearer <base64(password)>``. The token is
        base64-encoded before sending; a token that is already base64 is
        encoded a second time.

        Args:
            password: The token issued by the server.
        """
        return cls.header(f"Bearer {encode_credential(password)}")


class ModifierAuth(httpx.Auth):
    """:class:`httpx.Auth` adapter around an :class:`AuthModifier`.

    Example::

        auth = AuthModifier.bearer("tok").as_httpx_auth()
        with httpx.Client(auth=auth) as client:
            client.get("https://api.example.com/me")
    """

    def __init__(self, auth_modifier: AuthModifier) -> None:
        self._auth_modifier = auth_modifier

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield self._auth_modifier.apply(request)
