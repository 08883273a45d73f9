"""Synchronous client that dispatches prepared requests through :mod:`httpx`.

:class:`NetworkClient` adds blocking dispatch to
:class:`~netauth.client.base.BaseNetworkClient`. Each :meth:`~NetworkClient.send`
runs the full modifier pipeline first and only then hands the prepared
request to an :class:`httpx.Client` configured from the client's
:class:`~netauth.models.RequestConfig`.

See Also:
    :class:`~netauth.client.async_client.AsyncNetworkClient` for the
    non-blocking equivalent.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from netauth.client.base import BaseNetworkClient
from netauth.exceptions import ConnectionError_

logger = logging.getLogger(__name__)


class NetworkClient(BaseNetworkClient):
    """Blocking HTTP client with a configuration store and modifier pipeline.

    Example::

        client = (
            NetworkClient("https://api.example.com")
            .auth(AuthModifier.api_key("k1"))
        )
        response = client.get("/users")
    """

    def _http_client(self) -> httpx.Client:
        config = self._configs.request
        return httpx.Client(
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=config.follow_redirects,
            transport=self._transport,
        )

    def send(self, request: httpx.Request) -> httpx.Response:
        """Prepare *request* through the pipeline and dispatch it.

        In dry-run mode the prepared request is printed to stderr and a
        synthetic 200 response is returned without sending any traffic.

        Args:
            request: The request to send. It is not modified.

        Returns:
            The :class:`httpx.Response` from the server.

        Raises:
            ModifierError: If a request modifier fails.
            ConnectionError_: On network or timeout errors.
        """
        prepared = self.prepare(request)
        if self._configs.dry_run:
            return self._dry_run_response(prepared)

        logger.debug("Sending %s %s", prepared.method, prepared.url)
        try:
            with self._http_client() as http:
                return http.send(prepared)
        except httpx.TransportError as exc:
            raise ConnectionError_(
                f"{prepared.method} {prepared.url} failed: {exc}"
            ) from exc

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Build a request with :meth:`build_request` and :meth:`send` it.

        Args:
            method: HTTP method.
            path: URL path appended to ``base_url``.
            **kwargs: Forwarded to :meth:`build_request` (``params``,
                ``headers``, ``json_body``, ``body``, ``data``).
        """
        return self.send(self.build_request(method, path, **kwargs))

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)
