"""Asynchronous client -- mirrors :class:`~netauth.client.sync_client.NetworkClient`.

:class:`AsyncNetworkClient` shares every combinator with the blocking client.
Only dispatch awaits: the modifier pipeline still runs synchronously and
completes before the prepared request is handed to
:class:`httpx.AsyncClient`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from netauth.client.base import BaseNetworkClient
from netauth.exceptions import ConnectionError_

logger = logging.getLogger(__name__)


class AsyncNetworkClient(BaseNetworkClient):
    """Non-blocking HTTP client with a configuration store and modifier pipeline.

    The ``transport`` given to the constructor must be an async transport
    (e.g. :class:`httpx.AsyncHTTPTransport` or :class:`httpx.MockTransport`).

    Example::

        client = AsyncNetworkClient("https://api.example.com").auth(
            AuthModifier.bearer("tok")
        )
        response = await client.get("/me")
    """

    def _http_client(self) -> httpx.AsyncClient:
        config = self._configs.request
        return httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=config.follow_redirects,
            transport=self._transport,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Prepare *request* through the pipeline and dispatch it.

        Raises:
            ModifierError: If a request modifier fails.
            ConnectionError_: On network or timeout errors.
        """
        prepared = self.prepare(request)
        if self._configs.dry_run:
            return self._dry_run_response(prepared)

        logger.debug("Sending %s %s", prepared.method, prepared.url)
        try:
            async with self._http_client() as http:
                return await http.send(prepared)
        except httpx.TransportError as exc:
            raise ConnectionError_(
                f"{prepared.method} {prepared.url} failed: {exc}"
            ) from exc

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Build a request with :meth:`build_request` and :meth:`send` it."""
        return await self.send(self.build_request(method, path, **kwargs))

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)
