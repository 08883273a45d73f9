"""Ordered request-modifier pipeline run before every dispatch.

A *request modifier* is any callable taking the in-flight
:class:`httpx.Request` and the client's :class:`~netauth.configs.Configs`.
It either mutates the request in place and returns ``None``, or returns a
replacement request. Modifiers may raise to abort the dispatch.

:class:`ModifierPipeline` holds modifiers in registration order and is
immutable: :meth:`~ModifierPipeline.register` returns a new pipeline, so
clients derived from a common parent never see each other's modifiers.

The chain follows a pipeline pattern: each modifier receives the output of
the previous one. :meth:`~ModifierPipeline.run` works on a copy of the
caller's request, which lets a transport re-run the pipeline for every
attempt of a retried request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, Optional

import httpx

from netauth.exceptions import ModifierError, NetauthError

if TYPE_CHECKING:
    from netauth.configs import Configs

logger = logging.getLogger(__name__)

RequestModifier = Callable[[httpx.Request, "Configs"], Optional[httpx.Request]]
"""Signature of a pipeline entry."""


def copy_request(request: httpx.Request) -> httpx.Request:
    """Return a copy of *request* with its own headers.

    Already-read bodies are copied as bytes. Streaming bodies are shared with
    the original since they cannot be read without consuming them.
    """
    headers = request.headers.copy()
    extensions = dict(request.extensions)
    try:
        content = request.content
    except httpx.RequestNotRead:
        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=extensions,
        )
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        content=content,
        extensions=extensions,
    )


def _describe(modifier: Callable[..., object]) -> str:
    return getattr(modifier, "__qualname__", None) or repr(modifier)


class ModifierPipeline:
    """Immutable, ordered sequence of request modifiers.

    Args:
        modifiers: Initial modifiers, applied in the given order.

    Example::

        def add_trace(request, configs):
            request.headers["X-Trace-Id"] = "abc"

        pipeline = ModifierPipeline().register(add_trace)
        prepared = pipeline.run(httpx.Request("GET", "https://x"), Configs())
    """

    def __init__(self, modifiers: Iterable[RequestModifier] = ()) -> None:
        self._modifiers: tuple[RequestModifier, ...] = tuple(modifiers)

    def register(self, modifier: RequestModifier) -> ModifierPipeline:
        """Return a new pipeline with *modifier* appended."""
        return ModifierPipeline((*self._modifiers, modifier))

    def run(self, request: httpx.Request, configs: Configs) -> httpx.Request:
        """Apply every modifier, in registration order, to a copy of *request*.

        Args:
            request: The request to prepare. It is not modified.
            configs: The configuration store passed to each modifier.

        Returns:
            The prepared request.

        Raises:
            ModifierError: If a modifier raises a non-netauth exception. The
                original exception is chained as the cause.
            NetauthError: Re-raised unchanged when a modifier raises one.
        """
        current = copy_request(request)
        for modifier in self._modifiers:
            try:
                result = modifier(current, configs)
            except NetauthError:
                raise
            except Exception as exc:
                name = _describe(modifier)
                logger.debug("Request modifier %s failed: %s", name, exc)
                raise ModifierError(
                    f"Request modifier {name} failed: {exc}", modifier=modifier
                ) from exc
            if isinstance(result, httpx.Request):
                current = result
        logger.debug(
            "Prepared %s %s with %d modifier(s)",
            current.method,
            current.url,
            len(self._modifiers),
        )
        return current

    def __len__(self) -> int:
        return len(self._modifiers)

    def __iter__(self) -> Iterator[RequestModifier]:
        return iter(self._modifiers)

    def __repr__(self) -> str:
        return f"ModifierPipeline({len(self._modifiers)} modifier(s))"
