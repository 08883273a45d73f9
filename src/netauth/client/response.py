"""Response display helpers -- map :class:`httpx.Response` to the output system.

Used by the ``netauth send`` command. The status line and, in verbose mode,
the response headers go to stderr; the body goes to stdout through
:meth:`~netauth.output.OutputManager.format_response`.
"""

from __future__ import annotations

from typing import Any

import httpx

from netauth.output import get_output


def format_api_response(response: httpx.Response) -> None:
    """Print *response* using the global output manager."""
    output = get_output()
    output.info(f"HTTP {response.status_code} {response.reason_phrase or ''}".rstrip())
    for key, value in response.headers.items():
        output.debug(f"< {key}: {value}")

    data = extract_response_data(response)
    if data is not None:
        output.format_response(data, response.headers.get("content-type", "application/json"))


def extract_response_data(response: httpx.Response) -> Any:
    """Return the decoded JSON body, the raw text, or ``None`` for an empty body."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
