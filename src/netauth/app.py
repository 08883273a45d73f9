"""Typer application and CLI entry point for netauth.

The ``netauth`` console script sends a single HTTP request through a
:class:`~netauth.client.sync_client.NetworkClient` with an auth strategy
built from command-line options. It is mostly useful for checking which
headers a strategy produces (``--dry-run``) against a real endpoint.

Commands:
    ``send METHOD URL`` -- send one request and print the response.
    ``auth-types`` -- list the strategies known to the default registry.

:func:`main` is the console-script entry point declared in
``pyproject.toml``. It maps :class:`~netauth.exceptions.NetauthError` to
the error's ``exit_code``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from netauth import __version__
from netauth.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="netauth",
    help="Send HTTP requests through a pluggable auth pipeline.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"netauth {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Initialise the global output manager and logging from CLI flags."""
    from netauth.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _parse_headers(values: list[str]) -> dict[str, str]:
    """Turn ``["Name: value", ...]`` into a header dict."""
    from netauth.exceptions import InvalidUsageError

    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            raise InvalidUsageError(f"Invalid header '{raw}': expected 'Name: value'")
        headers[name.strip()] = value.strip()
    return headers


@app.command("send")
def send_command(
    method: str = typer.Argument(..., help="HTTP method, e.g. GET or POST."),
    url: str = typer.Argument(..., help="Absolute request URL."),
    auth_type: Optional[str] = typer.Option(
        None, "--auth-type", "-a", help="Auth strategy: header, basic, bearer, api_key."
    ),
    credential: str = typer.Option(
        "",
        "--credential",
        "-c",
        envvar="NETAUTH_CREDENTIAL",
        help="Value sent by the auth strategy.",
    ),
    field: str = typer.Option(
        "X-API-Key", "--field", help="Header name for the api_key strategy."
    ),
    no_auth: bool = typer.Option(
        False,
        "--no-auth",
        help="Register the strategy but leave auth disabled. Requires --auth-type.",
    ),
    header: Optional[list[str]] = typer.Option(
        None, "--header", "-H", help="Extra header as 'Name: value'. Repeatable."
    ),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Raw request body."),
    timeout: float = typer.Option(30, "--timeout", help="Request timeout in seconds."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the prepared request without sending it."
    ),
) -> None:
    """Send one request and print the response."""
    from netauth.auth import create_default_registry
    from netauth.client import NetworkClient
    from netauth.client.response import format_api_response
    from netauth.configs import DRY_RUN, REQUEST
    from netauth.exceptions import InvalidUsageError
    from netauth.models import AuthConfig, RequestConfig
    from netauth.output import debug

    if no_auth and not auth_type:
        raise InvalidUsageError("--no-auth requires --auth-type")

    client = (
        NetworkClient()
        .configs(REQUEST, RequestConfig(timeout=timeout))
        .configs(DRY_RUN, dry_run)
    )
    if auth_type:
        strategy = create_default_registry().build(
            AuthConfig(type=auth_type, credential=credential, field=field)
        )
        client = client.auth(strategy)
        if no_auth:
            client = client.disable_auth()
        debug(f"Auth strategy '{auth_type}' registered (enabled={client.is_auth_enabled})")

    response = client.request(method, url, headers=_parse_headers(header or []), body=data)
    format_api_response(response)


@app.command("auth-types")
def auth_types_command() -> None:
    """List the available auth strategies."""
    from netauth.auth import create_default_registry
    from netauth.output import print_data

    for name in create_default_registry().list_types():
        print_data(name)


def main() -> None:
    """CLI entry point invoked by the ``netauth`` console script.

    :class:`~netauth.exceptions.NetauthError` instances exit with the
    error's ``exit_code``; any other exception is reported and exits with
    :data:`~netauth.exit_codes.EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from netauth.exceptions import NetauthError
        from netauth.output import error

        if isinstance(exc, NetauthError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
