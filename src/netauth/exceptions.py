"""Exception hierarchy for netauth.

All exceptions inherit from :class:`NetauthError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`netauth.exit_codes`.
Library callers catch ``NetauthError`` (or a subclass); the console script
in :func:`netauth.app.main` turns it into the matching process exit code.

Subclass hierarchy::

    NetauthError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- AuthError           (exit 3)
    +-- ModifierError       (exit 4)
    +-- ConnectionError_    (exit 6)
    +-- ConfigError         (exit 1)
"""

from netauth.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_MODIFIER_FAILURE,
)


class NetauthError(Exception):
    """Base exception for all netauth errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(NetauthError):
    """Raised for invalid CLI arguments such as a malformed ``--header`` value."""

    exit_code = EXIT_INVALID_USAGE


class AuthError(NetauthError):
    """Raised when an auth strategy cannot be built (e.g. unknown auth type)."""

    exit_code = EXIT_AUTH_FAILURE


class ModifierError(NetauthError):
    """Raised when a request modifier fails while the pipeline runs.

    The original exception is chained as ``__cause__``. The request is not
    dispatched.

    Args:
        message: Human-readable error description.
        modifier: The callable that failed, if known.
    """

    exit_code = EXIT_MODIFIER_FAILURE

    def __init__(self, message: str, modifier: object = None):
        super().__init__(message)
        self.modifier = modifier


class ConnectionError_(NetauthError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(NetauthError):
    """Raised when a configuration value does not match its key's declared type."""

    exit_code = EXIT_GENERIC_FAILURE
