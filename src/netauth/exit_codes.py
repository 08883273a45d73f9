"""Numeric process exit codes used by the ``netauth`` console script.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~netauth.exceptions.NetauthError` subclass.
Shell wrappers can inspect the exit code to tell a rejected auth
configuration apart from a network failure without parsing stderr.

Example::

    $ netauth send GET https://api.example.com --auth-type digest
    $ echo $?
    3   # EXIT_AUTH_FAILURE -- unknown auth strategy
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_AUTH_FAILURE = 3
"""An auth strategy could not be built from the given configuration."""

EXIT_MODIFIER_FAILURE = 4
"""A request modifier raised while the request was being prepared."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""
