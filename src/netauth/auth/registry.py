"""Auth registry -- maps auth type names to strategy factories.

The :class:`AuthRegistry` turns a declarative
:class:`~netauth.models.AuthConfig` into an
:class:`~netauth.auth.modifier.AuthModifier`. It is what the CLI uses to go
from ``--auth-type bearer --credential tok`` to a strategy, and what library
callers use when auth settings come from a config file or the environment.

For most use cases, call :func:`create_default_registry` to get a registry
pre-loaded with every built-in strategy.
"""

from __future__ import annotations

import logging
from typing import Callable

from netauth.auth.modifier import AuthModifier
from netauth.exceptions import AuthError
from netauth.models import AuthConfig

logger = logging.getLogger(__name__)

AuthFactory = Callable[[AuthConfig], AuthModifier]


class AuthRegistry:
    """Registry of auth strategy factories keyed by type name.

    Example::

        registry = create_default_registry()
        strategy = registry.build(AuthConfig(type="bearer", credential="tok"))
        client = NetworkClient("https://api.example.com").auth(strategy)
    """

    def __init__(self) -> None:
        self._factories: dict[str, AuthFactory] = {}

    def register(self, auth_type: str, factory: AuthFactory) -> None:
        """Register *factory* under *auth_type*.

        A factory already registered under the same name is replaced.
        """
        self._factories[auth_type] = factory

    def build(self, auth_config: AuthConfig) -> AuthModifier:
        """Build the strategy described by *auth_config*.

        Raises:
            AuthError: If no factory is registered for ``auth_config.type``.
        """
        factory = self._factories.get(auth_config.type)
        if factory is None:
            available = ", ".join(self.list_types()) or "(none)"
            raise AuthError(
                f"No auth strategy registered for type '{auth_config.type}'. "
                f"Available types: {available}"
            )
        logger.debug("Building '%s' auth strategy", auth_config.type)
        return factory(auth_config)

    def list_types(self) -> list[str]:
        """Return the registered type names, sorted."""
        return sorted(self._factories)


def create_default_registry() -> AuthRegistry:
    """Create an :class:`AuthRegistry` with the built-in strategies.

    - ``header`` -- raw ``Authorization`` value.
    - ``basic`` -- ``Authorization: Basic <base64>``.
    - ``bearer`` -- ``Authorization: Bearer <base64>``.
    - ``api_key`` -- key in the header named by ``field``.
    """
    registry = AuthRegistry()
    registry.register("header", lambda config: AuthModifier.header(config.credential))
    registry.register("basic", lambda config: AuthModifier.basic(config.credential))
    registry.register("bearer", lambda config: AuthModifier.bearer(config.credential))
    registry.register(
        "api_key", lambda config: AuthModifier.api_key(config.credential, config.field)
    )
    return registry
