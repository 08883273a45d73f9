"""Typed, per-client configuration store.

A :class:`Configs` instance maps :class:`ConfigKey` tokens to values of
different types. Keys carry their own default, so looking up an option that
was never set returns that default instead of raising. Lookups are typed
through the key (``Configs.get(AUTH_ENABLED)`` is a ``bool``), which keeps
callers away from string-keyed dictionaries.

The built-in keys are:

* :data:`AUTH_ENABLED` -- gates every strategy registered through
  :meth:`~netauth.client.base.BaseNetworkClient.auth`.
* :data:`DRY_RUN` -- print prepared requests instead of sending them.
* :data:`BASE_URL` -- prefix joined to request paths.
* :data:`REQUEST` -- :class:`~netauth.models.RequestConfig` transport settings.

A store belongs to exactly one client. Clients derive new stores with
:meth:`Configs.with_value`, so a store is written only while it is being
built and read concurrently afterwards.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from netauth.exceptions import ConfigError
from netauth.models import RequestConfig

T = TypeVar("T")

_MISSING: Any = object()


class ConfigKey(Generic[T]):
    """Typed identifier for one configuration option.

    Keys compare by identity: two keys created with the same *name* are
    different options. The *name* is only used for display.

    Args:
        name: Display name of the option.
        default: Value returned when the option is not set.
        default_factory: Callable producing the default, for mutable or
            model defaults. Mutually exclusive with *default*.
        value_type: If given, :meth:`Configs.set` rejects values that are
            not instances of this type.
    """

    __slots__ = ("name", "_default", "_default_factory", "value_type")

    def __init__(
        self,
        name: str,
        default: Any = _MISSING,
        *,
        default_factory: Optional[Callable[[], T]] = None,
        value_type: Optional[type] = None,
    ) -> None:
        if default is not _MISSING and default_factory is not None:
            raise ValueError("Pass either 'default' or 'default_factory', not both")
        self.name = name
        self._default = None if default is _MISSING else default
        self._default_factory = default_factory
        self.value_type = value_type

    def default_value(self) -> T:
        """Return the declared default for this option."""
        if self._default_factory is not None:
            return self._default_factory()
        return self._default

    def validate(self, value: Any) -> T:
        """Check *value* against :attr:`value_type` and return it unchanged.

        Raises:
            ConfigError: If the value has the wrong type.
        """
        if self.value_type is not None and not isinstance(value, self.value_type):
            raise ConfigError(
                f"Config '{self.name}' expects {self.value_type.__name__}, "
                f"got {type(value).__name__}"
            )
        return value

    def __repr__(self) -> str:
        return f"ConfigKey({self.name!r})"


AUTH_ENABLED: ConfigKey[bool] = ConfigKey("is_auth_enabled", False, value_type=bool)
DRY_RUN: ConfigKey[bool] = ConfigKey("dry_run", False, value_type=bool)
BASE_URL: ConfigKey[str] = ConfigKey("base_url", "", value_type=str)
REQUEST: ConfigKey[RequestConfig] = ConfigKey(
    "request", default_factory=RequestConfig, value_type=RequestConfig
)


class Configs:
    """Mutable map from :class:`ConfigKey` to value with per-key defaults.

    Args:
        values: Optional initial ``{key: value}`` mapping. Each value is
            validated against its key.

    Example::

        configs = Configs()
        assert configs.is_auth_enabled is False
        configs.is_auth_enabled = True
        assert configs.get(AUTH_ENABLED) is True
    """

    def __init__(self, values: Optional[dict[ConfigKey[Any], Any]] = None) -> None:
        self._values: dict[ConfigKey[Any], Any] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def get(self, key: ConfigKey[T]) -> T:
        """Return the value stored for *key*, or the key's default."""
        if key in self._values:
            return self._values[key]
        return key.default_value()

    def set(self, key: ConfigKey[T], value: T) -> None:
        """Store *value* under *key*.

        Raises:
            ConfigError: If *value* does not match the key's ``value_type``.
        """
        self._values[key] = key.validate(value)

    def copy(self) -> Configs:
        """Return an independent copy of this store."""
        clone = Configs()
        clone._values = dict(self._values)
        return clone

    def with_value(self, key: ConfigKey[T], value: T) -> Configs:
        """Return a copy of this store with *key* set to *value*."""
        clone = self.copy()
        clone.set(key, value)
        return clone

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{key.name}={value!r}" for key, value in self._values.items())
        return f"Configs({items})"

    # ------------------------------------------------------------------ #
    # Typed accessors
    # ------------------------------------------------------------------ #

    @property
    def is_auth_enabled(self) -> bool:
        """Whether registered auth strategies are applied. Defaults to ``False``."""
        return self.get(AUTH_ENABLED)

    @is_auth_enabled.setter
    def is_auth_enabled(self, value: bool) -> None:
        self.set(AUTH_ENABLED, value)

    @property
    def dry_run(self) -> bool:
        """Whether requests are printed instead of sent."""
        return self.get(DRY_RUN)

    @dry_run.setter
    def dry_run(self, value: bool) -> None:
        self.set(DRY_RUN, value)

    @property
    def base_url(self) -> str:
        return self.get(BASE_URL)

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.set(BASE_URL, value)

    @property
    def request(self) -> RequestConfig:
        return self.get(REQUEST)

    @request.setter
    def request(self, value: RequestConfig) -> None:
        self.set(REQUEST, value)
