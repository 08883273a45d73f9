"""Tests for AuthRegistry and the AuthConfig model."""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from netauth.auth.modifier import AuthModifier
from netauth.auth.registry import AuthRegistry, create_default_registry
from netauth.exceptions import AuthError
from netauth.models import AuthConfig


def _apply(strategy: AuthModifier) -> httpx.Headers:
    return strategy.apply(httpx.Request("GET", "https://api.example.com/")).headers


class TestAuthConfig:
    def test_defaults(self) -> None:
        config = AuthConfig(type="api_key")
        assert config.credential == ""
        assert config.field == "X-API-Key"

    def test_type_is_required(self) -> None:
        with pytest.raises(ValidationError):
            AuthConfig()  # type: ignore[call-arg]

    def test_is_frozen(self) -> None:
        config = AuthConfig(type="bearer", credential="tok")
        with pytest.raises(ValidationError):
            config.credential = "other"  # type: ignore[misc]


class TestDefaultRegistry:
    def test_list_types(self) -> None:
        assert create_default_registry().list_types() == ["api_key", "basic", "bearer", "header"]

    def test_header(self) -> None:
        strategy = create_default_registry().build(AuthConfig(type="header", credential="X"))
        assert _apply(strategy)["Authorization"] == "X"

    def test_basic(self) -> None:
        strategy = create_default_registry().build(AuthConfig(type="basic", credential="secret"))
        assert _apply(strategy)["Authorization"] == "Basic c2VjcmV0"

    def test_bearer(self) -> None:
        strategy = create_default_registry().build(AuthConfig(type="bearer", credential="tok"))
        assert _apply(strategy)["Authorization"] == "Bearer dG9r"

    def test_api_key_uses_field(self) -> None:
        strategy = create_default_registry().build(
            AuthConfig(type="api_key", credential="k1", field="X-Token")
        )
        assert _apply(strategy)["X-Token"] == "k1"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(AuthError, match="digest") as exc_info:
            create_default_registry().build(AuthConfig(type="digest"))
        assert "api_key, basic, bearer, header" in str(exc_info.value)


class TestCustomRegistry:
    def test_empty_registry_reports_none(self) -> None:
        with pytest.raises(AuthError, match=r"\(none\)"):
            AuthRegistry().build(AuthConfig(type="bearer"))

    def test_register_custom_factory(self) -> None:
        registry = AuthRegistry()
        registry.register(
            "token", lambda config: AuthModifier.header(f"Token {config.credential}")
        )
        strategy = registry.build(AuthConfig(type="token", credential="abc"))
        assert _apply(strategy)["Authorization"] == "Token abc"

    def test_register_replaces_existing(self) -> None:
        registry = create_default_registry()
        registry.register("bearer", lambda config: AuthModifier.header(f"Bearer {config.credential}"))
        strategy = registry.build(AuthConfig(type="bearer", credential="raw"))
        assert _apply(strategy)["Authorization"] == "Bearer raw"
