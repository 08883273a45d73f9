"""Tests for the synchronous NetworkClient."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Callable

import httpx
import pytest

from netauth.auth import AuthModifier
from netauth.client import NetworkClient
from netauth.configs import DRY_RUN, REQUEST, Configs
from netauth.exceptions import ConnectionError_, ModifierError
from netauth.models import RequestConfig

if TYPE_CHECKING:
    from conftest import RecordingTransport


def _client(recorder: RecordingTransport) -> NetworkClient:
    return NetworkClient("https://api.example.com", transport=recorder.transport)


class TestSend:
    def test_get_reaches_transport(self, recorder: RecordingTransport) -> None:
        response = _client(recorder).get("/users")
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert str(recorder.last.url) == "https://api.example.com/users"

    def test_auth_header_is_sent(self, recorder: RecordingTransport) -> None:
        _client(recorder).auth(AuthModifier.api_key("k1", field="X-Token")).get("/me")
        assert recorder.last.headers["X-Token"] == "k1"

    def test_disabled_auth_sends_no_header(self, recorder: RecordingTransport) -> None:
        _client(recorder).auth(AuthModifier.header("X")).disable_auth().get("/me")
        assert "Authorization" not in recorder.last.headers

    def test_caller_headers_are_kept(self, recorder: RecordingTransport) -> None:
        _client(recorder).auth(AuthModifier.bearer("tok")).get(
            "/me", headers={"X-Custom": "value"}
        )
        assert recorder.last.headers["X-Custom"] == "value"
        assert recorder.last.headers["Authorization"] == "Bearer dG9r"

    def test_post_json(self, recorder: RecordingTransport) -> None:
        _client(recorder).post("/items", json_body={"name": "test"})
        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == {"name": "test"}

    @pytest.mark.parametrize("method", ["put", "patch", "delete"])
    def test_other_verbs(self, recorder: RecordingTransport, method: str) -> None:
        getattr(_client(recorder), method)("/items/1")
        assert recorder.last.method == method.upper()

    def test_send_prebuilt_request(self, recorder: RecordingTransport) -> None:
        client = NetworkClient(transport=recorder.transport).auth(AuthModifier.header("X"))
        original = httpx.Request("GET", "https://api.example.com/raw")
        client.send(original)
        assert recorder.last.headers["Authorization"] == "X"
        assert "Authorization" not in original.headers

    def test_error_status_is_returned_not_raised(
        self, make_recorder: Callable[..., RecordingTransport]
    ) -> None:
        recorder = make_recorder(lambda request: httpx.Response(500, text="down"))
        response = _client(recorder).get("/users")
        assert response.status_code == 500

    def test_request_config_timeout_is_applied(self, recorder: RecordingTransport) -> None:
        client = _client(recorder).configs(REQUEST, RequestConfig(timeout=2.5))
        client.get("/users")
        assert recorder.last.extensions["timeout"]["read"] == 2.5


class TestModifierFailure:
    def test_nothing_is_dispatched(self, recorder: RecordingTransport) -> None:
        def broken(request: httpx.Request, configs: Configs) -> None:
            raise RuntimeError("boom")

        with pytest.raises(ModifierError):
            _client(recorder).modify_request(broken).get("/users")
        assert recorder.requests == []


class TestRetriedDispatch:
    def test_each_send_reruns_pipeline(self, recorder: RecordingTransport) -> None:
        calls: list[int] = []

        def count(request: httpx.Request, configs: Configs) -> None:
            calls.append(1)
            request.headers["X-Attempt"] = str(len(calls))

        client = _client(recorder).auth(AuthModifier.header("X")).modify_request(count)
        request = client.build_request("GET", "/users")
        client.send(request)
        client.send(request)

        assert len(calls) == 2
        assert [r.headers.get_list("Authorization") for r in recorder.requests] == [["X"], ["X"]]
        assert "Authorization" not in request.headers


class TestConnectionErrors:
    def test_transport_error_maps_to_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = NetworkClient(
            "https://api.example.com", transport=httpx.MockTransport(handler)
        )
        with pytest.raises(ConnectionError_, match="refused") as exc_info:
            client.get("/users")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_maps_to_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        client = NetworkClient(
            "https://api.example.com", transport=httpx.MockTransport(handler)
        )
        with pytest.raises(ConnectionError_):
            client.get("/users")


class TestDryRun:
    def test_returns_synthetic_response(
        self, recorder: RecordingTransport, quiet_output: object
    ) -> None:
        client = _client(recorder).configs(DRY_RUN, True)
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json()["dry_run"] is True
        assert recorder.requests == []

    def test_prints_prepared_request(
        self, recorder: RecordingTransport, plain_output: object, capsys: pytest.CaptureFixture[str]
    ) -> None:
        client = _client(recorder).auth(AuthModifier.header("X")).configs(DRY_RUN, True)
        client.post("/items", body="payload")
        err = capsys.readouterr().err
        assert "[dry-run] POST https://api.example.com/items" in err
        assert "Header: authorization: ***" in err
        assert "Body: payload" in err
