"""Unit tests for the HTTP transport."""

import json
from unittest.mock import patch

import httpx
import pytest

from pix_simulator.domain.exceptions import TransportError
from pix_simulator.infrastructure.http_server import TRANSFERS_PATH, HttpConnection, HttpServer


def _server(handler: httpx.MockTransport) -> HttpServer:
    return HttpServer(base_url="http://pix.test", timeout_seconds=1.0, transport=handler)


def _replying(status_code: int = 200, **reply: object) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **reply)  # type: ignore[arg-type]

    return httpx.MockTransport(handler)


class TestHttpServer:
    """Tests for HttpServer."""

    def test_init_with_default_settings(self) -> None:
        with patch("pix_simulator.infrastructure.http_server.settings") as mock_settings:
            mock_settings.pix_server_url = "http://settings-host:9000"
            mock_settings.pix_server_timeout_seconds = 2.5

            server = HttpServer()

            assert server._base_url == "http://settings-host:9000"
            assert server._timeout == 2.5

    def test_init_with_custom_values(self) -> None:
        server = HttpServer(base_url="http://custom:1234", timeout_seconds=0.5)

        assert server._base_url == "http://custom:1234"
        assert server._timeout == 0.5

    def test_open_connection_returns_http_connection(self) -> None:
        connection = _server(_replying(json={"code": "SUCCESS"})).open_connection()

        try:
            assert isinstance(connection, HttpConnection)
            assert connection.client.base_url.host == "pix.test"
        finally:
            connection.close()


class TestHttpConnection:
    """Tests for HttpConnection.send_transfer."""

    def test_posts_transfer_payload(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"code": "SUCCESS"})

        with _server(httpx.MockTransport(handler)).open_connection() as connection:
            code = connection.send_transfer(2000, "abc123")

        assert code == "SUCCESS"
        assert captured[0].method == "POST"
        assert captured[0].url.path == TRANSFERS_PATH
        assert json.loads(captured[0].content) == {"amount_cents": 2000, "destination_key": "abc123"}

    @pytest.mark.parametrize("code", ["SUCCESS", "INSUFFICIENT_BALANCE", "KEY_NOT_FOUND", "XYZ"])
    def test_returns_raw_code(self, code: str) -> None:
        with _server(_replying(json={"code": code})).open_connection() as connection:
            assert connection.send_transfer(100, "key") == code

    def test_client_error_body_is_still_read(self) -> None:
        with _server(_replying(404, json={"code": "KEY_NOT_FOUND"})).open_connection() as connection:
            assert connection.send_transfer(100, "key") == "KEY_NOT_FOUND"

    @pytest.mark.parametrize(
        "reply",
        [
            {"json": {"status": "ok"}},
            {"json": {"code": 42}},
            {"json": ["SUCCESS"]},
            {"text": "not json"},
        ],
    )
    def test_missing_code_returns_empty(self, reply: dict[str, object]) -> None:
        with _server(_replying(**reply)).open_connection() as connection:
            assert connection.send_transfer(100, "key") == ""

    def test_server_error_raises_transport_error(self) -> None:
        with _server(_replying(503, text="unavailable")).open_connection() as connection:
            with pytest.raises(TransportError, match="HTTP 503"):
                connection.send_transfer(100, "key")

    def test_network_failure_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _server(httpx.MockTransport(handler)).open_connection() as connection:
            with pytest.raises(TransportError, match="connection refused") as exc_info:
                connection.send_transfer(100, "key")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_timeout_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with _server(httpx.MockTransport(handler)).open_connection() as connection:
            with pytest.raises(TransportError):
                connection.send_transfer(100, "key")


class TestHttpConnectionLifecycle:
    def test_close_releases_client(self) -> None:
        connection = _server(_replying(json={"code": "SUCCESS"})).open_connection()
        client = connection.client

        connection.close()

        assert client.is_closed
        with pytest.raises(RuntimeError, match="Pix connection is closed"):
            _ = connection.client

    def test_close_twice_is_harmless(self) -> None:
        connection = _server(_replying(json={"code": "SUCCESS"})).open_connection()

        connection.close()
        connection.close()

        assert connection._client is None
