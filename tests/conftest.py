"""Shared pytest fixtures for Pix simulator tests."""

from unittest.mock import MagicMock

import pytest

from pix_simulator.application.processor import TransferProcessor
from pix_simulator.domain.models import ResponseCode
from pix_simulator.domain.ports import ConnectionProvider
from pix_simulator.infrastructure.fake_server import FakeConnection, FakeServer


@pytest.fixture
def fake_server() -> FakeServer:
    """Create fake server that confirms every transfer."""
    return FakeServer(response_code=ResponseCode.SUCCESS.value)


@pytest.fixture
def processor(fake_server: FakeServer) -> TransferProcessor:
    """Create TransferProcessor backed by the fake server."""
    return TransferProcessor(fake_server)


@pytest.fixture
def mock_server() -> MagicMock:
    """Create mock ConnectionProvider that must never be contacted."""
    return MagicMock(spec=ConnectionProvider)


def create_server(response_code: str, fail_on_open: bool = False, fail_on_send: bool = False) -> FakeServer:
    """Helper to create FakeServer with custom behaviour."""
    return FakeServer(
        response_code=response_code,
        fail_on_open=fail_on_open,
        fail_on_send=fail_on_send,
    )


def only_connection(server: FakeServer) -> FakeConnection:
    """Helper returning the single connection a server handed out."""
    assert server.opened == 1
    return server.connections[0]
