"""Infrastructure layer - Pix server transports and metrics."""

from pix_simulator.infrastructure.fake_server import FakeConnection, FakeServer
from pix_simulator.infrastructure.http_server import HttpConnection, HttpServer


__all__ = [
    "FakeConnection",
    "FakeServer",
    "HttpConnection",
    "HttpServer",
]
