import httpx
import structlog

from pix_simulator.config import settings
from pix_simulator.domain.exceptions import TransportError
from pix_simulator.domain.ports import Connection, ConnectionProvider
from pix_simulator.infrastructure.metrics import PIX_CONNECTIONS_OPENED_TOTAL


logger = structlog.get_logger()

TRANSFERS_PATH = "/pix/transfers"


class HttpConnection(Connection):
    """Connection to a Pix server speaking JSON over HTTP."""

    def __init__(self, client: httpx.Client) -> None:
        self._client: httpx.Client | None = client

    @property
    def client(self) -> httpx.Client:
        """Get the HTTP client. Raises if the connection was closed."""
        if self._client is None:
            raise RuntimeError("Pix connection is closed.")
        return self._client

    def send_transfer(self, amount_cents: int, destination_key: str) -> str:
        try:
            response = self.client.post(
                TRANSFERS_PATH,
                json={"amount_cents": amount_cents, "destination_key": destination_key},
            )
        except httpx.TransportError as e:
            raise TransportError("send_transfer", str(e)) from e

        if response.is_server_error:
            raise TransportError("send_transfer", f"server answered HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            logger.warning("pix_response_not_json", status_code=response.status_code)
            return ""

        code = body.get("code") if isinstance(body, dict) else None
        if not isinstance(code, str):
            logger.warning("pix_response_without_code", status_code=response.status_code)
            return ""
        return code

    def close(self) -> None:
        if self._client:
            self._client.close()
            self._client = None
            logger.debug("pix_connection_closed")


class HttpServer(ConnectionProvider):
    """Opens HTTP connections to a remote Pix server."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url or settings.pix_server_url
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.pix_server_timeout_seconds
        self._transport = transport

    def open_connection(self) -> HttpConnection:
        client = httpx.Client(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        PIX_CONNECTIONS_OPENED_TOTAL.labels(transport="http").inc()
        logger.debug("pix_connection_opened", base_url=self._base_url)
        return HttpConnection(client)
