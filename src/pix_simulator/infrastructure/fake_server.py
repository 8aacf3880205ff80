from dataclasses import dataclass, field

import structlog

from pix_simulator.domain.exceptions import TransportError
from pix_simulator.domain.models import ResponseCode, TransferRequest
from pix_simulator.domain.ports import Connection, ConnectionProvider
from pix_simulator.infrastructure.metrics import PIX_CONNECTIONS_OPENED_TOTAL


logger = structlog.get_logger()


@dataclass
class FakeConnection(Connection):
    """In-process connection that answers every transfer with a fixed response code."""

    response_code: str
    fail_on_send: bool = False
    sent: list[TransferRequest] = field(default_factory=list)
    close_count: int = 0

    def send_transfer(self, amount_cents: int, destination_key: str) -> str:
        self.sent.append(TransferRequest(amount_cents=amount_cents, destination_key=destination_key))
        if self.fail_on_send:
            raise TransportError("send_transfer", "simulated network failure")
        logger.debug("fake_pix_sent", amount_cents=amount_cents, response_code=self.response_code)
        return self.response_code

    def close(self) -> None:
        self.close_count += 1


class FakeServer(ConnectionProvider):
    """Stub Pix server used by the console demo and tests."""

    def __init__(
        self,
        response_code: str = ResponseCode.SUCCESS.value,
        fail_on_open: bool = False,
        fail_on_send: bool = False,
    ) -> None:
        self.response_code = response_code
        self.fail_on_open = fail_on_open
        self.fail_on_send = fail_on_send
        self.connections: list[FakeConnection] = []

    @property
    def opened(self) -> int:
        return len(self.connections)

    def open_connection(self) -> FakeConnection:
        if self.fail_on_open:
            raise TransportError("open_connection", "simulated network failure")

        connection = FakeConnection(response_code=self.response_code, fail_on_send=self.fail_on_send)
        self.connections.append(connection)
        PIX_CONNECTIONS_OPENED_TOTAL.labels(transport="fake").inc()
        return connection
