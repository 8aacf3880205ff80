from pix_simulator.domain.models import (
    ResponseCode,
    TransferErrorCode,
    TransferOutcome,
)
from pix_simulator.domain.ports import ConnectionProvider


_RESPONSE_OUTCOMES: dict[str, TransferOutcome] = {
    ResponseCode.SUCCESS.value: TransferOutcome.succeeded(),
    ResponseCode.INSUFFICIENT_BALANCE.value: TransferOutcome.failed(TransferErrorCode.INSUFFICIENT_BALANCE),
    ResponseCode.KEY_NOT_FOUND.value: TransferOutcome.failed(TransferErrorCode.KEY_NOT_FOUND),
}


class TransferProcessor:
    """Business logic for confirming a Pix transfer, free of any user interaction."""

    def __init__(self, server: ConnectionProvider) -> None:
        self.server = server

    def execute_transfer(self, amount_cents: int, destination_key: str | None) -> TransferOutcome:
        """Validate the request, send it over a fresh connection and map the reply.

        Input is checked before the server is contacted: a non-positive amount wins
        over a blank key. The connection is released on every exit path, and a
        failing release never changes the outcome. Failures to open or send come back
        as CONNECTION_ERROR, never as a business outcome.
        """
        if amount_cents <= 0:
            return TransferOutcome.failed(TransferErrorCode.NON_POSITIVE_AMOUNT)
        if destination_key is None or not destination_key.strip():
            return TransferOutcome.failed(TransferErrorCode.BLANK_KEY)

        try:
            connection = self.server.open_connection()
        except OSError:
            return TransferOutcome.failed(TransferErrorCode.CONNECTION_ERROR)

        with connection:
            try:
                response = connection.send_transfer(amount_cents, destination_key)
            except OSError:
                return TransferOutcome.failed(TransferErrorCode.CONNECTION_ERROR)

        return self._map_response(response)

    @staticmethod
    def _map_response(response: str) -> TransferOutcome:
        return _RESPONSE_OUTCOMES.get(response, TransferOutcome.failed(TransferErrorCode.INTERNAL_ERROR))
