import structlog
from ulid import ULID

from pix_simulator.application.messages import message_for
from pix_simulator.application.processor import TransferProcessor
from pix_simulator.domain.models import TransferErrorCode, TransferOutcome
from pix_simulator.infrastructure.metrics import PIX_TRANSFERS_TOTAL, track_transfer_duration


logger = structlog.get_logger()


class TransferController:
    """Presentation adapter: turns a confirmed Pix into the message shown to the user."""

    def __init__(self, processor: TransferProcessor) -> None:
        self.processor = processor

    def on_confirm(self, amount_cents: int, destination_key: str | None) -> str:
        log = logger.bind(
            transfer_id=str(ULID()),
            amount_cents=amount_cents,
            destination_key=destination_key,
        )

        outcome = self._execute(amount_cents, destination_key)
        self._record(outcome, log)
        return message_for(outcome)

    @track_transfer_duration
    def _execute(self, amount_cents: int, destination_key: str | None) -> TransferOutcome:
        return self.processor.execute_transfer(amount_cents, destination_key)

    @staticmethod
    def _record(outcome: TransferOutcome, log: structlog.stdlib.BoundLogger) -> None:
        if outcome.is_success:
            PIX_TRANSFERS_TOTAL.labels(status="CONFIRMED", error_code="").inc()
            log.info("transfer_confirmed")
            return

        error_code = outcome.error_code
        assert error_code is not None
        PIX_TRANSFERS_TOTAL.labels(status="REJECTED", error_code=error_code.value).inc()
        if error_code is TransferErrorCode.CONNECTION_ERROR:
            log.warning("transfer_connection_failed", error_code=error_code.value)
        elif error_code is TransferErrorCode.INTERNAL_ERROR:
            log.error("transfer_failed", error_code=error_code.value)
        else:
            log.info("transfer_rejected", error_code=error_code.value)
