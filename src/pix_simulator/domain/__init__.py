"""Domain layer - transfer entities, outcomes and collaborator ports."""

from pix_simulator.domain.exceptions import PixError, TransportError
from pix_simulator.domain.models import (
    ResponseCode,
    TransferErrorCode,
    TransferOutcome,
    TransferRequest,
)
from pix_simulator.domain.ports import Connection, ConnectionProvider


__all__ = [
    "Connection",
    "ConnectionProvider",
    "PixError",
    "ResponseCode",
    "TransferErrorCode",
    "TransferOutcome",
    "TransferRequest",
    "TransportError",
]
