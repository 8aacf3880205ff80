"""Application layer - transfer processing and presentation."""

from pix_simulator.application.controller import TransferController
from pix_simulator.application.messages import message_for
from pix_simulator.application.processor import TransferProcessor


__all__ = [
    "TransferController",
    "TransferProcessor",
    "message_for",
]
