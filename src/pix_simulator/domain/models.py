from dataclasses import dataclass
from enum import Enum


class ResponseCode(Enum):
    SUCCESS = "SUCCESS"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"


class TransferErrorCode(Enum):
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    BLANK_KEY = "BLANK_KEY"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"


@dataclass(frozen=True)
class TransferRequest:
    amount_cents: int
    destination_key: str


@dataclass(frozen=True)
class TransferOutcome:
    """Result of a single transfer attempt: success, or exactly one failure kind."""

    error_code: TransferErrorCode | None = None

    @property
    def is_success(self) -> bool:
        return self.error_code is None

    @classmethod
    def succeeded(cls) -> "TransferOutcome":
        return cls()

    @classmethod
    def failed(cls, error_code: TransferErrorCode) -> "TransferOutcome":
        return cls(error_code=error_code)
