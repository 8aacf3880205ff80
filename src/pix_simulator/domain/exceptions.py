class PixError(Exception):
    """Base exception for Pix simulator errors."""


class TransportError(PixError, ConnectionError):
    """Raised by a connection or server when the Pix server cannot be reached."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"Pix server unreachable during {operation}: {reason}")
