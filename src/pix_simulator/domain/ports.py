from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self

import structlog


logger = structlog.get_logger()


class Connection(ABC):
    """A short-lived link to the Pix server, used for one transfer and then closed."""

    @abstractmethod
    def send_transfer(self, amount_cents: int, destination_key: str) -> str:
        """Send a transfer request and return the server's raw response code.

        Raises:
            TransportError: the server could not be reached.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying transport resource."""

    def release(self) -> None:
        """Close the connection, logging instead of raising if that fails.

        A failing close never changes the outcome of the transfer.
        """
        try:
            self.close()
        except Exception:
            logger.warning("pix_connection_release_failed", connection=type(self).__name__, exc_info=True)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.release()


class ConnectionProvider(ABC):
    """Hands out a fresh connection to the Pix server on demand."""

    @abstractmethod
    def open_connection(self) -> Connection:
        """Open a new connection.

        Raises:
            TransportError: the server could not be reached.
        """
