import time
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram


P = ParamSpec("P")
R = TypeVar("R")

PIX_TRANSFERS_TOTAL = Counter(
    "pix_transfers_total",
    "Total number of confirmed Pix transfer attempts",
    ["status", "error_code"],
)

PIX_TRANSFER_DURATION_SECONDS = Histogram(
    "pix_transfer_duration_seconds",
    "Pix transfer processing duration",
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

PIX_CONNECTIONS_OPENED_TOTAL = Counter(
    "pix_connections_opened_total",
    "Total number of connections opened to the Pix server",
    ["transport"],
)


def track_transfer_duration(func: Callable[P, R]) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            PIX_TRANSFER_DURATION_SECONDS.observe(duration)

    return wrapper
