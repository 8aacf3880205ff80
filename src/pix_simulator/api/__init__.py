"""HTTP surface - sandbox Pix server."""

from pix_simulator.api.sandbox import create_sandbox_app


__all__ = ["create_sandbox_app"]
