from typing import Literal

import click
import structlog
import uvicorn

from pix_simulator.api.sandbox import create_sandbox_app
from pix_simulator.application.controller import TransferController
from pix_simulator.application.processor import TransferProcessor
from pix_simulator.config import settings
from pix_simulator.domain.ports import ConnectionProvider
from pix_simulator.infrastructure.fake_server import FakeServer
from pix_simulator.infrastructure.http_server import HttpServer
from pix_simulator.logging import configure_logging


logger = structlog.get_logger()


def build_server(transport: Literal["fake", "http"]) -> ConnectionProvider:
    if transport == "http":
        return HttpServer(settings.pix_server_url, settings.pix_server_timeout_seconds)
    return FakeServer(response_code=settings.fake_response_code)


@click.group()
def cli() -> None:
    """Pix transfer simulator."""
    configure_logging(
        level=settings.log_level,
        log_format=settings.log_format,
    )


@cli.command()
@click.option("--amount", "amount_cents", type=int, default=2000, show_default=True, help="Amount in cents.")
@click.option("--key", "destination_key", default="abc123", show_default=True, help="Payee Pix key.")
@click.option(
    "--transport",
    type=click.Choice(["fake", "http"]),
    default=None,
    help="Pix server transport (defaults to TRANSPORT setting).",
)
def confirm(amount_cents: int, destination_key: str, transport: Literal["fake", "http"] | None) -> None:
    """Confirm a Pix transfer and print the resulting message."""
    transport = transport or settings.transport
    logger.info("confirming_pix", transport=transport)

    controller = TransferController(TransferProcessor(build_server(transport)))
    click.echo(controller.on_confirm(amount_cents, destination_key))


@cli.command("serve-sandbox")
@click.option("--host", default=None, help="Bind address (defaults to SANDBOX_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (defaults to SANDBOX_PORT).")
@click.option("--response-code", default="SUCCESS", show_default=True, help="Code returned for every transfer.")
def serve_sandbox(host: str | None, port: int | None, response_code: str) -> None:
    """Run a sandbox Pix server for the http transport."""
    host = host or settings.sandbox_host
    port = port or settings.sandbox_port
    logger.info("starting_pix_sandbox", host=host, port=port, response_code=response_code)
    uvicorn.run(
        create_sandbox_app(response_code),
        host=host,
        port=port,
        log_level="warning",
        access_log=False,
    )


if __name__ == "__main__":
    cli()
